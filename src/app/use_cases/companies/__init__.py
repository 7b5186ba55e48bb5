"""
Company Use Cases
"""

from .complete_onboarding_use_case import CompleteOnboardingUseCase

__all__ = ["CompleteOnboardingUseCase"]

"""
Use Cases

Organized into domain folders:
- auth/: Registration, verification, login, password and email changes
- companies/: Company lifecycle (onboarding completion)
- departments/, roles/, employees/: Tenant-scoped onboarding data

Import from subdirectories.
"""

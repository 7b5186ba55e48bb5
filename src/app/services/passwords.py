"""Password hashing and verification using bcrypt."""

import string

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a plaintext password with bcrypt. Returns a utf-8 string."""
    salt = bcrypt.gensalt(rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Return True if password matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Over-long input or a corrupt stored hash never matches
        return False


SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def password_policy_violations(password: str) -> list[str]:
    """Return one message per password rule the candidate breaks, in rule order."""
    violations = []
    if len(password) < 8:
        violations.append("Password must be at least 8 characters long")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        violations.append(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
    if not any(c in string.ascii_uppercase for c in password):
        violations.append("Password must include at least one uppercase letter")
    if not any(c in string.digits for c in password):
        violations.append("Password must include at least one number")
    if not any(c in SPECIAL_CHARACTERS for c in password):
        violations.append("Password must include at least one special character")
    return violations

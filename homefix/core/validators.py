"""
homefix/core/validators.py

Password Validator

Validates password strength based on:
- ASCII-only characters
- Minimum and maximum length
- At least one letter and one digit
"""

from typing import Final


# -------------------------------
# Constants
# -------------------------------
MIN_PASSWORD_LENGTH: Final[int] = 8
MAX_PASSWORD_LENGTH: Final[int] = 72  # bcrypt ignores anything past 72 bytes


# -------------------------------
# Validator Function
# -------------------------------
def password_validator(password: str) -> str:
    """
    Validates password strength.

    Rules:
    - Must contain only ASCII characters
    - Must include at least one letter
    - Must include at least one digit
    - Length must be between MIN_PASSWORD_LENGTH and MAX_PASSWORD_LENGTH

    Returns:
        str: The valid password (if all checks pass)

    Raises:
        ValueError: If any rule is violated
    """
    if not password.isascii():
        raise ValueError("Password must contain only ASCII characters.")

    if not any(c.isalpha() for c in password):
        raise ValueError("Password must contain at least one letter.")

    if not any(c.isdigit() for c in password):
        raise ValueError("Password must contain at least one digit.")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

    if len(password) > MAX_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_LENGTH} characters long.")

    return password

"""User credentials: passwords, permissions and real names."""

from __future__ import annotations

import re
import secrets
import unicodedata

DIGITS = "0123456789"
SPECIALS = "~=+%^*()_[]{}!@#$?"
ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    + DIGITS
    + SPECIALS
)

PERMISSIONS = (
    "admin",
    "analyst",
    "deploy",
    "read_only",
    "global_admin",
    "global_analyst",
    "global_read_only",
)

_API_PERMISSIONS = {
    "analyst": "analytic",
    "read_only": "auditor",
    "global_read_only": "partner_auditor",
    "global_analyst": "partner_analytic",
    "global_admin": "partner_admin",
}

_REALNAME = re.compile(r"[A-Za-z0-9_]+[\t\n\f\r ]+[A-Za-z0-9_]+")

_MIN_PASSWORD_LENGTH = 7


def generate_password(length: int) -> str:
    """Generate a random password holding at least one digit and one special character."""
    if length < 2:
        raise ValueError(f"password length must be at least 2, got: {length}")
    rng = secrets.SystemRandom()
    chars = [rng.choice(DIGITS), rng.choice(SPECIALS)]
    chars.extend(rng.choice(ALPHABET) for _ in range(length - 2))
    rng.shuffle(chars)
    return "".join(chars)


def is_password_valid(password: str) -> bool:
    """Tell whether a password is long enough and mixes the required character classes."""
    has_upper = has_lower = has_number = has_special = False
    for char in password:
        category = unicodedata.category(char)
        if category == "Lu":
            has_upper = True
        elif category == "Ll":
            has_lower = True
        elif category.startswith("N"):
            has_number = True
        elif category.startswith(("P", "S")):
            has_special = True
    has_min_len = len(password.encode("utf-8")) >= _MIN_PASSWORD_LENGTH
    return has_min_len and has_upper and has_lower and has_number and has_special


def map_permission(permission: str) -> str:
    """Translate a configured permission into the name the API expects."""
    return _API_PERMISSIONS.get(permission, permission)


def validate_realname(realname: str) -> str:
    """Check that a real name holds two words separated by whitespace."""
    if not _REALNAME.search(realname):
        raise ValueError(
            "invalid value for realname "
            "(There should be two words separated by one or more spaces)"
        )
    return realname


def validate_permission(permission: str) -> str:
    """Check that a permission is one of the known user roles."""
    if permission not in PERMISSIONS:
        raise ValueError(
            f"expected permissions to be one of [{' '.join(PERMISSIONS)}], got {permission}"
        )
    return permission
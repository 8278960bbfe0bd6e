"""
Input validation for the label front end

Each validator normalizes its input (trimming, uppercasing) and returns the
normalized value, or raises ValidationError with a message meant for the
person typing the command.
"""
from __future__ import annotations

import re

from .device.categories import is_known_category
from .errors import ValidationError

PASSWORD_EXAMPLE = "482-91-573"
SETUP_ID_EXAMPLE = "HSPN"
MAC_EXAMPLE = "30AEA40506A0"

_SETUP_ID_CHARS = re.compile(r"[0-9A-Z]")
_MAC_CHARS = re.compile(r"[0-9A-F]")


def validate_category(category: int) -> int:
    if category < 1:
        raise ValidationError("Category must be a positive number", field="category")
    if not is_known_category(category):
        raise ValidationError(
            f"Invalid category ID: {category}. Use 'list-categories' to see available categories",
            field="category",
        )
    return category


def validate_password(password: str) -> str:
    """Check the XXX-XX-XXX format (3 digits, dash, 2 digits, dash, 3 digits)"""
    password = password.strip()
    if len(password) != 10:
        raise ValidationError(
            f"Invalid password length ({len(password)}). Expected format: XXX-XX-XXX (e.g., {PASSWORD_EXAMPLE})",
            field="password",
        )

    parts = password.split("-")
    if [len(p) for p in parts] != [3, 2, 3]:
        raise ValidationError(
            f"Invalid password format. Expected format: XXX-XX-XXX (e.g., {PASSWORD_EXAMPLE})",
            field="password",
        )

    for i, part in enumerate(parts, start=1):
        if not (part.isascii() and part.isdigit()):
            raise ValidationError(
                f"Password part {i} contains non-numeric characters. Expected format: XXX-XX-XXX",
                field="password",
            )

    return password


def validate_setup_id(setup_id: str) -> str:
    """4 characters from 0-9 and A-Z; lowercase input is accepted and uppercased"""
    setup_id = setup_id.strip().upper()
    if len(setup_id) != 4:
        raise ValidationError(
            "Invalid setup ID length. Expected 4 alphanumeric characters (0-9, A-Z)",
            field="setup_id",
        )

    for i, ch in enumerate(setup_id, start=1):
        if not _SETUP_ID_CHARS.fullmatch(ch):
            raise ValidationError(
                f"Invalid character '{ch}' at position {i}. Setup ID must contain only 0-9 and A-Z",
                field="setup_id",
            )

    return setup_id


def validate_mac(mac: str) -> str:
    """12 hexadecimal characters without separators"""
    mac = mac.strip().upper()
    if len(mac) != 12:
        raise ValidationError(
            f"Invalid MAC address length. Expected 12 hexadecimal characters (e.g., {MAC_EXAMPLE})",
            field="mac",
        )

    for i, ch in enumerate(mac, start=1):
        if not _MAC_CHARS.fullmatch(ch):
            raise ValidationError(
                f"Invalid character '{ch}' at position {i}. "
                "MAC address must contain only hexadecimal characters (0-9, A-F)",
                field="mac",
            )

    return mac


def validate_output_path(output: str) -> str:
    output = output.strip()
    if not output:
        raise ValidationError("Output path cannot be empty", field="output")
    if not output.lower().endswith(".png"):
        raise ValidationError("Output file must have .png extension", field="output")
    return output

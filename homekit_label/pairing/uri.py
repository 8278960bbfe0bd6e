"""
HomeKit setup URI encoding

The URI printed in the setup QR code is::

    X-HM://{payload: 9 base-36 digits}{setup id: 4 chars}

The payload packs five fixed-width fields, most significant first. Field
order, widths and the constant values are part of the pairing protocol and
are read by third-party scanners, so none of them may change.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from ..errors import ValidationError
from .codes import SETUP_CODE_MAX, format_setup_code, plain_setup_code

logger = logging.getLogger(__name__)

URI_PREFIX = "X-HM://"
BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PAYLOAD_DIGITS = 9
SETUP_ID_LENGTH = 4
URI_LENGTH = len(URI_PREFIX) + PAYLOAD_DIGITS + SETUP_ID_LENGTH

PAYLOAD_VERSION = 0
PAYLOAD_RESERVED = 0
PAYLOAD_FLAGS = 2  # IP transport


class PayloadField(NamedTuple):
    name: str
    width: int

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1


# Most significant field first: 3 + 4 + 8 + 4 + 27 = 46 bits
PAYLOAD_LAYOUT: tuple[PayloadField, ...] = (
    PayloadField("version", 3),
    PayloadField("reserved", 4),
    PayloadField("category", 8),
    PayloadField("flags", 4),
    PayloadField("password", 27),
)

PAYLOAD_BITS = sum(f.width for f in PAYLOAD_LAYOUT)


@dataclass(frozen=True)
class SetupPayload:
    """Decoded contents of a setup URI"""

    category: int
    password: str
    setup_id: str
    version: int = PAYLOAD_VERSION
    reserved: int = PAYLOAD_RESERVED
    flags: int = PAYLOAD_FLAGS


def pack_fields(values: dict[str, int]) -> int:
    """Fold field values into one integer following PAYLOAD_LAYOUT; oversized values are masked"""
    payload = 0
    for field in PAYLOAD_LAYOUT:
        payload = (payload << field.width) | (values[field.name] & field.mask)
    return payload


def unpack_payload(payload: int) -> dict[str, int]:
    """Split a packed payload back into its named fields"""
    values: dict[str, int] = {}
    for field in reversed(PAYLOAD_LAYOUT):
        values[field.name] = payload & field.mask
        payload >>= field.width
    return {field.name: values[field.name] for field in PAYLOAD_LAYOUT}


def pack_payload(category: int, password: str | int) -> int:
    """
    Build the setup payload for a category and password

    ``password`` may be an integer or a setup code with or without dashes.
    Values wider than their field are truncated, not rejected. A string that
    is not plain ASCII digits once dashes are removed packs as password 0.
    """
    if isinstance(password, str):
        plain = plain_setup_code(password)
        password = int(plain) if plain.isascii() and plain.isdigit() else 0

    return pack_fields({
        "version": PAYLOAD_VERSION,
        "reserved": PAYLOAD_RESERVED,
        "category": category,
        "flags": PAYLOAD_FLAGS,
        "password": password,
    })


def encode_base36(value: int, width: int = PAYLOAD_DIGITS) -> str:
    """Render ``value`` as exactly ``width`` base-36 digits, most significant first"""
    if value < 0:
        raise ValueError("value must be non-negative")

    digits = []
    for _ in range(width):
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def decode_base36(text: str) -> int:
    value = 0
    for ch in text:
        index = BASE36_ALPHABET.find(ch)
        if index < 0:
            raise ValidationError(f"Invalid base-36 character '{ch}'", field="payload")
        value = value * 36 + index
    return value


def _check_preconditions(category: int, plain: str, setup_id: str) -> None:
    if not 0 <= category <= 0xFF:
        raise ValidationError(f"Category {category} does not fit in 8 bits", field="category")

    if not plain.isascii() or not plain.isdigit():
        raise ValidationError("Password must contain only digits and dashes", field="password")

    if int(plain) > SETUP_CODE_MAX:
        raise ValidationError(f"Password {plain} exceeds 8 digits", field="password")

    if len(setup_id) != SETUP_ID_LENGTH:
        raise ValidationError(
            f"Setup ID must be exactly {SETUP_ID_LENGTH} characters, got {len(setup_id)}",
            field="setup_id",
        )


def encode_setup_uri(category: int, password: str, setup_id: str, strict: bool = True) -> str:
    """
    Generate a HomeKit setup URI

    Args:
        category: HomeKit device category ID
        password: Setup password, e.g. "613-80-755" (dashes optional)
        setup_id: 4-character setup ID, appended verbatim
        strict: Reject out-of-range input instead of silently truncating it

    Returns:
        URI such as "X-HM://0053158R7HSPN"

    Raises:
        ValidationError: If ``strict`` and an input is out of range
    """
    plain = plain_setup_code(password)
    if strict:
        _check_preconditions(category, plain, setup_id)

    payload = pack_payload(category, plain)
    uri = f"{URI_PREFIX}{encode_base36(payload)}{setup_id}"
    logger.debug(f"Encoded setup URI for category {category}: {uri}")
    return uri


def decode_setup_uri(uri: str) -> SetupPayload:
    """
    Parse a setup URI back into its fields

    Raises:
        ValidationError: If the URI is not a well-formed setup URI
    """
    if not uri.startswith(URI_PREFIX):
        raise ValidationError(f"Setup URI must start with {URI_PREFIX}", field="uri")

    if len(uri) != URI_LENGTH:
        raise ValidationError(
            f"Setup URI must be {URI_LENGTH} characters, got {len(uri)}", field="uri"
        )

    body = uri[len(URI_PREFIX):]
    payload = decode_base36(body[:PAYLOAD_DIGITS])
    if payload >> PAYLOAD_BITS:
        raise ValidationError("Setup URI payload exceeds 46 bits", field="uri")

    fields = unpack_payload(payload)
    if fields["password"] > SETUP_CODE_MAX:
        raise ValidationError("Setup URI password exceeds 8 digits", field="uri")

    return SetupPayload(
        category=fields["category"],
        password=format_setup_code(f"{fields['password']:08d}"),
        setup_id=body[PAYLOAD_DIGITS:],
        version=fields["version"],
        reserved=fields["reserved"],
        flags=fields["flags"],
    )

"""
Random identifiers printed on the label

Setup ID, MAC address, device code, serial number and CSN. Every generator
takes an optional random source so callers (and tests) can make the output
reproducible.
"""
from __future__ import annotations

import string

from ..pairing.codes import RandomSource, default_rng

SETUP_ID_ALPHABET = string.digits + string.ascii_uppercase
MAC_ALPHABET = "0123456789ABCDEF"
SETUP_ID_LENGTH = 4
MAC_LENGTH = 12


def _pick(rng: RandomSource, alphabet: str) -> str:
    return alphabet[rng.randint(0, len(alphabet) - 1)]


def _letter(rng: RandomSource) -> str:
    return _pick(rng, string.ascii_uppercase)


def _digit(rng: RandomSource) -> str:
    return _pick(rng, string.digits)


def _letters(rng: RandomSource, count: int) -> str:
    return "".join(_letter(rng) for _ in range(count))


def _digits(rng: RandomSource, count: int) -> str:
    return "".join(_digit(rng) for _ in range(count))


def generate_setup_id(rng: RandomSource | None = None) -> str:
    """4 characters from 0-9 and A-Z (e.g., "HSPN")"""
    rng = rng or default_rng
    return "".join(_pick(rng, SETUP_ID_ALPHABET) for _ in range(SETUP_ID_LENGTH))


def generate_mac(rng: RandomSource | None = None) -> str:
    """12 uppercase hex characters (e.g., "30AEA40506A0")"""
    rng = rng or default_rng
    return "".join(_pick(rng, MAC_ALPHABET) for _ in range(MAC_LENGTH))


def format_mac(mac: str) -> str:
    """
    Add colons every 2 characters

    Example: "30aea40506a0" -> "30:AE:A4:05:06:A0". Input that is not
    12 characters long is returned unchanged.
    """
    if len(mac) != MAC_LENGTH:
        return mac
    return ":".join(mac[i:i + 2] for i in range(0, MAC_LENGTH, 2)).upper()


def generate_device_code(category: int, rng: RandomSource | None = None) -> str:
    """
    Device code: 2 letters, category ID, letter, digit, 2 letters, "/", letter

    Example: "AB5C2DE/F"
    """
    rng = rng or default_rng
    return (
        f"{_letters(rng, 2)}{category}{_letter(rng)}{_digit(rng)}"
        f"{_letters(rng, 2)}/{_letter(rng)}"
    )


def generate_serial(rng: RandomSource | None = None) -> str:
    """12 characters: letter, digit, 3 letters, digit, letter, 3 digits, 2 letters"""
    rng = rng or default_rng
    return (
        _letter(rng)
        + _digit(rng)
        + _letters(rng, 3)
        + _digit(rng)
        + _letter(rng)
        + _digits(rng, 3)
        + _letters(rng, 2)
    )


def generate_csn(rng: RandomSource | None = None) -> str:
    """33 characters: 20 digits, 3 letters, 4 digits, letter, digit, letter, 3 digits"""
    rng = rng or default_rng
    return (
        _digits(rng, 20)
        + _letters(rng, 3)
        + _digits(rng, 4)
        + _letter(rng)
        + _digit(rng)
        + _letter(rng)
        + _digits(rng, 3)
    )

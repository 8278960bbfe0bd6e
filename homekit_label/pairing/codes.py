"""
Setup code generation

Generates 8-digit HomeKit setup codes (displayed as XXX-XX-XXX) and rejects
codes that are trivially guessable.
"""
from __future__ import annotations

import logging
import secrets
from typing import Protocol

from ..errors import EntropyExhaustedError

logger = logging.getLogger(__name__)

SETUP_CODE_LENGTH = 8
SETUP_CODE_MIN = 10_000_000
SETUP_CODE_MAX = 99_999_999
DEFAULT_MAX_ATTEMPTS = 10_000

# Explicit deny-list; overlaps with the pattern rules in is_too_simple()
SETUP_CODE_DENYLIST = frozenset({"12345678", "87654321", "00000000", "11111111"})


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b] (random.Random, SystemRandom)."""

    def randint(self, a: int, b: int) -> int: ...


default_rng: RandomSource = secrets.SystemRandom()


def plain_setup_code(code: str) -> str:
    """
    Strip dash separators from a setup code

    Example: "613-80-755" -> "61380755"
    """
    return code.replace("-", "")


def format_setup_code(raw: str) -> str:
    """Group an 8-digit code as XXX-XX-XXX"""
    return f"{raw[0:3]}-{raw[3:5]}-{raw[5:8]}"


def is_too_simple(raw: str) -> bool:
    """
    Check whether an 8-digit code is too easy to guess

    Rejects:
    - all digits the same (00000000, 11111111, ...)
    - ascending or descending runs (12345678 / 87654321)
    - a two-digit block repeated four times (12121212, 34343434, ...)
    - anything on the deny-list
    """
    if len(set(raw)) == 1:
        return True

    steps = {ord(raw[i]) - ord(raw[i - 1]) for i in range(1, len(raw))}
    if steps == {1} or steps == {-1}:
        return True

    if raw[0:2] == raw[2:4] == raw[4:6] == raw[6:8]:
        return True

    return raw in SETUP_CODE_DENYLIST


def is_valid_setup_code(code: str) -> bool:
    """
    Validate a setup code

    Accepts codes with or without dashes. The code must contain exactly
    8 ASCII digits and must not be too simple. Never raises.

    Args:
        code: Code to validate

    Returns:
        True if valid
    """
    if not isinstance(code, str):
        return False

    raw = plain_setup_code(code)
    if len(raw) != SETUP_CODE_LENGTH:
        return False

    if not all("0" <= ch <= "9" for ch in raw):
        return False

    return not is_too_simple(raw)


class SetupCodeGenerator:
    """
    Setup code generator with an injectable random source

    Draws uniformly from [10000000, 99999999] and resamples until the code
    passes the triviality filter. Gives up with EntropyExhaustedError after
    ``max_attempts`` draws.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng if rng is not None else default_rng
        self.max_attempts = max_attempts

    def generate_raw(self) -> str:
        """Return an accepted code as 8 plain digits"""
        for attempt in range(1, self.max_attempts + 1):
            raw = f"{self.rng.randint(SETUP_CODE_MIN, SETUP_CODE_MAX):08d}"
            if not is_too_simple(raw):
                return raw
            logger.debug(f"Rejected trivial setup code on attempt {attempt}")

        logger.error(f"Setup code generation failed after {self.max_attempts} attempts")
        raise EntropyExhaustedError(self.max_attempts)

    def generate(self) -> str:
        """Return an accepted code formatted as XXX-XX-XXX"""
        return format_setup_code(self.generate_raw())


def generate_setup_code(
    rng: RandomSource | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Generate a HomeKit setup code

    Args:
        rng: Random source (default: process-wide SystemRandom)
        max_attempts: Upper bound on draws before giving up

    Returns:
        Setup code (e.g., "613-80-755")
    """
    return SetupCodeGenerator(rng=rng, max_attempts=max_attempts).generate()

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    VALIDATION_FAILED = "VALIDATION_FAILED"
    ENTROPY_EXHAUSTED = "ENTROPY_EXHAUSTED"
    RENDER_FAILED = "RENDER_FAILED"
    CONFIG_INVALID = "CONFIG_INVALID"


class LabelError(Exception):
    def __init__(self, message: str, error_code: ErrorCode, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code.value,
            "message": str(self),
            "details": self.details,
        }


class ValidationError(LabelError, ValueError):
    def __init__(self, message: str | None = None, field: str | None = None):
        msg = message or "Invalid input"
        super().__init__(msg, ErrorCode.VALIDATION_FAILED, {"field": field} if field else None)
        self.field = field


class EntropyExhaustedError(LabelError):
    def __init__(self, attempts: int):
        super().__init__(
            f"No acceptable setup code after {attempts} attempts; random source looks broken",
            ErrorCode.ENTROPY_EXHAUSTED,
            {"attempts": attempts},
        )
        self.attempts = attempts


class RenderError(LabelError):
    def __init__(self, message: str | None = None):
        msg = message or "Label rendering failed"
        super().__init__(msg, ErrorCode.RENDER_FAILED)


class ConfigError(LabelError):
    def __init__(self, message: str | None = None, path: str | None = None):
        msg = message or "Invalid configuration"
        super().__init__(msg, ErrorCode.CONFIG_INVALID, {"path": path} if path else None)


__all__ = [
    "ErrorCode",
    "LabelError",
    "ValidationError",
    "EntropyExhaustedError",
    "RenderError",
    "ConfigError",
]

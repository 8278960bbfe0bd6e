"""
homekit-label: printable HomeKit setup labels.

The pairing primitives are importable directly::

    from homekit_label import encode_setup_uri, generate_setup_code

    code = generate_setup_code()
    uri = encode_setup_uri(5, code, "HSPN")
"""

__version__ = "0.1.0"

from .errors import EntropyExhaustedError, LabelError, ValidationError
from .pairing import (
    decode_setup_uri,
    encode_setup_uri,
    generate_setup_code,
    is_valid_setup_code,
    plain_setup_code,
)

__all__ = [
    "__version__",
    "EntropyExhaustedError",
    "LabelError",
    "ValidationError",
    "decode_setup_uri",
    "encode_setup_uri",
    "generate_setup_code",
    "is_valid_setup_code",
    "plain_setup_code",
]

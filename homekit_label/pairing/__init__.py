"""HomeKit pairing primitives (setup codes, setup URIs)"""

from .codes import (
    SETUP_CODE_DENYLIST,
    SetupCodeGenerator,
    format_setup_code,
    generate_setup_code,
    is_too_simple,
    is_valid_setup_code,
    plain_setup_code,
)
from .uri import (
    PAYLOAD_LAYOUT,
    URI_PREFIX,
    SetupPayload,
    decode_setup_uri,
    encode_base36,
    encode_setup_uri,
    pack_payload,
    unpack_payload,
)

__all__ = [
    "SETUP_CODE_DENYLIST",
    "SetupCodeGenerator",
    "format_setup_code",
    "generate_setup_code",
    "is_too_simple",
    "is_valid_setup_code",
    "plain_setup_code",
    "PAYLOAD_LAYOUT",
    "URI_PREFIX",
    "SetupPayload",
    "decode_setup_uri",
    "encode_base36",
    "encode_setup_uri",
    "pack_payload",
    "unpack_payload",
]

"""Accessory metadata (categories, printed identifiers)"""

from .categories import CATEGORY_REFERENCE, category_name, is_known_category, list_categories
from .identifiers import (
    format_mac,
    generate_csn,
    generate_device_code,
    generate_mac,
    generate_serial,
    generate_setup_id,
)

__all__ = [
    "CATEGORY_REFERENCE",
    "category_name",
    "is_known_category",
    "list_categories",
    "format_mac",
    "generate_csn",
    "generate_device_code",
    "generate_mac",
    "generate_serial",
    "generate_setup_id",
]

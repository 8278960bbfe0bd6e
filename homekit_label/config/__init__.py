"""Configuration (settings schema and loader)"""

from .loader import invalidate_config_cache, load_config
from .schema import BASE_LABEL_WIDTH, LabelSettings

__all__ = [
    "BASE_LABEL_WIDTH",
    "LabelSettings",
    "invalidate_config_cache",
    "load_config",
]

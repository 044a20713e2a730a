from .config import Settings, get_settings, parse_list
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "parse_list",
    "configure_logging",
]

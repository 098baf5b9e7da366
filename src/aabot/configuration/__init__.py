from aabot.configuration.repository import ConfigRepository, default_update
from aabot.configuration.schemas import (
    SENSITIVE_FIELDS,
    ConfigurationUpdate,
    ConfigurationView,
    mask_secret,
)

__all__ = [
    "SENSITIVE_FIELDS",
    "ConfigRepository",
    "ConfigurationUpdate",
    "ConfigurationView",
    "default_update",
    "mask_secret",
]

"""Translation between decrypted configuration and stored rows."""

from __future__ import annotations

import structlog

from aabot.config.encryption import FieldCipher
from aabot.configuration.schemas import (
    SENSITIVE_FIELDS,
    ConfigurationUpdate,
    ConfigurationView,
)
from aabot.errors import ConfigurationError, DecryptionError
from aabot.models.bot_configuration import BotConfiguration

logger = structlog.get_logger()


def to_storage_shape(
    update: ConfigurationUpdate, salt: str, cipher: FieldCipher
) -> dict:
    """Column values for *update*, with sensitive fields encrypted under *salt*.

    Only supplied fields appear in the result, plus ``encryption_salt``.
    """
    values: dict = {}
    for name, value in update.present_fields().items():
        if name in SENSITIVE_FIELDS:
            values[name] = cipher.encrypt(value, salt)
        else:
            values[name] = value
    values["encryption_salt"] = salt
    return values


def to_application_shape(row: BotConfiguration, cipher: FieldCipher) -> ConfigurationView:
    """Decrypted view of *row*.

    A row without a salt is a legacy record and its sensitive columns are
    returned unchanged.
    """
    salt = row.encryption_salt
    secrets: dict[str, str] = {}
    for name in SENSITIVE_FIELDS:
        stored = getattr(row, name) or ""
        if not salt:
            secrets[name] = stored
            continue
        try:
            secrets[name] = cipher.decrypt(stored, salt)
        except DecryptionError as exc:
            logger.error("configuration_decrypt_failed", field=name, config_id=row.id)
            raise ConfigurationError("Configuration decryption failed") from exc

    return ConfigurationView(
        id=row.id,
        workspace_name=row.workspace_name,
        search_limit=row.search_limit,
        enable_voting=row.enable_voting,
        encryption_salt=salt,
        created_at=row.created_at,
        updated_at=row.updated_at,
        **secrets,
    )

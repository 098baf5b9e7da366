"""Persistence of the singleton bot configuration.

This is the only code that reads or writes ``bot_configurations``.  Every
read decrypts through :mod:`aabot.configuration.mapper`; every write encrypts
under the record's salt.
"""

from __future__ import annotations

import sqlalchemy as sa
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from aabot.config.encryption import FieldCipher, get_cipher
from aabot.config.settings import Settings, get_settings
from aabot.configuration.mapper import to_application_shape, to_storage_shape
from aabot.configuration.schemas import (
    SENSITIVE_FIELDS,
    ConfigurationUpdate,
    ConfigurationView,
)
from aabot.errors import EncryptionUnavailable
from aabot.models.base import utcnow
from aabot.models.bot_configuration import BotConfiguration

logger = structlog.get_logger()


def default_update(settings: Settings) -> ConfigurationUpdate:
    """Full configuration used when the first update finds no record."""
    return ConfigurationUpdate(
        workspace_name=settings.default_workspace_name,
        apache_answer_api_url=settings.apache_answer_api_url,
        apache_answer_api_key=settings.apache_answer_api_key,
        slack_bot_token=settings.slack_bot_token,
        slack_app_token=settings.slack_app_token,
        slack_channel_id=settings.slack_channel_id,
        slack_signing_secret=settings.slack_signing_secret,
        search_limit=settings.search_result_limit,
        enable_voting=True,
    )


class ConfigRepository:
    """Get, create and update the configuration record.

    Each write commits the session it was given.
    """

    def __init__(
        self,
        session: AsyncSession,
        cipher: FieldCipher | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.session = session
        self.cipher = cipher or get_cipher()
        self.settings = settings or get_settings()

    async def _load_row(self, *, for_update: bool = False) -> BotConfiguration | None:
        stmt = (
            sa.select(BotConfiguration)
            .order_by(BotConfiguration.created_at, BotConfiguration.id)
            .limit(1)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _new_salt(self) -> str:
        salt = self.cipher.generate_salt()
        if not self.cipher.test_round_trip(salt):
            raise EncryptionUnavailable("Encryption test failed - cannot store configuration")
        return salt

    async def get(self) -> ConfigurationView | None:
        """Return the decrypted configuration, or ``None`` if none is stored."""
        row = await self._load_row()
        if row is None:
            return None
        return to_application_shape(row, self.cipher)

    async def create(self, update: ConfigurationUpdate) -> ConfigurationView:
        """Insert a new record under a freshly generated salt."""
        salt = self._new_salt()
        values = to_storage_shape(update, salt, self.cipher)
        values.setdefault("workspace_name", self.settings.default_workspace_name)

        now = utcnow()
        row = BotConfiguration(**values, created_at=now, updated_at=now)
        self.session.add(row)
        await self.session.flush()

        view = to_application_shape(row, self.cipher)
        await self.session.commit()
        logger.info("configuration_created", config_id=row.id)
        return view

    async def update(self, update: ConfigurationUpdate) -> ConfigurationView:
        """Merge *update* into the stored record, creating it if absent.

        The row is re-read under a row lock so concurrent partial updates
        serialize instead of overwriting each other.
        """
        row = await self._load_row(for_update=True)
        if row is None:
            merged = {
                **default_update(self.settings).present_fields(),
                **update.present_fields(),
            }
            return await self.create(ConfigurationUpdate(**merged))

        supplied = update.present_fields()
        salt = row.encryption_salt
        if not salt:
            salt = self._new_salt()
            self._encrypt_legacy_fields(row, salt, skip=supplied.keys())

        for name, value in to_storage_shape(update, salt, self.cipher).items():
            setattr(row, name, value)
        row.updated_at = utcnow()
        await self.session.flush()

        view = to_application_shape(row, self.cipher)
        await self.session.commit()
        logger.info("configuration_updated", config_id=row.id, fields=sorted(supplied))
        return view

    def _encrypt_legacy_fields(self, row: BotConfiguration, salt: str, skip) -> None:
        """Encrypt the plain-text sensitive columns of a salt-less record."""
        upgraded = []
        for name in SENSITIVE_FIELDS:
            if name in skip:
                continue
            plain = getattr(row, name)
            if plain:
                setattr(row, name, self.cipher.encrypt(plain, salt))
                upgraded.append(name)
        logger.info("legacy_configuration_encrypted", config_id=row.id, fields=upgraded)

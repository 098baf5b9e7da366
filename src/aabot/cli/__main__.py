"""CLI entry point: python -m aabot.cli {migrate-config,show-config,serve}"""

import argparse
import asyncio
import sys

import structlog
import uvicorn

from aabot.config.settings import Settings, get_settings
from aabot.configuration.repository import ConfigRepository, default_update
from aabot.configuration.schemas import (
    SENSITIVE_FIELDS,
    ConfigurationUpdate,
    ConfigurationView,
    mask_secret,
)
from aabot.db.session import get_session_factory
from aabot.logging_config import configure_logging


def describe_config(view: ConfigurationView) -> list[str]:
    """Human-readable lines for *view* with secrets masked."""
    return [
        f"Workspace: {view.workspace_name}",
        f"Apache Answer URL: {view.apache_answer_api_url or 'not set'}",
        f"Apache Answer API Key: {mask_secret(view.apache_answer_api_key)}",
        f"Slack Bot Token: {mask_secret(view.slack_bot_token)}",
        f"Slack App Token: {mask_secret(view.slack_app_token)}",
        f"Slack Channel ID: {view.slack_channel_id or 'not set'}",
        f"Slack Signing Secret: {mask_secret(view.slack_signing_secret)}",
        f"Search Limit: {view.search_limit}",
        f"Voting Enabled: {view.enable_voting}",
        f"Encrypted: {bool(view.encryption_salt)}",
    ]


def migration_update(settings: Settings, legacy: bool) -> ConfigurationUpdate:
    """Values to write from *settings*; blank settings never overwrite stored ones.

    A legacy record only takes the secrets explicitly set in the environment,
    so its workspace name, limits and stored secrets survive the upgrade.
    """
    values = {
        name: value
        for name, value in default_update(settings).present_fields().items()
        if value != ""
    }
    if legacy:
        values = {
            name: value
            for name, value in values.items()
            if name in SENSITIVE_FIELDS and name in settings.model_fields_set
        }
    return ConfigurationUpdate(**values)


async def run_migrate_config(session_factory, settings: Settings | None = None) -> bool:
    """Move integration settings from the environment into encrypted storage.

    Returns ``False`` when an encrypted record already exists and nothing was
    written.  A legacy plain-text record is upgraded in place.
    """
    log = structlog.get_logger()
    settings = settings or get_settings()

    async with session_factory() as session:
        repo = ConfigRepository(session, settings=settings)
        existing = await repo.get()
        if existing is not None and existing.encryption_salt:
            log.info("migration_skipped", reason="encrypted configuration already stored")
            return False

        view = await repo.update(migration_update(settings, legacy=existing is not None))

    log.info(
        "migration_complete",
        config_id=view.id,
        upgraded_legacy=existing is not None,
    )
    return True


async def run_show_config(session_factory) -> ConfigurationView | None:
    async with session_factory() as session:
        return await ConfigRepository(session).get()


def run_serve(host: str, port: int) -> None:
    """Serve the dashboard API; logging stays with :func:`configure_logging`."""
    uvicorn.run("aabot.api.app:app", host=host, port=port, log_config=None)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="aabot.cli",
        description="AABot configuration CLI",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser(
        "migrate-config",
        help="Store environment-provided integration settings encrypted in the database",
    )
    subparsers.add_parser("show-config", help="Print the stored configuration with secrets masked")
    serve_parser = subparsers.add_parser("serve", help="Run the dashboard API server")
    serve_parser.add_argument("--host", type=str, default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=5000, help="Port (default: 5000)")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    settings = get_settings()
    configure_logging(json_output=settings.log_json, log_level=settings.log_level)
    session_factory = get_session_factory()

    if args.command == "migrate-config":
        asyncio.run(run_migrate_config(session_factory))
    elif args.command == "show-config":
        view = asyncio.run(run_show_config(session_factory))
        if view is None:
            print("No configuration found")
            return
        for line in describe_config(view):
            print(f"  - {line}")
    elif args.command == "serve":
        run_serve(args.host, args.port)


if __name__ == "__main__":
    main()

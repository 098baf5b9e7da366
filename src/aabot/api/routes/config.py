"""REST API endpoints for the bot configuration."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from aabot.api.deps import get_config_repository
from aabot.api.schemas import ConfigResponse, ConfigUpdateRequest, config_to_response
from aabot.config.settings import get_settings
from aabot.configuration.repository import ConfigRepository
from aabot.configuration.schemas import ConfigurationView

logger = structlog.get_logger()

router = APIRouter(prefix="/api/bot", tags=["config"])


@router.get("/config", response_model=ConfigResponse)
async def get_config(
    repo: ConfigRepository = Depends(get_config_repository),
) -> ConfigResponse:
    """Return the stored configuration.

    If nothing has been saved yet, returns an unsaved default object with an
    empty ``id``.
    """
    view = await repo.get()
    if view is None:
        view = ConfigurationView(id="", workspace_name=get_settings().default_workspace_name)
    return config_to_response(view)


@router.patch("/config", response_model=ConfigResponse)
@router.put("/config", response_model=ConfigResponse)
async def update_config(
    body: ConfigUpdateRequest,
    repo: ConfigRepository = Depends(get_config_repository),
) -> ConfigResponse:
    """Apply a partial update; the first update creates the record."""
    updated_fields = sorted(body.present_fields())
    view = await repo.update(body)

    logger.info(
        "config_update_audit",
        updated_fields=updated_fields,
        workspace_name=view.workspace_name,
    )
    return config_to_response(view)

"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from models.config import TextSettings
from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: dict | None = None
    cors: dict | None = None
    text: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    cors: dict
    text: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        server=config.get("server", {}),
        cors=config.get("cors", {}),
        text=config.get("text", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    text_settings = None
    if request.text:
        try:
            text_settings = TextSettings.model_validate(
                {**current_config.get("text", {}), **request.text}
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise HTTPException(status_code=400, detail=f"Invalid text setting {field}: {error['msg']}")

    # Update only provided sections
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}
    if request.cors:
        current_config["cors"] = {**current_config.get("cors", {}), **request.cors}
    if text_settings is not None:
        current_config["text"] = text_settings.model_dump(mode="json", by_alias=True)

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}

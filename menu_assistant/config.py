from __future__ import annotations

import os

from pydantic import BaseModel, Field


DEFAULT_MENU_PATH = "data/menu.json"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip() == "1"


class Settings(BaseModel):
    menu_path: str = DEFAULT_MENU_PATH
    debug_trace: bool = False
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


def get_settings() -> Settings:
    """Read settings from the environment at call time."""
    return Settings(
        menu_path=os.getenv("MENU_PATH", DEFAULT_MENU_PATH).strip() or DEFAULT_MENU_PATH,
        debug_trace=_env_flag("DEBUG_TRACE"),
        host=os.getenv("HOST", "127.0.0.1").strip() or "127.0.0.1",
        port=os.getenv("PORT", "8000").strip() or "8000",
    )

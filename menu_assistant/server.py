from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator

from .bootstrap import load_index
from .chat import respond
from .config import Settings, get_settings
from .models import AgentResult, MenuIndex
from .phrases import APOLOGY_TEXT
from .utils import _trace


class ChatRequest(BaseModel):
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


def _apology(status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=AgentResult(text=APOLOGY_TEXT).to_payload())


def get_index(request: Request) -> MenuIndex:
    return request.app.state.menu_index


def create_app(index: Optional[MenuIndex] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the HTTP app. The menu is loaded once at startup unless `index` is given.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "menu_index", None) is None:
            app.state.menu_index = load_index(settings.menu_path, debug=settings.debug_trace)
        yield

    app = FastAPI(title="Menu Assistant API", lifespan=lifespan)
    app.state.menu_index = index
    app.state.settings = settings

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        _trace(True, "transport.error", {"path": request.url.path, "error_type": "RequestValidationError", "errors": len(exc.errors())})
        return _apology(400)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        _trace(True, "transport.error", {"path": request.url.path, "error_type": exc.__class__.__name__, "error_message": str(exc)[:200]})
        return _apology(500)

    @app.post("/api/chat", response_model=AgentResult, response_model_exclude_none=True)
    def chat(body: ChatRequest, request: Request) -> AgentResult:
        _trace(settings.debug_trace, "transport.request", {"message_length": len(body.message)})
        return respond(body.message, get_index(request), debug=settings.debug_trace)

    @app.get("/health")
    def health(request: Request) -> dict:
        return {"status": "ok", "items": len(get_index(request).items)}

    return app


app = create_app()

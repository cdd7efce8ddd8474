from __future__ import annotations

import os
from typing import Any

from .formatting import base_actions
from .models import AgentResult, MenuIndex
from .phrases import FALLBACK_TEXT
from .router import route
from .router_schema import RouteResult
from .utils import _trace


def _trace_enabled(debug: bool) -> bool:
    return bool(debug or os.getenv("DEBUG_TRACE") == "1")


def answer_with_meta(question: Any, index: MenuIndex, *, debug: bool = False) -> RouteResult:
    """
    Structured answer (intent + AgentResult). Must never raise for any input.
    """
    trace_enabled = _trace_enabled(debug)
    try:
        return route("" if question is None else str(question), index, debug=trace_enabled)
    except Exception as e:
        _trace(True, "router.error", {"error_type": e.__class__.__name__, "error_message": str(e)[:200]})
        return RouteResult(intent="fallback", result=AgentResult(text=FALLBACK_TEXT, actions=base_actions()))


def respond(question: Any, index: MenuIndex, *, debug: bool = False) -> AgentResult:
    """Entry point used by the HTTP transport and the CLI."""
    return answer_with_meta(question, index, debug=debug).result


def answer(question: Any, index: MenuIndex, *, debug: bool = False) -> str:
    return respond(question, index, debug=debug).text

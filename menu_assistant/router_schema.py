from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from .models import AgentResult

Intent = Literal[
    "help",
    "greeting",
    "location",
    "deals",
    "category",
    "menu",
    "nutrition",
    "item",
    "popular",
    "fallback",
]


class RouteResult(BaseModel):
    intent: Intent
    result: AgentResult
    category: Optional[str] = None  # set for intent == "category"
    item_id: Optional[str] = None  # set for intent in {"nutrition", "item"}

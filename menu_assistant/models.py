from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    category: str  # e.g. "Burgers", "Chicken", "Breakfast", "Desserts", "Drinks"
    calories: int = Field(ge=0)
    price_usd: float = Field(ge=0, alias="priceUSD")
    allergens: Tuple[str, ...] = ()  # dataset order is kept for display
    tags: Tuple[str, ...] = ()  # e.g. "popular"


class MenuIndex(BaseModel):
    """Read-only menu collection, built once and shared across requests."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[MenuItem, ...] = ()

    def categories(self) -> List[str]:
        seen: Dict[str, None] = {}
        for item in self.items:
            seen.setdefault(item.category, None)
        return list(seen)


class Action(BaseModel):
    label: str
    value: str  # phrase to resubmit as the next message, or an external URL


class AgentResult(BaseModel):
    text: str
    actions: Optional[List[Action]] = None
    notice: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

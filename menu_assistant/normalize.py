from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .ingest import iter_item_records
from .models import MenuItem
from .utils import normalize_text


def _as_str_list(value: Any) -> List[str]:
    """
    Coerce allergens/tags into a clean list of strings:
    None -> [], "a, b" -> ["a", "b"], list -> stripped non-empty strings.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple, set)):
        return []
    out: List[str] = []
    for v in value:
        if v is None:
            continue
        s = str(v).strip()
        if s:
            out.append(s)
    return out


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def normalize_record(record: Dict[str, Any], position: Optional[int] = None) -> MenuItem:
    """
    Validate one raw record into a MenuItem.
    Raises ValueError naming the record position on bad input.
    """
    where = f"record #{position}" if position is not None else "record"
    if not isinstance(record, dict):
        raise ValueError(f"Invalid menu {where}: expected an object, got {type(record).__name__}")

    payload = dict(record)
    if payload.get("id") is not None:
        payload["id"] = str(payload["id"]).strip()
    if isinstance(payload.get("name"), str):
        payload["name"] = payload["name"].strip()
    if isinstance(payload.get("category"), str):
        payload["category"] = payload["category"].strip()
    payload["allergens"] = _as_str_list(payload.get("allergens"))
    # a tag that normalizes to "" would match every query
    payload["tags"] = [t for t in _as_str_list(payload.get("tags")) if normalize_text(t)]

    if not payload.get("id"):
        raise ValueError(f"Invalid menu {where}: missing id")
    if not payload.get("name"):
        raise ValueError(f"Invalid menu {where}: missing name")

    try:
        return MenuItem.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Invalid menu {where} ({payload.get('id')}): {_first_error(e)}") from e


def normalize_menu(dataset: Union[dict, list]) -> List[MenuItem]:
    """
    Parse dataset and return items in dataset order.
    Duplicate ids are rejected.
    """
    items: List[MenuItem] = []
    seen: Dict[str, int] = {}
    for pos, record in iter_item_records(dataset):
        item = normalize_record(record, pos)
        if item.id in seen:
            raise ValueError(f"Duplicate menu item id '{item.id}' (records #{seen[item.id]} and #{pos})")
        seen[item.id] = pos
        items.append(item)
    return items

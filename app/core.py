# app/core.py
import json
import re
from typing import Optional, Dict, Any

from fastapi import Request

from .errors import RequestRejected, ValidationError
from .settings import PRODUCTS_PREFIX

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ---------------------------
# Query helpers
# ---------------------------
def parse_int_prefix(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` ("2abc" -> 2, "1.5" -> 1, "abc" -> None)."""
    if raw is None:
        return None
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else None


def page_window(page: Optional[str], limit: Optional[str], total: int):
    """Return (page, limit, start, end); zero or unparsable values fall back to defaults."""
    page_num = parse_int_prefix(page) or 1
    limit_num = parse_int_prefix(limit) or total
    return page_num, limit_num, (page_num - 1) * limit_num, page_num * limit_num


def is_protected_path(path: str) -> bool:
    return path == PRODUCTS_PREFIX or path.startswith(PRODUCTS_PREFIX + "/")


# ---------------------------
# Body helpers
# ---------------------------
def is_json_content(content_type: Optional[str]) -> bool:
    media_type = (content_type or "").split(";")[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Any:
    # bodies sent under any other content type are ignored
    if not is_json_content(request.headers.get("content-type")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationError("Request body is not valid JSON")


def has_required_fields(body: Any) -> bool:
    # presence and truthiness only; price 0 counts as missing
    return isinstance(body, dict) and bool(body.get("name")) and bool(body.get("price"))


async def validate_product(request: Request) -> Dict[str, Any]:
    """Dependency for create/update routes: returns the body once name and price are present."""
    body = await read_json_body(request)
    if not has_required_fields(body):
        raise RequestRejected(400, "Validation error: 'name' and 'price' are required")
    return body

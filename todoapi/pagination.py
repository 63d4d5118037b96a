from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Generic, TypeVar

from typing_extensions import TypedDict

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PageRequest",
    "PageEnvelope",
    "normalize_page_request",
    "parse_page_params",
    "total_pages",
    "paginate_sequence",
    "map_envelope",
]

# ---- Contracts -----------------------------------------------------------------

class PageRequest(TypedDict):
    page: int  # 1-based
    limit: int


class PageEnvelope(TypedDict, Generic[T]):  # type: ignore[misc]
    page: int
    limit: int
    total: int
    totalPages: int
    data: list[T]


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _positive_int(raw: object, default: int) -> int:
    # Numeric text ("2", "2.0", "1e3") counts by value; anything that is not a
    # finite positive whole number falls back to the default
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw if raw > 0 else default
    if isinstance(raw, float):
        number = raw
    else:
        text = str(raw).strip()
        if "_" in text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    if not math.isfinite(number) or not number.is_integer() or number <= 0:
        return default
    return int(number)


def normalize_page_request(page: object = None, limit: object = None) -> PageRequest:
    """Apply defaults and the silent MAX_LIMIT clamp. Never raises."""
    size = _positive_int(limit, DEFAULT_LIMIT)
    if size > MAX_LIMIT:
        size = MAX_LIMIT
    return PageRequest(page=_positive_int(page, DEFAULT_PAGE), limit=size)


def parse_page_params(args: Mapping[str, object]) -> PageRequest:
    """Read ``page``/``limit`` from a dict-like (e.g. request.args)."""
    return normalize_page_request(args.get("page"), args.get("limit"))


def total_pages(total: int, limit: int) -> int:
    return (total + limit - 1) // limit if limit else 0


def paginate_sequence(seq: Sequence[T], page_req: PageRequest) -> PageEnvelope[T]:
    start = (page_req["page"] - 1) * page_req["limit"]
    end = start + page_req["limit"]
    return PageEnvelope(  # type: ignore[call-arg]
        page=page_req["page"],
        limit=page_req["limit"],
        total=len(seq),
        totalPages=total_pages(len(seq), page_req["limit"]),
        data=list(seq[start:end]),
    )


def map_envelope(envelope: PageEnvelope[T], fn) -> PageEnvelope[U]:
    """Same envelope with ``fn`` applied to every item of ``data``."""
    return PageEnvelope(  # type: ignore[call-arg]
        page=envelope["page"],
        limit=envelope["limit"],
        total=envelope["total"],
        totalPages=envelope["totalPages"],
        data=[fn(item) for item in envelope["data"]],
    )

# frontend/models/pagination.py
from __future__ import annotations

from dataclasses import dataclass

from frontend.models._fields import to_int


@dataclass
class Pagination:
    page: int = 1
    per_page: int = 20
    total: int = 0
    last_page: int = 1
    first_item: int | None = None
    last_item: int | None = None

    @classmethod
    def from_api(cls, data: dict | None, page: int = 1, per_page: int = 20) -> "Pagination":
        data = data or {}
        total = to_int(data.get("total"), 0)
        per_page = to_int(data.get("per_page"), per_page) or per_page
        last_page = to_int(data.get("last_page"), None)
        if last_page is None:
            last_page = max((total + per_page - 1) // per_page, 1)
        return cls(
            page=to_int(data.get("current_page"), page) or page,
            per_page=per_page,
            total=total,
            last_page=max(last_page, 1),
            first_item=to_int(data.get("from")),
            last_item=to_int(data.get("to")),
        )

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.last_page

    @property
    def prev_num(self) -> int:
        return max(self.page - 1, 1)

    @property
    def next_num(self) -> int:
        return min(self.page + 1, self.last_page)

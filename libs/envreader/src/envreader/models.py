"""Pydantic models describing lookups."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

ValueKind = Literal["str", "int", "bool", "list"]


class LookupResult(BaseModel):
    name: str
    kind: ValueKind
    value: bool | int | str | list[str]
    is_set: bool

"""Category entity. Products reference a category by id."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Category:

    id: int | None
    title: str

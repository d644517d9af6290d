"""User entity.

Users are only referenced by the catalog: they own products and hold
roles. Authentication lives elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:

    id: int | None
    name: str
    email: str

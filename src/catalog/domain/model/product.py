"""Product aggregate.

A product belongs to a category and to the user who created it, and
may carry an image stored on the public disk. The image file lives and
dies with the record, but the two are not updated transactionally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.model.category import Category
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import Money

# Directory on the public disk that holds product images.
PRODUCT_IMAGE_DIR = "products"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    ``category`` and ``owner`` are populated only when the repository
    eagerly loads them; ``category_id`` and ``user_id`` are always set.
    """

    id: int | None
    title: str
    price: Money
    category_id: int
    user_id: int | None
    description: str | None = None
    image: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    category: Category | None = None
    owner: User | None = None

    def revise(
        self,
        title: str,
        description: str | None,
        price: Money,
        category_id: int,
    ) -> None:
        """Overwrite the editable fields. The image is handled separately."""
        self.title = title
        self.description = description
        self.price = price
        if category_id != self.category_id:
            self.category = None
        self.category_id = category_id
        self.updated_at = _now()

    def replace_image(self, path: str | None) -> str | None:
        """Point the product at a new image file and return the old path."""
        previous = self.image
        self.image = path
        self.updated_at = _now()
        return previous

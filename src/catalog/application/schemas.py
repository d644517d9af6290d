"""Input schemas: the declarative validation rules for each form.

Each schema is evaluated before any mutation happens. Rules that need
the database (existence, uniqueness) read repositories from the
pydantic validation context, so a schema stays usable without one.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from catalog.domain.model.value_objects import ImageUpload

MAX_PRICE = Decimal("999999.99")
MAX_IMAGE_KB = 2048
IMAGE_TYPES = ("jpeg", "png", "jpg", "gif", "webp")

RequiredText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProductFields(BaseModel):
    """Rules shared by product creation and update.

    Context key ``categories`` (a CategoryRepository) enables the check
    that ``category_id`` points at an existing category.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: RequiredText
    description: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=2000)]
    ] = None
    price: Annotated[Decimal, Field(ge=0, le=MAX_PRICE, decimal_places=2)]
    category_id: int
    image: Optional[ImageUpload] = None

    @field_validator("description", mode="before")
    @classmethod
    def _normalize_description(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("category_id")
    @classmethod
    def _category_exists(cls, value: int, info: ValidationInfo) -> int:
        categories = (info.context or {}).get("categories")
        if categories is not None and categories.get_by_id(value) is None:
            raise PydanticCustomError("exists", "The selected category is invalid.")
        return value

    @field_validator("image")
    @classmethod
    def _image_is_allowed(cls, value: Optional[ImageUpload]) -> Optional[ImageUpload]:
        if value is None:
            return value
        detected = value.format
        if detected is None:
            raise PydanticCustomError("image", "The image field must be an image.")
        if detected not in IMAGE_TYPES:
            raise PydanticCustomError(
                "mimes",
                "The image field must be a file of type: {types}.",
                {"types": ", ".join(IMAGE_TYPES)},
            )
        if value.size_kb > MAX_IMAGE_KB:
            raise PydanticCustomError(
                "max",
                "The image field must not be greater than {max} kilobytes.",
                {"max": MAX_IMAGE_KB},
            )
        return value


class RoleFields(BaseModel):
    """Rules for role creation and update.

    Context keys: ``roles`` (a RoleRepository) enables the uniqueness
    check, ``ignore_id`` exempts the role being updated from it.
    """

    name: RequiredText
    description: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
    ] = None

    @field_validator("description", mode="before")
    @classmethod
    def _normalize_description(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("name")
    @classmethod
    def _name_is_unique(cls, value: str, info: ValidationInfo) -> str:
        context = info.context or {}
        roles = context.get("roles")
        if roles is None:
            return value
        existing = roles.get_by_name(value)
        if existing is not None and existing.id != context.get("ignore_id"):
            raise PydanticCustomError("unique", "The name has already been taken.")
        return value


class CategoryFields(BaseModel):

    title: RequiredText


class UserFields(BaseModel):

    name: RequiredText
    email: RequiredText

    @field_validator("email")
    @classmethod
    def _email_is_valid_and_unique(cls, value: str, info: ValidationInfo) -> str:
        local, _, domain = value.partition("@")
        if not local or not domain:
            raise PydanticCustomError(
                "email", "The email field must be a valid email address."
            )
        users = (info.context or {}).get("users")
        if users is not None and users.get_by_email(value) is not None:
            raise PydanticCustomError("unique", "The email has already been taken.")
        return value

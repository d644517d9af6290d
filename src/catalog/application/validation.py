"""Run an input schema and translate its failures into domain errors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from catalog.domain.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate(schema: type[SchemaT], data: Mapping[str, Any], **context: Any) -> SchemaT:
    """Return the sanitized fields, or raise ValidationError with every problem.

    Keyword arguments become the validation context, which is where
    schemas look up repositories for existence and uniqueness rules.
    """
    try:
        return schema.model_validate(dict(data), context=context)
    except SchemaValidationError as exc:
        raise ValidationError(errors=field_errors(exc)) from exc


def field_errors(exc: SchemaValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors

"""Small pieces shared by the CLI command modules."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import ImageUpload
from catalog.domain.repository.user_repository import UserRepository


def read_image(path: Path | None) -> ImageUpload | None:
    """Load a file from disk as an upload, or return None if no path was given."""
    if path is None:
        return None
    content_type, _ = mimetypes.guess_type(path.name)
    return ImageUpload(
        filename=path.name,
        content=path.read_bytes(),
        content_type=content_type,
    )


def require_actor(user_repo: UserRepository, actor_id: int) -> User:
    """Resolve the acting user for ownership of new records."""
    user = user_repo.get_by_id(actor_id)
    if user is None:
        raise EntityNotFoundError(f"Acting user #{actor_id} does not exist")
    return user


def image_option(help_text: str):
    return click.option(
        "--image",
        "image_path",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help=help_text,
    )

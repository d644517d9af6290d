"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import PurePath

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


# Leading bytes that identify each image format we can recognise.
_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "jpeg"),
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
    (b"BM", "bmp"),
)


@dataclass(frozen=True)
class ImageUpload:
    """An uploaded file that is meant to be an image.

    The format is detected from the content, never from the file name,
    so a renamed text file is not mistaken for a picture.
    """

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_kb(self) -> float:
        return self.size / 1024

    @property
    def format(self) -> str | None:
        """Detected image format, or None when the content is not an image."""
        head = self.content[:16]
        if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
            return "webp"
        for signature, name in _SIGNATURES:
            if head.startswith(signature):
                return name
        return None

    @property
    def extension(self) -> str:
        """File extension to store the upload under."""
        detected = self.format
        if detected == "jpeg":
            return "jpg"
        if detected is not None:
            return detected
        return PurePath(self.filename).suffix.lstrip(".").lower() or "bin"

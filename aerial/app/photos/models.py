"""Database models and request bodies for the photo catalogue."""

import datetime
import enum
from typing import Any

import pydantic
import sqlalchemy
import sqlmodel


class PhotoCategory(enum.StrEnum):
    """Gallery categories."""

    COMMERCIAL = 'COMMERCIAL'
    RESIDENTIAL = 'RESIDENTIAL'
    REAL_ESTATE = 'REAL_ESTATE'
    EVENT = 'EVENT'
    OTHER = 'OTHER'
    COMMERCIAL_INSPECTION = 'COMMERCIAL_INSPECTION'
    RESIDENTIAL_INSPECTION = 'RESIDENTIAL_INSPECTION'

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Real Estate``."""
        return self.value.replace('_', ' ').title()


class Photo(sqlmodel.SQLModel, table=True):
    """A portfolio photo with its capture metadata.

    ``photo_metadata`` holds serialized PhotoMetadata (wire keys) in a JSON
    column named ``metadata``. It is replaced wholesale on update.
    """

    __tablename__ = 'photos_photo'  # type: ignore[misc]

    id: int | None = sqlmodel.Field(default=None, primary_key=True)
    filename: str = sqlmodel.Field(max_length=255, index=True)
    title: str | None = sqlmodel.Field(default=None, max_length=255)
    description: str | None = sqlmodel.Field(default=None, max_length=1000)
    category: PhotoCategory = sqlmodel.Field(index=True)
    is_public: bool = sqlmodel.Field(default=False, index=True)
    storage_url: str
    thumbnail_url: str
    watermark_url: str | None = None
    price: float = 0.0
    photo_metadata: dict[str, Any] | None = sqlmodel.Field(
        default=None, sa_column=sqlalchemy.Column('metadata', sqlalchemy.JSON)
    )
    created_at: datetime.datetime = sqlmodel.Field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC)
    )
    updated_at: datetime.datetime = sqlmodel.Field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC)
    )


class PhotoCreate(pydantic.BaseModel):
    """Request body for adding a photo.

    ``metadata`` is left untyped; the metadata parser decides whether it is
    acceptable and reports field-level errors.
    """

    filename: str = pydantic.Field(min_length=1, max_length=255)
    title: str | None = pydantic.Field(default=None, max_length=255)
    description: str | None = pydantic.Field(default=None, max_length=1000)
    category: PhotoCategory
    is_public: bool = False
    storage_url: str
    thumbnail_url: str
    watermark_url: str | None = None
    price: float = pydantic.Field(default=0.0, ge=0, le=10000)
    metadata: Any = None


class PhotoMetadataUpdate(pydantic.BaseModel):
    """Request body for replacing a photo's metadata."""

    metadata: Any = None

"""Photo persistence behind a single MetadataStore interface.

Two implementations exist: ``DatabaseMetadataStore`` persists through
SQLModel and ``StubMetadataStore`` keeps sample photos in memory for
development without a database. ``select_metadata_store`` picks one once at
startup; everything else receives the chosen store as a dependency.

Metadata is written through the serializer and read back through the parser,
so the JSON column only ever holds validated, JSON-safe values.
"""

import abc
import datetime
import itertools
import logging

import sqlalchemy
import sqlmodel

from ..metadata import parser, serializer
from ..metadata.models import PhotoMetadata
from . import models, sample_data

logger = logging.getLogger(__name__)

ALL = 'ALL'


def read_metadata(photo: models.Photo) -> PhotoMetadata | None:
    """Return the photo's stored metadata as a typed model, or None."""
    return parser.parse(photo.photo_metadata)


def matches_query(photo: models.Photo, query: str) -> bool:
    """Case-insensitive match against title, description and metadata tags."""
    term = query.lower()
    metadata = read_metadata(photo)
    haystack = [photo.title or '', photo.description or '']
    if metadata and metadata.tags:
        haystack.extend(metadata.tags)
    return any(term in text.lower() for text in haystack)


def _empty_counts() -> dict[str, int]:
    counts = {ALL: 0}
    counts.update({category.value: 0 for category in models.PhotoCategory})
    return counts


def _build_photo(data: models.PhotoCreate, metadata: PhotoMetadata | None) -> models.Photo:
    return models.Photo(
        **data.model_dump(exclude={'metadata'}),
        photo_metadata=serializer.serialize(metadata) if metadata is not None else None,  # type: ignore[arg-type]
    )


class MetadataStore(abc.ABC):
    """Storage for photos and their metadata."""

    @abc.abstractmethod
    def list_photos(
        self,
        category: models.PhotoCategory | None = None,
        is_public: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[models.Photo]:
        """Return photos newest first, optionally filtered and paginated."""

    @abc.abstractmethod
    def get_photo(self, photo_id: int) -> models.Photo | None:
        """Return one photo or None."""

    @abc.abstractmethod
    def create_photo(
        self, data: models.PhotoCreate, metadata: PhotoMetadata | None
    ) -> models.Photo:
        """Store a new photo with already-parsed metadata."""

    @abc.abstractmethod
    def replace_metadata(
        self, photo_id: int, metadata: PhotoMetadata | None
    ) -> models.Photo | None:
        """Replace a photo's metadata wholesale. Returns None for unknown ids."""

    @abc.abstractmethod
    def delete_photo(self, photo_id: int) -> bool:
        """Delete a photo. Returns False for unknown ids."""

    def photo_counts(self) -> dict[str, int]:
        """Count public photos per category, plus an ``ALL`` total."""
        counts = _empty_counts()
        for photo in self.list_photos(is_public=True):
            counts[ALL] += 1
            counts[photo.category] += 1
        return counts

    def search_photos(self, query: str) -> list[models.Photo]:
        """Find photos whose title, description or tags contain *query*."""
        return [photo for photo in self.list_photos() if matches_query(photo, query)]


class DatabaseMetadataStore(MetadataStore):
    """MetadataStore backed by a SQL database."""

    def __init__(self, engine: sqlalchemy.Engine):
        self.engine = engine

    def list_photos(
        self,
        category: models.PhotoCategory | None = None,
        is_public: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[models.Photo]:
        statement = sqlmodel.select(models.Photo)
        if category is not None:
            statement = statement.where(models.Photo.category == category)
        if is_public is not None:
            statement = statement.where(models.Photo.is_public == is_public)
        statement = statement.order_by(
            models.Photo.created_at.desc(),  # type: ignore
            models.Photo.id.desc(),  # type: ignore
        ).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        with sqlmodel.Session(self.engine) as session:
            return list(session.exec(statement).all())

    def get_photo(self, photo_id: int) -> models.Photo | None:
        with sqlmodel.Session(self.engine) as session:
            return session.get(models.Photo, photo_id)

    def photo_counts(self) -> dict[str, int]:
        statement = (
            sqlmodel.select(models.Photo.category, sqlalchemy.func.count())
            .where(models.Photo.is_public == True)  # noqa: E712
            .group_by(models.Photo.category)
        )
        counts = _empty_counts()
        with sqlmodel.Session(self.engine) as session:
            for category, count in session.exec(statement).all():
                counts[category] = count
                counts[ALL] += count
        return counts

    def create_photo(
        self, data: models.PhotoCreate, metadata: PhotoMetadata | None
    ) -> models.Photo:
        photo = _build_photo(data, metadata)
        with sqlmodel.Session(self.engine) as session:
            session.add(photo)
            session.commit()
            session.refresh(photo)
        return photo

    def replace_metadata(
        self, photo_id: int, metadata: PhotoMetadata | None
    ) -> models.Photo | None:
        with sqlmodel.Session(self.engine) as session:
            photo = session.get(models.Photo, photo_id)
            if photo is None:
                return None
            photo.photo_metadata = serializer.serialize(metadata) if metadata is not None else None  # type: ignore[assignment]
            photo.updated_at = datetime.datetime.now(datetime.UTC)
            session.add(photo)
            session.commit()
            session.refresh(photo)
        return photo

    def delete_photo(self, photo_id: int) -> bool:
        with sqlmodel.Session(self.engine) as session:
            photo = session.get(models.Photo, photo_id)
            if photo is None:
                return False
            session.delete(photo)
            session.commit()
        return True


class StubMetadataStore(MetadataStore):
    """In-memory MetadataStore for development without a database."""

    def __init__(self, photos: list[models.Photo] | None = None):
        self._photos: dict[int, models.Photo] = {}
        self._ids = itertools.count(1)
        for photo in photos or []:
            photo.id = next(self._ids)
            self._photos[photo.id] = photo

    def list_photos(
        self,
        category: models.PhotoCategory | None = None,
        is_public: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[models.Photo]:
        photos = [
            photo
            for photo in self._photos.values()
            if (category is None or photo.category == category)
            and (is_public is None or photo.is_public == is_public)
        ]
        photos.sort(key=lambda p: (p.created_at, p.id or 0), reverse=True)
        end = None if limit is None else offset + limit
        return photos[offset:end]

    def get_photo(self, photo_id: int) -> models.Photo | None:
        return self._photos.get(photo_id)

    def create_photo(
        self, data: models.PhotoCreate, metadata: PhotoMetadata | None
    ) -> models.Photo:
        photo = _build_photo(data, metadata)
        photo.id = next(self._ids)
        self._photos[photo.id] = photo
        return photo

    def replace_metadata(
        self, photo_id: int, metadata: PhotoMetadata | None
    ) -> models.Photo | None:
        photo = self._photos.get(photo_id)
        if photo is None:
            return None
        photo.photo_metadata = serializer.serialize(metadata) if metadata is not None else None  # type: ignore[assignment]
        photo.updated_at = datetime.datetime.now(datetime.UTC)
        return photo

    def delete_photo(self, photo_id: int) -> bool:
        return self._photos.pop(photo_id, None) is not None


def select_metadata_store(
    backend: str, engine: sqlalchemy.Engine | None = None
) -> MetadataStore:
    """Build the MetadataStore named by *backend* (``database`` or ``stub``)."""
    if backend == 'stub':
        logger.info('Using in-memory stub metadata store')
        return StubMetadataStore(sample_data.sample_photos())
    if backend == 'database':
        if engine is None:
            from .. import database

            engine = database.engine
        logger.info('Using database metadata store at %s', engine.url)
        return DatabaseMetadataStore(engine)
    raise ValueError(f'Unknown metadata store backend: {backend!r}')

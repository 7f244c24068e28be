"""JSON API routes for the photo catalogue."""

import typing

import fastapi

from ..metadata import display, parser
from ..metadata.models import ParseFailure, PhotoMetadata
from . import models, store

router = fastapi.APIRouter(prefix='/api/photos')


def get_metadata_store(request: fastapi.Request) -> store.MetadataStore:
    """Return the MetadataStore chosen at startup."""
    return request.app.state.metadata_store


def serialize_photo(photo: models.Photo) -> dict[str, typing.Any]:
    """Serialize a photo with its raw metadata and display labels."""
    return {
        **photo.model_dump(exclude={'photo_metadata'}),
        'metadata': photo.photo_metadata,
        'display': display.extract_display(store.read_metadata(photo)),
    }


def _parse_request_metadata(value: typing.Any) -> PhotoMetadata | None:
    """Parse metadata from a request body; missing metadata is allowed."""
    if parser.is_absent(value):
        return None
    result = parser.parse_with_result(value)
    if isinstance(result, ParseFailure):
        raise fastapi.HTTPException(status_code=400, detail=result.error)
    return result.metadata


@router.get('')
async def list_photos(
    category: models.PhotoCategory | None = None,
    public: bool | None = None,
    limit: typing.Annotated[int, fastapi.Query(ge=1, le=100)] = 20,
    offset: typing.Annotated[int, fastapi.Query(ge=0)] = 0,
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> list[dict[str, typing.Any]]:
    """List photos newest first."""
    photos = metadata_store.list_photos(
        category=category, is_public=public, limit=limit, offset=offset
    )
    return [serialize_photo(photo) for photo in photos]


@router.get('/counts')
async def photo_counts(
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> dict[str, int]:
    """Count public photos per category."""
    return metadata_store.photo_counts()


@router.get('/search')
async def search_photos(
    q: typing.Annotated[str, fastapi.Query(min_length=1, max_length=100)],
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> list[dict[str, typing.Any]]:
    """Search titles, descriptions and tags."""
    return [serialize_photo(photo) for photo in metadata_store.search_photos(q)]


@router.get('/{photo_id}')
async def get_photo(
    photo_id: int,
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> dict[str, typing.Any]:
    """Get one photo with formatted metadata."""
    photo = metadata_store.get_photo(photo_id)
    if photo is None:
        raise fastapi.HTTPException(status_code=404, detail='Photo not found')
    return serialize_photo(photo)


@router.post('', status_code=201)
async def create_photo(
    data: models.PhotoCreate,
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> dict[str, typing.Any]:
    """Add a photo. Invalid metadata is rejected with a 400 listing every problem."""
    metadata = _parse_request_metadata(data.metadata)
    photo = metadata_store.create_photo(data, metadata)
    return serialize_photo(photo)


@router.put('/{photo_id}/metadata')
async def replace_photo_metadata(
    photo_id: int,
    data: models.PhotoMetadataUpdate,
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> dict[str, typing.Any]:
    """Replace a photo's metadata; an empty body clears it."""
    metadata = _parse_request_metadata(data.metadata)
    photo = metadata_store.replace_metadata(photo_id, metadata)
    if photo is None:
        raise fastapi.HTTPException(status_code=404, detail='Photo not found')
    return serialize_photo(photo)


@router.delete('/{photo_id}')
async def delete_photo(
    photo_id: int,
    metadata_store: store.MetadataStore = fastapi.Depends(get_metadata_store),
) -> dict[str, str]:
    """Delete a photo."""
    if not metadata_store.delete_photo(photo_id):
        raise fastapi.HTTPException(status_code=404, detail='Photo not found')
    return {'message': 'Photo deleted successfully'}

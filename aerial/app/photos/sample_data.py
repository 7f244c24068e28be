"""Sample portfolio photos for the in-memory store."""

import datetime
from typing import Any

from ..metadata import defaults, serializer
from . import models

_UNSPLASH = 'https://images.unsplash.com'

_SAMPLES: list[dict[str, Any]] = [
    {
        'filename': 'commercial-building-001.jpg',
        'title': 'Downtown Office Complex',
        'description': 'Aerial view of a modern office building',
        'category': models.PhotoCategory.COMMERCIAL,
        'image': 'photo-1486406146926-c627a92ad1ab',
        'price': 25.0,
        'created': datetime.datetime(2024, 1, 15, tzinfo=datetime.UTC),
        'metadata': {
            'location': 'Downtown Business District',
            'equipment': 'DJI Mavic 3',
            'dimensions': {'width': 4000, 'height': 3000},
            'tags': ['commercial', 'office', 'aerial'],
        },
    },
    {
        'filename': 'residential-home-001.jpg',
        'title': 'Luxury Home Inspection',
        'description': 'Comprehensive roof and property inspection',
        'category': models.PhotoCategory.RESIDENTIAL_INSPECTION,
        'image': 'photo-1564013799919-ab600027ffc6',
        'price': 15.0,
        'created': datetime.datetime(2024, 1, 20, tzinfo=datetime.UTC),
        'metadata': {
            'location': 'Suburban Neighborhood',
            'equipment': 'DJI Mini 3 Pro',
            'dimensions': {'width': 3840, 'height': 2160},
            'tags': ['residential', 'inspection', 'roof'],
        },
    },
    {
        'filename': 'real-estate-lakefront-001.jpg',
        'title': 'Lakefront Listing',
        'description': 'Property overview for a lakefront listing',
        'category': models.PhotoCategory.REAL_ESTATE,
        'image': 'photo-1600596542815-ffad4c1539a9',
        'price': 20.0,
        'created': datetime.datetime(2024, 2, 3, tzinfo=datetime.UTC),
        'metadata': {
            'location': 'Lake Shore Drive',
            'equipment': 'DJI Air 3',
            'fileSize': 6291456,
            'format': 'JPEG',
            'gps': {'latitude': 41.8864, 'longitude': -87.6186},
            'camera': {'make': 'DJI', 'model': 'Air 3'},
            'tags': ['real-estate', 'waterfront'],
        },
    },
    {
        'filename': 'event-festival-001.jpg',
        'title': 'Summer Festival Crowd',
        'description': 'Event aerial coverage of a downtown festival',
        'category': models.PhotoCategory.EVENT,
        'image': 'photo-1519225421980-715cb0215aed',
        'price': 18.0,
        'created': datetime.datetime(2024, 2, 10, tzinfo=datetime.UTC),
        'metadata': {
            'location': 'Riverside Park',
            'equipment': 'DJI Mavic 3 Pro',
            'settings': {'iso': 400, 'shutterSpeed': '1/500'},
            'tags': ['event', 'festival'],
        },
    },
    {
        'filename': 'commercial-inspection-001.jpg',
        'title': 'Warehouse Roof Survey',
        'description': 'Thermal and visual survey of a warehouse roof',
        'category': models.PhotoCategory.COMMERCIAL_INSPECTION,
        'image': 'photo-1541888946425-d81bb19240f5',
        'price': 30.0,
        'created': datetime.datetime(2024, 2, 18, tzinfo=datetime.UTC),
        'metadata': {
            'location': 'Industrial Park',
            'equipment': 'DJI Matrice 30T',
            'processing': {'software': 'DJI Thermal Analysis Tool', 'version': '3.0'},
            'tags': ['commercial', 'inspection', 'thermal'],
        },
    },
    {
        'filename': 'draft-residential-002.jpg',
        'title': 'Unpublished Backyard Shot',
        'description': 'Client proof awaiting approval',
        'category': models.PhotoCategory.RESIDENTIAL,
        'image': 'photo-1568605114967-8130f3a36994',
        'price': 15.0,
        'public': False,
        'created': datetime.datetime(2024, 3, 1, tzinfo=datetime.UTC),
        'metadata': {'location': 'Oak Street', 'tags': ['residential']},
    },
]


def sample_photos() -> list[models.Photo]:
    """Build fresh Photo objects for the samples, newest last."""
    photos: list[models.Photo] = []
    for sample in _SAMPLES:
        metadata = defaults.create_default(sample['metadata'])
        url = f'{_UNSPLASH}/{sample["image"]}'
        photos.append(
            models.Photo(
                filename=sample['filename'],
                title=sample['title'],
                description=sample['description'],
                category=sample['category'],
                is_public=sample.get('public', True),
                storage_url=f'{url}?w=1200&h=800&fit=crop&q=80',
                thumbnail_url=f'{url}?w=400&h=300&fit=crop&q=50',
                watermark_url=f'{url}?w=1200&h=800&fit=crop&q=80',
                price=sample['price'],
                photo_metadata=serializer.serialize(metadata),  # type: ignore[arg-type]
                created_at=sample['created'],
                updated_at=sample['created'],
            )
        )
    return photos

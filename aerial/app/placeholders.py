"""SVG placeholder images for gallery thumbnails that fail to load."""

import html
import typing

import fastapi

router = fastapi.APIRouter()

CATEGORY_COLORS = {
    'commercial': '#1e40af',
    'residential': '#0ea5e9',
    'real_estate': '#f97316',
    'event': '#10b981',
    'other': '#64748b',
}

# Cycled by index so a grid of placeholders is not uniform.
ASPECT_RATIOS = [(400, 300), (400, 500), (400, 250), (400, 600), (400, 200)]


def placeholder_dimensions(index: int) -> tuple[int, int]:
    return ASPECT_RATIOS[index % len(ASPECT_RATIOS)]


def placeholder_svg(category: str, index: int) -> str:
    """Render a coloured rectangle labelled with the category and 1-based index."""
    width, height = placeholder_dimensions(index)
    key = category.lower()
    # Inspection categories share their base category's colour
    key = key.removesuffix('_inspection')
    color = CATEGORY_COLORS.get(key, CATEGORY_COLORS['other'])
    label = html.escape(f'{category.replace("_", " ").upper()} {index + 1}')
    return (
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">'
        f'<rect width="100%" height="100%" fill="{color}"/>'
        '<text x="50%" y="50%" font-family="Arial, sans-serif" font-size="16" '
        f'fill="white" text-anchor="middle" dy=".3em">{label}</text>'
        '</svg>'
    )


@router.get('/placeholder/{category}/{index}.svg')
async def placeholder(
    category: str, index: typing.Annotated[int, fastapi.Path(ge=0, le=10_000)]
) -> fastapi.Response:
    return fastapi.Response(
        content=placeholder_svg(category, index),
        media_type='image/svg+xml',
        headers={'Cache-Control': 'public, max-age=86400'},
    )

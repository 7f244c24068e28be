"""Unit tests for display.py."""

import unittest

from aerial.app.metadata import display, models


def _scenario_metadata() -> models.PhotoMetadata:
    """Return the reference inspection shot."""
    return models.PhotoMetadata.model_validate(
        {
            'location': 'Downtown Office Building',
            'equipment': 'DJI Mavic 3',
            'shootDate': '2024-01-15T10:30:00Z',
            'settings': {
                'iso': 200,
                'aperture': 'f/2.8',
                'shutterSpeed': '1/120',
                'focalLength': '24mm',
            },
            'gps': {'latitude': 40.7128, 'longitude': -74.0060},
            'dimensions': {'width': 4000, 'height': 3000},
            'fileSize': 2048000,
            'format': 'jpeg',
            'tags': ['commercial', 'inspection', 'roof'],
        }
    )


class TestFormatFileSize(unittest.TestCase):
    """Tests for format_file_size."""

    def test_bytes_have_no_decimal(self) -> None:
        """Sizes under 1 KB are shown as whole bytes."""
        self.assertEqual(display.format_file_size(512), '512 B')
        self.assertEqual(display.format_file_size(1023), '1023 B')

    def test_kilobytes(self) -> None:
        """Sizes are divided by 1024 per unit."""
        self.assertEqual(display.format_file_size(1024), '1.0 KB')
        self.assertEqual(display.format_file_size(1536), '1.5 KB')

    def test_megabytes(self) -> None:
        """2,048,000 bytes is just under 2 MB."""
        self.assertEqual(display.format_file_size(2048000), '2.0 MB')

    def test_gigabytes_is_largest_unit(self) -> None:
        """Sizes beyond GB stay in GB."""
        self.assertEqual(display.format_file_size(3 * 1024**3), '3.0 GB')
        self.assertEqual(display.format_file_size(2048 * 1024**3), '2048.0 GB')


class TestFormatShootDate(unittest.TestCase):
    """Tests for format_shoot_date."""

    def test_long_form(self) -> None:
        """ISO timestamps are shown as long-form dates."""
        self.assertEqual(
            display.format_shoot_date('2024-01-15T10:30:00Z'), 'January 15, 2024'
        )

    def test_keeps_own_zone(self) -> None:
        """The date is taken in the timestamp's own offset."""
        self.assertEqual(
            display.format_shoot_date('2024-07-04T23:30:00-07:00'), 'July 4, 2024'
        )

    def test_unparseable_falls_back_to_raw(self) -> None:
        """Unparseable dates are shown unchanged."""
        self.assertEqual(display.format_shoot_date('last spring'), 'last spring')


class TestExtractDisplay(unittest.TestCase):
    """Tests for extract_display."""

    def test_none_gives_empty_dict(self) -> None:
        """None input yields an empty mapping."""
        self.assertEqual(display.extract_display(None), {})

    def test_scenario_values(self) -> None:
        """The reference shot formats every present field."""
        result = display.extract_display(_scenario_metadata())
        self.assertEqual(result['Location'], 'Downtown Office Building')
        self.assertEqual(result['Equipment'], 'DJI Mavic 3')
        self.assertEqual(result['Date'], 'January 15, 2024')
        self.assertEqual(result['Dimensions'], '4000 × 3000')
        self.assertEqual(result['Megapixels'], '12.0 MP')
        self.assertEqual(result['File Size'], '2.0 MB')
        self.assertEqual(result['Format'], 'JPEG')
        self.assertEqual(result['Settings'], 'ISO 200, f/2.8, 1/120, 24mm')
        self.assertEqual(result['Coordinates'], '40.7128°, -74.0060°')

    def test_absent_fields_not_emitted(self) -> None:
        """Only labels for present fields appear."""
        result = display.extract_display(models.PhotoMetadata(location='Pier 39'))
        self.assertEqual(result, {'Location': 'Pier 39'})

    def test_empty_metadata(self) -> None:
        """Metadata with no fields gives no labels."""
        self.assertEqual(display.extract_display(models.PhotoMetadata()), {})

    def test_camera_and_lens(self) -> None:
        """Camera joins make and model; lens is shown separately."""
        metadata = models.PhotoMetadata.model_validate(
            {'camera': {'make': 'DJI', 'model': 'Mavic 3', 'lens': 'Hasselblad L-Format'}}
        )
        result = display.extract_display(metadata)
        self.assertEqual(result['Camera'], 'DJI Mavic 3')
        self.assertEqual(result['Lens'], 'Hasselblad L-Format')

    def test_camera_make_only(self) -> None:
        """A lone make is still shown."""
        metadata = models.PhotoMetadata.model_validate({'camera': {'make': 'Autel'}})
        self.assertEqual(display.extract_display(metadata), {'Camera': 'Autel'})

    def test_partial_dimensions_skipped(self) -> None:
        """Dimensions need both width and height."""
        metadata = models.PhotoMetadata.model_validate({'dimensions': {'width': 4000}})
        self.assertEqual(display.extract_display(metadata), {})

    def test_partial_settings(self) -> None:
        """Settings lists only the values present."""
        metadata = models.PhotoMetadata.model_validate(
            {'settings': {'iso': 400, 'shutterSpeed': '1/1000'}}
        )
        self.assertEqual(
            display.extract_display(metadata)['Settings'], 'ISO 400, 1/1000'
        )

    def test_empty_settings_object_skipped(self) -> None:
        """An empty settings object produces no label."""
        metadata = models.PhotoMetadata.model_validate({'settings': {}})
        self.assertNotIn('Settings', display.extract_display(metadata))

    def test_bad_date_does_not_raise(self) -> None:
        """A free-form shoot date is displayed raw."""
        metadata = models.PhotoMetadata(shoot_date='Spring 2023')
        self.assertEqual(display.extract_display(metadata)['Date'], 'Spring 2023')


if __name__ == '__main__':
    unittest.main()

"""Unit tests for defaults.py."""

import datetime
import unittest

from aerial.app.metadata import defaults, models, parser, validator


class TestCreateDefault(unittest.TestCase):
    """Tests for create_default."""

    def test_defaults_are_valid(self) -> None:
        """The default metadata passes validation."""
        metadata = defaults.create_default()
        dumped = metadata.model_dump(by_alias=True, exclude_none=True)
        self.assertEqual(validator.validate(dumped), [])

    def test_default_values(self) -> None:
        """Defaults include a shoot date, empty tags and camera settings."""
        metadata = defaults.create_default()
        self.assertEqual(metadata.tags, [])
        assert metadata.settings is not None
        self.assertEqual(metadata.settings.iso, 100)
        self.assertEqual(metadata.settings.aperture, 'f/2.8')

    def test_shoot_date_is_now(self) -> None:
        """The default shoot date is the current UTC time."""
        before = datetime.datetime.now(datetime.UTC)
        metadata = defaults.create_default()
        after = datetime.datetime.now(datetime.UTC)
        assert metadata.shoot_date is not None
        shot_at = datetime.datetime.fromisoformat(metadata.shoot_date)
        self.assertGreaterEqual(shot_at, before)
        self.assertLessEqual(shot_at, after)

    def test_flat_overrides_replace(self) -> None:
        """Flat fields are replaced by overrides."""
        metadata = defaults.create_default(
            {'location': 'Test Location', 'tags': ['roof']}
        )
        self.assertEqual(metadata.location, 'Test Location')
        self.assertEqual(metadata.tags, ['roof'])

    def test_nested_overrides_merge(self) -> None:
        """A partial settings override keeps the other default settings."""
        metadata = defaults.create_default({'settings': {'iso': 400}})
        assert metadata.settings is not None
        self.assertEqual(metadata.settings.iso, 400)
        self.assertEqual(metadata.settings.aperture, 'f/2.8')
        self.assertEqual(metadata.settings.shutter_speed, '1/120')

    def test_attribute_name_overrides(self) -> None:
        """snake_case keys override the matching wire fields instead of being dropped."""
        metadata = defaults.create_default(
            {
                'shoot_date': '2024-01-15T10:30:00Z',
                'file_size': 2048000,
                'settings': {'shutter_speed': '1/500'},
                'processing': {'color_space': 'sRGB'},
            }
        )
        self.assertEqual(metadata.shoot_date, '2024-01-15T10:30:00Z')
        self.assertEqual(metadata.file_size, 2048000)
        assert metadata.settings is not None and metadata.processing is not None
        self.assertEqual(metadata.settings.shutter_speed, '1/500')
        self.assertEqual(metadata.settings.aperture, 'f/2.8')
        self.assertEqual(metadata.processing.color_space, 'sRGB')

    def test_attribute_name_overrides_validated(self) -> None:
        """snake_case overrides go through validation under their wire names."""
        with self.assertRaises(parser.InvalidMetadataError) as ctx:
            defaults.create_default({'file_size': -1})
        self.assertEqual([e.field for e in ctx.exception.errors], ['fileSize'])

    def test_nested_without_default_taken_as_is(self) -> None:
        """Nested objects with no default are used as given."""
        metadata = defaults.create_default({'dimensions': {'width': 4000, 'height': 3000}})
        self.assertEqual(metadata.dimensions, models.Dimensions(width=4000, height=3000))

    def test_accepts_model_overrides(self) -> None:
        """A PhotoMetadata instance can be used as overrides."""
        overrides = models.PhotoMetadata(
            equipment='DJI Mini 3 Pro',
            settings=models.CameraSettings(focal_length='70mm'),
        )
        metadata = defaults.create_default(overrides)
        self.assertEqual(metadata.equipment, 'DJI Mini 3 Pro')
        assert metadata.settings is not None
        self.assertEqual(metadata.settings.focal_length, '70mm')
        self.assertEqual(metadata.settings.iso, 100)

    def test_invalid_overrides_raise(self) -> None:
        """Overrides that break the metadata shape are rejected."""
        with self.assertRaises(parser.InvalidMetadataError) as ctx:
            defaults.create_default({'settings': {'iso': 'high'}})
        self.assertEqual([e.field for e in ctx.exception.errors], ['settings.iso'])

    def test_defaults_not_shared(self) -> None:
        """Each call gets its own settings values."""
        first = defaults.create_default({'settings': {'iso': 800}})
        second = defaults.create_default()
        assert first.settings is not None and second.settings is not None
        self.assertEqual(second.settings.iso, 100)
        self.assertEqual(defaults.DEFAULT_SETTINGS['iso'], 100)


if __name__ == '__main__':
    unittest.main()

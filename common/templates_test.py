"""Unit tests for common/templates.py."""

import datetime
import pathlib
import tempfile
import unittest

import common.settings
import common.templates


class TestMakeTemplates(unittest.TestCase):
    """Tests for the make_templates factory."""

    def setUp(self) -> None:
        """Create a temporary directory to use as a templates directory."""
        self.tmpdir = tempfile.mkdtemp()

    def test_domain_global_set(self) -> None:
        """make_templates sets the domain global from common.settings."""
        templates = common.templates.make_templates(self.tmpdir)
        self.assertEqual(
            templates.env.globals['domain'],  # type: ignore[reportUnknownMemberType]
            common.settings.DOMAIN,
        )

    def test_home_url_global_set(self) -> None:
        """make_templates sets the home_url global from common.settings."""
        templates = common.templates.make_templates(self.tmpdir)
        self.assertEqual(
            templates.env.globals['home_url'],  # type: ignore[reportUnknownMemberType]
            common.settings.HOME_URL,
        )

    def test_current_year_global_set(self) -> None:
        """make_templates exposes the current year for footers."""
        templates = common.templates.make_templates(self.tmpdir)
        self.assertEqual(
            templates.env.globals['current_year'],  # type: ignore[reportUnknownMemberType]
            datetime.datetime.now(datetime.UTC).year,
        )

    def test_extra_globals_added(self) -> None:
        """Keyword arguments become template globals."""
        templates = common.templates.make_templates(self.tmpdir, site_name='Acme')
        self.assertEqual(templates.env.globals['site_name'], 'Acme')  # type: ignore[reportUnknownMemberType]

    def test_accepts_pathlib_path(self) -> None:
        """make_templates accepts a pathlib.Path directory."""
        templates = common.templates.make_templates(pathlib.Path(self.tmpdir))
        self.assertIn('domain', templates.env.globals)  # type: ignore[reportUnknownMemberType,reportUnknownArgumentType]

    def test_datefmt_filter_registered(self) -> None:
        """make_templates registers the datefmt filter."""
        templates = common.templates.make_templates(self.tmpdir)
        self.assertIs(templates.env.filters['datefmt'], common.templates.datefmt)  # type: ignore[reportUnknownMemberType]


class TestDatefmt(unittest.TestCase):
    """Tests for the datefmt template filter."""

    def test_formats_date(self) -> None:
        self.assertEqual(common.templates.datefmt(datetime.date(2024, 1, 5)), 'Jan 05, 2024')

    def test_custom_format(self) -> None:
        self.assertEqual(
            common.templates.datefmt(datetime.date(2024, 1, 5), '%Y-%m-%d'), '2024-01-05'
        )

    def test_missing_date(self) -> None:
        self.assertEqual(common.templates.datefmt(None), 'Not specified')


if __name__ == '__main__':
    unittest.main()

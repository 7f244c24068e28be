"""Unit tests for catalog.py."""

import unittest

from aerial.app import catalog
from aerial.app.quotes import models as quote_models


class TestServices(unittest.TestCase):
    """Tests for the service catalogue."""

    def test_slugs_unique(self) -> None:
        """Service slugs are unique."""
        slugs = [service.slug for service in catalog.SERVICES]
        self.assertEqual(len(slugs), len(set(slugs)))

    def test_get_service(self) -> None:
        """Services are looked up by slug."""
        service = catalog.get_service('events')
        assert service is not None
        self.assertEqual(service.title, 'Event Photography')
        self.assertIsNone(catalog.get_service('weddings'))

    def test_quote_url(self) -> None:
        """Each service links to a preselected quote form."""
        service = catalog.get_service('residential')
        assert service is not None
        self.assertEqual(service.quote_service_type, quote_models.QuoteServiceType.REAL_ESTATE)
        self.assertEqual(service.quote_url, '/quote?service=real-estate')


class TestTestimonials(unittest.TestCase):
    """Tests for testimonials."""

    def test_attribution(self) -> None:
        """Attribution includes the company when there is one."""
        with_company = catalog.Testimonial(
            name='A', role='Agent', company='Realty', rating=5, text='Great'
        )
        without_company = catalog.Testimonial(name='B', role='Homeowner', rating=4, text='Good')
        self.assertEqual(with_company.attribution, 'Agent, Realty')
        self.assertEqual(without_company.attribution, 'Homeowner')

    def test_ratings_in_range(self) -> None:
        """Ratings are between 1 and the maximum."""
        for testimonial in catalog.TESTIMONIALS:
            with self.subTest(name=testimonial.name):
                self.assertTrue(1 <= testimonial.rating <= catalog.MAX_RATING)


if __name__ == '__main__':
    unittest.main()

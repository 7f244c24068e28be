"""Unit tests for services.py."""

import datetime
import unittest
from typing import Any

import sqlalchemy
import sqlalchemy.pool
import sqlmodel

from aerial.app.quotes import models, schemas, services


def make_in_memory_engine() -> sqlalchemy.Engine:
    """Create an in-memory SQLite engine for testing."""
    engine = sqlmodel.create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=sqlalchemy.pool.StaticPool,
    )
    sqlmodel.SQLModel.metadata.create_all(engine)
    return engine


def make_request(**overrides: Any) -> schemas.QuoteRequestCreate:
    """Build a valid QuoteRequestCreate."""
    data: dict[str, Any] = {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'service_type': 'aerial',
        'project_description': 'Aerial photos of our new listing.',
        'location': 'Lake Shore Drive',
        'timeline': 'flexible',
    }
    data.update(overrides)
    return schemas.QuoteRequestCreate.model_validate(data)


class TestQuoteRequestRepository(unittest.TestCase):
    """Tests for QuoteRequestRepository."""

    def setUp(self) -> None:
        """Set up an in-memory database and repository."""
        self.engine = make_in_memory_engine()
        self.session = sqlmodel.Session(self.engine)
        self.repository = services.QuoteRequestRepository(self.session)

    def tearDown(self) -> None:
        """Close the session."""
        self.session.close()

    def test_create_sets_new_status(self) -> None:
        """New requests start as NEW and get an id."""
        quote_request = self.repository.create(make_request())
        self.assertIsNotNone(quote_request.id)
        self.assertEqual(quote_request.status, models.QuoteStatus.NEW)
        self.assertEqual(quote_request.service_type, models.QuoteServiceType.AERIAL)

    def test_get(self) -> None:
        """Requests can be fetched by id."""
        created = self.repository.create(make_request())
        assert created.id is not None
        fetched = self.repository.get(created.id)
        assert fetched is not None
        self.assertEqual(fetched.name, 'Jane Doe')
        self.assertIsNone(self.repository.get(999))

    def test_list_requests_paginates_and_filters(self) -> None:
        """Listing filters by status and service type and reports the total."""
        for i in range(3):
            self.repository.create(make_request(name=f'Client {i}'))
        self.repository.create(make_request(service_type='commercial'))

        rows, total = self.repository.list_requests(page=1, limit=2)
        self.assertEqual(len(rows), 2)
        self.assertEqual(total, 4)

        rows, total = self.repository.list_requests(page=2, limit=3)
        self.assertEqual(len(rows), 1)
        self.assertEqual(total, 4)

        rows, total = self.repository.list_requests(
            service_type=models.QuoteServiceType.COMMERCIAL
        )
        self.assertEqual(total, 1)
        self.assertEqual(rows[0].service_type, models.QuoteServiceType.COMMERCIAL)

        rows, total = self.repository.list_requests(status=models.QuoteStatus.QUOTED)
        self.assertEqual((rows, total), ([], 0))

    def test_update_applies_set_fields_only(self) -> None:
        """Unset fields in the update are left unchanged."""
        created = self.repository.create(make_request())
        assert created.id is not None
        self.repository.update_status(created.id, models.QuoteStatus.REVIEWED, 'Call back')

        updated = self.repository.update(
            created.id, schemas.QuoteRequestUpdate(quoted_amount=450.0)
        )
        assert updated is not None
        self.assertEqual(updated.quoted_amount, 450.0)
        self.assertEqual(updated.status, models.QuoteStatus.REVIEWED)
        self.assertEqual(updated.admin_notes, 'Call back')

    def test_update_unknown(self) -> None:
        """Updating an unknown id returns None."""
        self.assertIsNone(self.repository.update(999, schemas.QuoteRequestUpdate()))
        self.assertIsNone(self.repository.update_status(999, models.QuoteStatus.CLOSED))

    def test_delete(self) -> None:
        """Deleting removes the row and reports unknown ids."""
        created = self.repository.create(make_request())
        assert created.id is not None
        self.assertTrue(self.repository.delete(created.id))
        self.assertIsNone(self.repository.get(created.id))
        self.assertFalse(self.repository.delete(created.id))

    def test_find_by_email(self) -> None:
        """Only requests from the given address are returned."""
        self.repository.create(make_request())
        self.repository.create(make_request(email='other@example.com'))
        found = self.repository.find_by_email('jane@example.com')
        self.assertEqual([r.email for r in found], ['jane@example.com'])

    def test_find_pending_oldest_first(self) -> None:
        """Pending means NEW or REVIEWED, ordered oldest first."""
        first = self.repository.create(make_request(name='First'))
        second = self.repository.create(make_request(name='Second'))
        done = self.repository.create(make_request(name='Done'))
        assert second.id is not None and done.id is not None
        self.repository.update_status(second.id, models.QuoteStatus.REVIEWED)
        self.repository.update_status(done.id, models.QuoteStatus.CLOSED)

        pending = self.repository.find_pending()
        self.assertEqual([r.name for r in pending], [first.name, 'Second'])

    def test_statistics(self) -> None:
        """Statistics group by status and service type."""
        self.repository.create(make_request())
        self.repository.create(make_request(service_type='commercial'))
        old = self.repository.create(make_request())
        old.created_at = datetime.datetime.now(datetime.UTC) - datetime.timedelta(days=30)
        self.session.add(old)
        self.session.commit()
        assert old.id is not None
        self.repository.update_status(old.id, models.QuoteStatus.CLOSED)

        stats = self.repository.statistics()
        self.assertEqual(stats['total'], 3)
        self.assertEqual(stats['by_status'], {'NEW': 2, 'CLOSED': 1})
        self.assertEqual(stats['by_service_type'], {'aerial': 2, 'commercial': 1})
        self.assertEqual(stats['recent_count'], 2)


if __name__ == '__main__':
    unittest.main()

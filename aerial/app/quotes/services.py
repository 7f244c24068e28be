"""Database access for quote requests."""

import datetime
from typing import Any

import sqlalchemy
import sqlmodel

from . import models, schemas

RECENT_WINDOW = datetime.timedelta(days=7)


class QuoteRequestRepository:
    """CRUD and reporting queries for QuoteRequest rows."""

    def __init__(self, session: sqlmodel.Session):
        self.session = session

    def create(self, data: schemas.QuoteRequestCreate) -> models.QuoteRequest:
        """Store a new request with status NEW."""
        quote_request = models.QuoteRequest(**data.model_dump(), status=models.QuoteStatus.NEW)
        self.session.add(quote_request)
        self.session.commit()
        self.session.refresh(quote_request)
        return quote_request

    def get(self, quote_id: int) -> models.QuoteRequest | None:
        return self.session.get(models.QuoteRequest, quote_id)

    def list_requests(
        self,
        page: int = 1,
        limit: int = 20,
        status: models.QuoteStatus | None = None,
        service_type: models.QuoteServiceType | None = None,
    ) -> tuple[list[models.QuoteRequest], int]:
        """Return one page of requests, newest first, and the filtered total."""
        filters: list[Any] = []
        if status is not None:
            filters.append(models.QuoteRequest.status == status)
        if service_type is not None:
            filters.append(models.QuoteRequest.service_type == service_type)

        statement = (
            sqlmodel.select(models.QuoteRequest)
            .where(*filters)
            .order_by(
                models.QuoteRequest.created_at.desc(),  # type: ignore
                models.QuoteRequest.id.desc(),  # type: ignore
            )
            .offset((page - 1) * limit)
            .limit(limit)
        )
        count_statement = (
            sqlmodel.select(sqlalchemy.func.count())
            .select_from(models.QuoteRequest)
            .where(*filters)
        )
        rows = list(self.session.exec(statement).all())
        total = self.session.exec(count_statement).one()
        return rows, total

    def update(
        self, quote_id: int, data: schemas.QuoteRequestUpdate
    ) -> models.QuoteRequest | None:
        """Apply the fields set on *data*. Returns None for unknown ids."""
        quote_request = self.get(quote_id)
        if quote_request is None:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(quote_request, key, value)
        return self._save(quote_request)

    def update_status(
        self, quote_id: int, status: models.QuoteStatus, admin_notes: str | None = None
    ) -> models.QuoteRequest | None:
        quote_request = self.get(quote_id)
        if quote_request is None:
            return None
        quote_request.status = status
        if admin_notes is not None:
            quote_request.admin_notes = admin_notes
        return self._save(quote_request)

    def delete(self, quote_id: int) -> bool:
        quote_request = self.get(quote_id)
        if quote_request is None:
            return False
        self.session.delete(quote_request)
        self.session.commit()
        return True

    def find_by_email(self, email: str) -> list[models.QuoteRequest]:
        statement = (
            sqlmodel.select(models.QuoteRequest)
            .where(models.QuoteRequest.email == email)
            .order_by(
                models.QuoteRequest.created_at.desc(),  # type: ignore
                models.QuoteRequest.id.desc(),  # type: ignore
            )
        )
        return list(self.session.exec(statement).all())

    def find_pending(self) -> list[models.QuoteRequest]:
        """Requests still awaiting a quote, oldest first."""
        statement = (
            sqlmodel.select(models.QuoteRequest)
            .where(models.QuoteRequest.status.in_(models.PENDING_STATUSES))  # type: ignore
            .order_by(
                models.QuoteRequest.created_at.asc(),  # type: ignore
                models.QuoteRequest.id.asc(),  # type: ignore
            )
        )
        return list(self.session.exec(statement).all())

    def statistics(self) -> dict[str, Any]:
        """Totals by status and service type plus the last week's count."""
        total = self.session.exec(
            sqlmodel.select(sqlalchemy.func.count()).select_from(models.QuoteRequest)
        ).one()
        by_status = self.session.exec(
            sqlmodel.select(models.QuoteRequest.status, sqlalchemy.func.count()).group_by(
                models.QuoteRequest.status
            )
        ).all()
        by_service_type = self.session.exec(
            sqlmodel.select(
                models.QuoteRequest.service_type, sqlalchemy.func.count()
            ).group_by(models.QuoteRequest.service_type)
        ).all()
        since = datetime.datetime.now(datetime.UTC) - RECENT_WINDOW
        recent = self.session.exec(
            sqlmodel.select(sqlalchemy.func.count())
            .select_from(models.QuoteRequest)
            .where(models.QuoteRequest.created_at >= since)
        ).one()
        return {
            'total': total,
            'by_status': {str(status): count for status, count in by_status},
            'by_service_type': {str(service): count for service, count in by_service_type},
            'recent_count': recent,
        }

    def _save(self, quote_request: models.QuoteRequest) -> models.QuoteRequest:
        quote_request.updated_at = datetime.datetime.now(datetime.UTC)
        self.session.add(quote_request)
        self.session.commit()
        self.session.refresh(quote_request)
        return quote_request

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta

import pytest

from sp_cert_expiry.domain.entities import CredentialRecord
from sp_cert_expiry.domain.value_objects import CredentialType

REFERENCE_DATE = date(2026, 1, 15)


@pytest.fixture
def today() -> date:
    """Fixed reference date for ranking."""
    return REFERENCE_DATE


@pytest.fixture
def midnight(today: date) -> datetime:
    """UTC midnight of the reference date."""
    return datetime.combine(today, time.min, tzinfo=UTC)


@pytest.fixture
def make_record(midnight: datetime) -> Callable[..., CredentialRecord]:
    """Factory for records expiring a number of days after the reference midnight."""

    def _make(name: str, days: float | None, **kwargs: object) -> CredentialRecord:
        expires_at = None if days is None else midnight + timedelta(days=days)
        return CredentialRecord(
            owner_name=name,
            expires_at=expires_at,
            credential_type=CredentialType.CERTIFICATE if days is not None else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def mixed_records(make_record: Callable[..., CredentialRecord]) -> list[CredentialRecord]:
    """Mixed records: far future, expired, no expiry, near future."""
    return [
        make_record("A", 400),
        make_record("B", -5),
        make_record("C", None),
        make_record("D", 2),
    ]

"""Expiry status derivation shared by licenses and inductions.

All comparisons are made on calendar days. Datetimes are converted to their
UTC date first so a timestamp late in the evening in one timezone does not
land on a different day than the same instant elsewhere.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum

from opsflow.core.config import settings
from opsflow.models.induction import InductionStatus
from opsflow.models.license import LicenseStatus


class ExpiryStatus(str, Enum):
    VALID = "Valid"
    EXPIRING_SOON = "Expiring Soon"
    EXPIRED = "Expired"


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _as_utc_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(timezone.utc).date()
    return value


def days_until_expiry(expiry: date | datetime, today: date | None = None) -> int:
    today = today or utc_today()
    return (_as_utc_date(expiry) - _as_utc_date(today)).days


def classify(days: int, threshold_days: int | None = None) -> ExpiryStatus:
    if threshold_days is None:
        threshold_days = settings.EXPIRY_WARNING_DAYS
    if days < 0:
        return ExpiryStatus.EXPIRED
    if days <= threshold_days:
        return ExpiryStatus.EXPIRING_SOON
    return ExpiryStatus.VALID


def expiry_status(
    expiry: date | datetime | None,
    today: date | None = None,
    threshold_days: int | None = None,
) -> ExpiryStatus | None:
    if expiry is None:
        return None
    return classify(days_until_expiry(expiry, today), threshold_days)


def license_status(
    expiry: date | datetime,
    today: date | None = None,
    stored: LicenseStatus | None = None,
) -> LicenseStatus:
    derived = LicenseStatus(expiry_status(expiry, today).value)
    if stored == LicenseStatus.RENEWAL_PENDING and derived != LicenseStatus.EXPIRED:
        # Set by hand while a renewal is in flight, cleared by the renewal itself
        return stored
    return derived


def induction_status(
    stored: InductionStatus,
    expiry: date | datetime | None,
    today: date | None = None,
) -> InductionStatus:
    if expiry is not None and days_until_expiry(expiry, today) < 0:
        return InductionStatus.EXPIRED
    if stored == InductionStatus.EXPIRED:
        # Stored as expired but the expiry date has since moved forward
        return InductionStatus.PENDING
    return stored

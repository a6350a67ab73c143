from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone

from opsflow.core.expiry import (
    ExpiryStatus,
    classify,
    days_until_expiry,
    expiry_status,
    induction_status,
    license_status,
)
from opsflow.models.induction import InductionStatus
from opsflow.models.license import LicenseStatus

TODAY = date(2026, 3, 1)


class ExpiryDerivationTests(unittest.TestCase):
    def test_days_until_expiry_counts_calendar_days(self) -> None:
        self.assertEqual(days_until_expiry(date(2026, 3, 31), TODAY), 30)
        self.assertEqual(days_until_expiry(TODAY, TODAY), 0)
        self.assertEqual(days_until_expiry(date(2026, 2, 28), TODAY), -1)

    def test_aware_datetimes_are_compared_on_their_utc_date(self) -> None:
        # 23:30 on 1 March at UTC-5 is already 2 March in UTC
        late_evening = datetime(2026, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(days_until_expiry(late_evening, TODAY), 1)

    def test_classification_boundaries(self) -> None:
        self.assertEqual(classify(-1), ExpiryStatus.EXPIRED)
        self.assertEqual(classify(0), ExpiryStatus.EXPIRING_SOON)
        self.assertEqual(classify(30), ExpiryStatus.EXPIRING_SOON)
        self.assertEqual(classify(31), ExpiryStatus.VALID)
        self.assertEqual(classify(10, threshold_days=7), ExpiryStatus.VALID)

    def test_missing_expiry_has_no_status(self) -> None:
        self.assertIsNone(expiry_status(None, TODAY))

    def test_license_status_never_renewal_pending(self) -> None:
        for offset in range(-40, 80, 5):
            status = license_status(TODAY + timedelta(days=offset), TODAY)
            self.assertNotEqual(status, LicenseStatus.RENEWAL_PENDING)
        self.assertEqual(license_status(TODAY - timedelta(days=1), TODAY), LicenseStatus.EXPIRED)
        self.assertEqual(license_status(TODAY + timedelta(days=5), TODAY), LicenseStatus.EXPIRING_SOON)
        self.assertEqual(license_status(TODAY + timedelta(days=90), TODAY), LicenseStatus.VALID)

    def test_stored_renewal_pending_holds_until_expiry(self) -> None:
        pending = LicenseStatus.RENEWAL_PENDING
        self.assertEqual(license_status(TODAY + timedelta(days=200), TODAY, stored=pending), pending)
        self.assertEqual(license_status(TODAY, TODAY, stored=pending), pending)
        self.assertEqual(license_status(TODAY - timedelta(days=1), TODAY, stored=pending), LicenseStatus.EXPIRED)
        self.assertEqual(
            license_status(TODAY + timedelta(days=200), TODAY, stored=LicenseStatus.EXPIRED), LicenseStatus.VALID
        )

    def test_induction_past_expiry_is_expired_whatever_was_stored(self) -> None:
        past = TODAY - timedelta(days=3)
        for stored in InductionStatus:
            self.assertEqual(induction_status(stored, past, TODAY), InductionStatus.EXPIRED)

    def test_induction_keeps_workflow_status_until_expiry(self) -> None:
        future = TODAY + timedelta(days=60)
        self.assertEqual(induction_status(InductionStatus.COMPLETED, future, TODAY), InductionStatus.COMPLETED)
        self.assertEqual(induction_status(InductionStatus.IN_PROGRESS, None, TODAY), InductionStatus.IN_PROGRESS)
        self.assertEqual(induction_status(InductionStatus.EXPIRED, future, TODAY), InductionStatus.PENDING)


if __name__ == "__main__":
    unittest.main()

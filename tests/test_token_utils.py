import unittest
from datetime import datetime, timedelta, timezone

from backend.app.tokens.utils import (
    as_utc,
    calculate_expires_at,
    format_timestamp,
    generate_token_value,
    utc_now,
)


class TestCalculateExpiresAt(unittest.TestCase):

    def setUp(self):
        self.created_at = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_adds_the_correct_number_of_minutes(self):
        result = calculate_expires_at(self.created_at, 60)
        self.assertEqual(format_timestamp(result), "2025-01-01T11:00:00.000Z")

    def test_handles_non_round_minute_values(self):
        result = calculate_expires_at(self.created_at, 30)
        self.assertEqual(format_timestamp(result), "2025-01-01T10:30:00.000Z")

    def test_exact_to_the_millisecond(self):
        created_at = datetime(2025, 3, 9, 23, 59, 59, 123000, tzinfo=timezone.utc)
        for minutes in (1, 7, 1439, 525600):
            result = calculate_expires_at(created_at, minutes)
            self.assertEqual(result - created_at, timedelta(milliseconds=minutes * 60_000))

    def test_returns_a_new_value_and_does_not_touch_the_input(self):
        result = calculate_expires_at(self.created_at, 10)

        self.assertIsNot(result, self.created_at)
        self.assertEqual(self.created_at, datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))

    def test_identical_inputs_give_distinct_values(self):
        first = calculate_expires_at(self.created_at, 5)
        second = calculate_expires_at(self.created_at, 5)

        self.assertEqual(first, second)
        self.assertIsNot(first, second)


class TestTimestampHelpers(unittest.TestCase):

    def test_utc_now_is_aware_and_millisecond_precise(self):
        now = utc_now()
        self.assertEqual(now.tzinfo, timezone.utc)
        self.assertEqual(now.microsecond % 1000, 0)

    def test_as_utc_treats_naive_values_as_utc(self):
        naive = datetime(2025, 1, 1, 10, 0)
        self.assertEqual(as_utc(naive), datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))

    def test_as_utc_converts_other_offsets(self):
        lisbon_summer = timezone(timedelta(hours=1))
        value = datetime(2025, 7, 1, 12, 0, tzinfo=lisbon_summer)
        self.assertEqual(as_utc(value), datetime(2025, 7, 1, 11, 0, tzinfo=timezone.utc))

    def test_format_timestamp_uses_z_suffix(self):
        value = datetime(2025, 1, 1, 10, 0, 0, 250000, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(value), "2025-01-01T10:00:00.250Z")

    def test_generated_token_values_are_unique(self):
        values = {generate_token_value() for _ in range(1000)}
        self.assertEqual(len(values), 1000)


if __name__ == "__main__":
    unittest.main()

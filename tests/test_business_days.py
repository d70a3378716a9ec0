from datetime import date, datetime

from tracker_app.analytics.metrics.business_days import business_days


def test_same_weekday_counts_one():
    assert business_days(date(2024, 1, 3), date(2024, 1, 3)) == 1


def test_same_weekend_day_counts_zero():
    assert business_days(date(2024, 1, 6), date(2024, 1, 6)) == 0


def test_full_week_counts_five():
    assert business_days(date(2024, 1, 1), date(2024, 1, 7)) == 5
    assert business_days(date(2024, 1, 3), date(2024, 1, 9)) == 5


def test_monday_to_friday_inclusive():
    assert business_days(date(2024, 1, 1), date(2024, 1, 5)) == 5


def test_inverted_or_missing_range():
    assert business_days(date(2024, 1, 5), date(2024, 1, 1)) == 0
    assert business_days(None, date(2024, 1, 1)) == 0
    assert business_days(date(2024, 1, 1), None) == 0


def test_time_of_day_ignored():
    start = datetime(2024, 1, 1, 23, 59)
    end = datetime(2024, 1, 2, 0, 1)
    assert business_days(start, end) == 2

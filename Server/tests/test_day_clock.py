from datetime import date, datetime, timedelta, timezone

from lexi.services.day_clock import DayClock


def test_epoch_mapping():
    clock = DayClock()
    assert clock.day_number_of(date(1999, 12, 31)) == 0
    assert clock.day_number_of(date(2000, 1, 1)) == 1
    assert clock.date_of(1) == date(2000, 1, 1)


def test_time_of_day_is_truncated():
    clock = DayClock()
    morning = datetime(2026, 10, 19, 0, 0, 1)
    night = datetime(2026, 10, 19, 23, 59, 59)
    assert clock.day_number_of(morning) == clock.day_number_of(night)
    assert clock.day_number_of(night + timedelta(seconds=1)) == clock.day_number_of(night) + 1


def test_round_trip_for_arbitrary_dates():
    clock = DayClock()
    start = date(1998, 3, 1)
    for offset in range(0, 12000, 97):
        day = start + timedelta(days=offset)
        assert clock.date_of(clock.day_number_of(day)) == day


def test_round_trip_from_datetime():
    clock = DayClock()
    moment = datetime(2024, 2, 29, 18, 45)
    assert clock.date_of(clock.day_number_of(moment)) == moment.date()


def test_aware_datetimes_use_local_day():
    clock = DayClock()
    moment = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    local = moment.astimezone().replace(tzinfo=None)
    assert clock.day_number_of(moment) == clock.day_number_of(local)


def test_today_uses_injected_clock():
    clock = DayClock(now=lambda: datetime(2000, 1, 2, 8, 0))
    assert clock.today_number() == 2
    assert clock.today() == date(2000, 1, 2)


def test_negative_day_numbers_are_not_rejected():
    clock = DayClock()
    assert clock.day_number_of(date(1999, 12, 1)) == -30

"""CalendarCodec breakdown and composition tests."""

import pytest

from pyosdate import CalendarCodec, CalendarRecord, SerializedBreakdown

NEW_YEAR_2020 = 1577836800


class TestBreakdown:
    def test_epoch_utc(self):
        record = CalendarCodec().breakdown(0, utc=True)
        assert record == CalendarRecord(
            year=1970, month=1, day=1, hour=0, minute=0, second=0,
            weekday=5, yearday=1, isdst=False,
        )

    def test_weekday_counts_from_sunday(self):
        codec = CalendarCodec()
        assert codec.breakdown(NEW_YEAR_2020, utc=True).weekday == 4
        # 2020-01-05 was a Sunday
        assert codec.breakdown(NEW_YEAR_2020 + 4 * 86400, utc=True).weekday == 1

    def test_yearday_is_one_based(self):
        record = CalendarCodec().breakdown(NEW_YEAR_2020 + 59 * 86400, utc=True)
        assert (record.month, record.day, record.yearday) == (2, 29, 60)

    def test_out_of_range_is_none(self):
        assert CalendarCodec().breakdown(10**20, utc=True) is None

    def test_local_uses_timezone(self, eastern_local):
        record = CalendarCodec().breakdown(0)
        assert (record.year, record.month, record.day, record.hour) == (1969, 12, 31, 19)
        assert record.isdst is False

    def test_local_summer_time(self, eastern_local):
        record = CalendarCodec().breakdown(1600000000)
        assert (record.month, record.day, record.hour, record.minute) == (9, 13, 8, 26)
        assert record.isdst is True

    def test_serialized_primitive(self):
        codec = CalendarCodec(SerializedBreakdown())
        assert codec.breakdown(0, utc=True).year == 1970


class TestCompose:
    def test_utc(self):
        record = CalendarRecord(year=2020, month=1, day=1, hour=0)
        assert CalendarCodec().compose(record, utc=True) == NEW_YEAR_2020

    def test_default_hour_is_noon(self):
        record = CalendarRecord(year=2020, month=1, day=1)
        assert CalendarCodec().compose(record, utc=True) == NEW_YEAR_2020 + 12 * 3600

    def test_day_rolls_over(self):
        record = CalendarRecord(year=2020, month=1, day=35, hour=0)
        assert CalendarCodec().compose(record, utc=True) == NEW_YEAR_2020 + 34 * 86400

    def test_month_rolls_over(self):
        record = CalendarRecord(year=2019, month=13, day=1, hour=0)
        assert CalendarCodec().compose(record, utc=True) == NEW_YEAR_2020

    def test_month_zero_rolls_back(self):
        record = CalendarRecord(year=2020, month=0, day=1, hour=0)
        expected = CalendarCodec().compose(CalendarRecord(year=2019, month=12, day=1, hour=0), utc=True)
        assert CalendarCodec().compose(record, utc=True) == expected

    def test_weekday_and_yearday_ignored(self):
        record = CalendarRecord(year=2020, month=1, day=1, hour=0, weekday=7, yearday=200)
        assert CalendarCodec().compose(record, utc=True) == NEW_YEAR_2020

    def test_sentinel_is_invalid(self):
        record = CalendarRecord(year=1969, month=12, day=31, hour=23, minute=59, second=59)
        assert CalendarCodec().compose(record, utc=True) is None

    def test_unrepresentable_utc(self):
        record = CalendarRecord(year=10**12, month=1, day=1)
        assert CalendarCodec().compose(record, utc=True) is None

    def test_unrepresentable_local(self, utc_local):
        record = CalendarRecord(year=10**12, month=1, day=1)
        assert CalendarCodec().compose(record) is None

    def test_local(self, utc_local):
        record = CalendarRecord(year=2020, month=1, day=35)
        assert CalendarCodec().compose(record) == NEW_YEAR_2020 + 34 * 86400 + 12 * 3600

    def test_local_with_dst(self, eastern_local):
        record = CalendarRecord(year=2020, month=7, day=1, hour=0)
        # EDT is four hours behind UTC
        expected = CalendarCodec().compose(CalendarRecord(year=2020, month=7, day=1, hour=4), utc=True)
        assert CalendarCodec().compose(record) == expected


class TestRoundTrip:
    TIMESTAMPS = [0, 1, 86399, 951782400, NEW_YEAR_2020, 1600000000, 2147483647, -86400 * 365]

    @pytest.mark.parametrize("t", TIMESTAMPS)
    def test_utc(self, t):
        codec = CalendarCodec()
        assert codec.compose(codec.breakdown(t, utc=True), utc=True) == t

    @pytest.mark.parametrize("t", [86400, 951782400, 1580000000, 1600000000, 2147483647])
    def test_local(self, eastern_local, t):
        codec = CalendarCodec()
        assert codec.compose(codec.breakdown(t)) == t


class TestWideRangeUtc:
    # Years outside 1..9999: 10000, 33658, 0 and -1199.
    TIMESTAMPS = [253402300800, 10**12, -62135596801, -10**11]

    @pytest.mark.parametrize("t", TIMESTAMPS)
    def test_round_trip(self, t):
        codec = CalendarCodec()
        record = codec.breakdown(t, utc=True)
        assert record is not None
        assert codec.compose(record, utc=True) == t

    def test_year_ten_thousand(self):
        record = CalendarRecord(year=10000, month=1, day=1, hour=0)
        assert CalendarCodec().compose(record, utc=True) == 253402300800

    def test_year_zero_is_leap(self):
        record = CalendarRecord(year=0, month=2, day=29, hour=0)
        march_first = CalendarRecord(year=0, month=3, day=1, hour=0)
        codec = CalendarCodec()
        assert codec.compose(march_first, utc=True) - codec.compose(record, utc=True) == 86400

    def test_breakdown_years(self):
        codec = CalendarCodec()
        assert [codec.breakdown(t, utc=True).year for t in self.TIMESTAMPS] == [10000, 33658, 0, -1199]

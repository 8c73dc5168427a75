"""Tests for conventions and schedule generation."""

from datetime import date

import pytest

from smartmargin.conventions import (
    ACT_360,
    ACT_365F,
    BusinessDayAdjustment,
    Frequency,
    StubType,
    TARGET,
    get_calendar,
    get_day_count_convention,
)
from smartmargin.conventions.tenor import add_tenor, parse_tenor, tenor_to_months
from smartmargin.schedule import (
    adjust_date,
    apply_spot_lag,
    create_schedule,
    create_schedule_from_conventions,
)


class TestConventions:
    def test_day_counts(self):
        assert ACT_360.year_fraction(date(2020, 1, 15), date(2020, 7, 15)) == pytest.approx(
            182 / 360
        )
        assert ACT_360.day_count(date(2020, 1, 15), date(2020, 7, 15)) == 182
        assert ACT_365F.year_fraction(date(2020, 1, 15), date(2021, 1, 15)) == pytest.approx(
            366 / 365
        )
        assert get_day_count_convention("30/360").year_fraction(
            date(2020, 1, 31), date(2020, 7, 31)
        ) == pytest.approx(0.5)

    def test_fpml_day_count_names(self):
        assert get_day_count_convention("ACT/365.FIXED") is ACT_365F
        assert get_day_count_convention("act/360") is ACT_360
        with pytest.raises(ValueError):
            get_day_count_convention("BUS/252")

    def test_calendars(self):
        assert get_calendar("euta") is TARGET
        assert not TARGET.is_business_day(date(2020, 12, 25))
        assert not TARGET.is_business_day(date(2020, 5, 1))
        assert TARGET.is_business_day(date(2020, 5, 4))
        with pytest.raises(ValueError):
            get_calendar("USNY")

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("1Y", Frequency.ANNUAL),
            ("12M", Frequency.ANNUAL),
            ("6M", Frequency.SEMIANNUAL),
            ("3m", Frequency.QUARTERLY),
            ("quarterly", Frequency.QUARTERLY),
            ("1T", Frequency.TERM),
        ],
    )
    def test_frequency_labels(self, label, expected):
        assert Frequency.from_label(label) == expected

    def test_unsupported_frequency(self):
        with pytest.raises(ValueError):
            Frequency.from_label("5M")

    def test_tenors(self):
        assert parse_tenor("10y") == (10, "Y")
        assert tenor_to_months("2Y") == 24
        assert add_tenor(date(2020, 1, 31), "1M") == date(2020, 2, 29)
        assert add_tenor(date(2020, 1, 15), "2W") == date(2020, 1, 29)
        with pytest.raises(ValueError):
            parse_tenor("Y")


class TestAdjustments:
    def test_following(self):
        # Christmas 2020 is a Friday
        assert adjust_date(
            date(2020, 12, 25), BusinessDayAdjustment.FOLLOWING, TARGET
        ) == date(2020, 12, 28)

    def test_modified_following_stays_in_month(self):
        # 29 February 2020 is a Saturday
        assert adjust_date(
            date(2020, 2, 29), BusinessDayAdjustment.MODIFIED_FOLLOWING, TARGET
        ) == date(2020, 2, 28)

    def test_modified_preceding_stays_in_month(self):
        # 1 March 2020 is a Sunday
        assert adjust_date(
            date(2020, 3, 1), BusinessDayAdjustment.MODIFIED_PRECEDING, TARGET
        ) == date(2020, 3, 2)

    def test_no_adjustment(self):
        assert adjust_date(
            date(2020, 2, 29), BusinessDayAdjustment.NO_ADJUSTMENT, TARGET
        ) == date(2020, 2, 29)

    def test_spot_lag(self):
        assert apply_spot_lag(date(2020, 1, 15), 2, TARGET) == date(2020, 1, 17)
        assert apply_spot_lag(date(2020, 12, 23), 2, TARGET) == date(2020, 12, 28)

    def test_adjustment_labels(self):
        assert BusinessDayAdjustment.from_label("MODFOLLOWING") == (
            BusinessDayAdjustment.MODIFIED_FOLLOWING
        )
        assert BusinessDayAdjustment.from_label("none") == BusinessDayAdjustment.NO_ADJUSTMENT
        assert StubType.from_label("first") == StubType.SHORT_INITIAL


class TestScheduleGeneration:
    def test_regular_annual_schedule(self):
        schedule = create_schedule(
            date(2020, 1, 13), date(2020, 1, 15), date(2025, 1, 15), "1Y", "30/360"
        )

        assert len(schedule) == 5
        assert schedule.start_date == date(2020, 1, 15)
        assert schedule.maturity_date == date(2025, 1, 15)
        assert not any(period.is_stub for period in schedule)
        assert all(p.end_date == n.start_date for p, n in zip(schedule, schedule[1:]))

    def test_short_final_stub(self):
        schedule = create_schedule(
            date(2020, 1, 15), date(2020, 1, 15), date(2021, 3, 15), "6M", "ACT/360"
        )

        assert len(schedule) == 3
        assert schedule[-1].is_stub
        assert schedule[-1].start_date == date(2021, 1, 15)

    def test_short_initial_stub(self):
        schedule = create_schedule(
            date(2020, 1, 15),
            date(2020, 1, 15),
            date(2021, 3, 15),
            "6M",
            "ACT/360",
            stub_type=StubType.SHORT_INITIAL,
        )

        assert len(schedule) == 3
        assert schedule[0].is_stub
        assert schedule[0].end_date == date(2020, 3, 16)

    def test_term_frequency_single_period(self):
        schedule = create_schedule(
            date(2020, 1, 15), date(2020, 1, 15), date(2022, 1, 14), Frequency.TERM, "ACT/360"
        )

        assert len(schedule) == 1

    def test_offsets(self):
        schedule = create_schedule(
            date(2020, 1, 15),
            date(2020, 1, 15),
            date(2021, 1, 15),
            "6M",
            "ACT/360",
            fixing_offset_days=2,
            payment_offset_days=1,
        )

        assert schedule[0].fixing_date == date(2020, 1, 13)
        assert schedule[0].payment_date == date(2020, 7, 16)

    def test_times_from_reference_date(self):
        schedule = create_schedule(
            date(2020, 1, 15), date(2020, 1, 15), date(2021, 1, 15), "1Y", "ACT/360"
        )

        assert schedule.time(date(2020, 1, 15)) == 0.0
        assert schedule.final_payment_time == pytest.approx(366 / 365)
        assert schedule[0].year_fraction == pytest.approx(366 / 360)

    def test_maturity_not_after_effective_date(self):
        with pytest.raises(ValueError):
            create_schedule(
                date(2020, 1, 15), date(2020, 1, 15), date(2020, 1, 15), "1Y", "ACT/360"
            )

    def test_from_conventions(self):
        schedule = create_schedule_from_conventions(
            date(2020, 1, 15),
            spot_offset_days=2,
            start_offset="1Y",
            maturity="2Y",
            frequency="1Y",
            day_count="ACT/360",
            stub_type=StubType.SHORT_FINAL,
            business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
            calendar="TARGET",
        )

        assert schedule.reference_date == date(2020, 1, 15)
        assert schedule.start_date == date(2021, 1, 18)
        assert schedule.maturity_date == date(2023, 1, 17)
        assert len(schedule) == 2

    @pytest.mark.parametrize(
        "end_of_month, expected_ends",
        [
            (True, [date(2020, 7, 31), date(2020, 10, 31), date(2021, 1, 31)]),
            (False, [date(2020, 7, 30), date(2020, 10, 30), date(2021, 1, 30)]),
        ],
    )
    def test_end_of_month_rule(self, end_of_month, expected_ends):
        schedule = create_schedule(
            date(2020, 4, 30),
            date(2020, 4, 30),
            date(2021, 4, 30),
            "3M",
            "ACT/360",
            business_day_adjustment=BusinessDayAdjustment.NO_ADJUSTMENT,
            end_of_month=end_of_month,
        )

        assert [period.end_date for period in schedule][:3] == expected_ends
        assert not any(period.is_stub for period in schedule)

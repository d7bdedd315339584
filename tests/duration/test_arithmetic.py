"""
tests/duration/test_arithmetic.py

Covers:
  - add / + with durations and mappings
  - Week vs component incompatibility, weeks ignored by components
  - invert / - and subtract
  - reduce_precision
  - to_seconds / float()
  - copy and equality
"""

import copy as copy_module

import pytest

from durationkit.duration import (
    ComponentDuration,
    DurationTypeError,
    IncompatibilityError,
    OutOfRangeError,
    Unit,
    UnknownUnitError,
    WeekDuration,
    add,
    construct,
    copy,
    invert,
    parse,
    reduce_precision,
    subtract,
    to_seconds,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def full():
    """P1Y2M3DT4H5M6S"""
    return construct(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)


@pytest.fixture
def one_week():
    return construct(weeks=1)


# ── Addition ──────────────────────────────────────────────────────────────────

class TestAdd:

    def test_components(self):
        assert add(construct(hours=1), construct(hours=2)) == construct(hours=3)

    def test_operator(self):
        assert parse("P1D") + parse("PT12H") == construct(days=1, hours=12)

    def test_mapping_only_touches_present_fields(self, full):
        result = full + {"minutes": 10}
        assert result == construct(years=1, months=2, days=3, hours=4, minutes=15, seconds=6)

    def test_mapping_unknown_keys_ignored(self):
        assert construct(days=1) + {"days": 1, "colour": "red"} == construct(days=2)

    def test_mapping_values_are_coerced(self):
        assert construct(days=1) + {"days": "2"} == construct(days=3)

    def test_mapping_non_numeric_value_raises(self):
        with pytest.raises(DurationTypeError):
            construct(days=1) + {"days": "two"}

    def test_result_is_not_normalized(self):
        assert construct(seconds=50) + construct(seconds=50) == construct(seconds=100)

    def test_does_not_mutate_operands(self):
        a, b = construct(hours=1), construct(hours=2)
        add(a, b)
        assert a == construct(hours=1)
        assert b == construct(hours=2)

    def test_weeks(self, one_week):
        assert add(one_week, construct(weeks=2)) == WeekDuration(3)

    def test_weeks_with_mapping(self, one_week):
        assert one_week + {"weeks": 0.5} == WeekDuration(1.5)

    def test_weeks_plus_components_incompatible(self, one_week):
        with pytest.raises(IncompatibilityError):
            add(one_week, {"hours": 1})

    def test_weeks_plus_component_duration_incompatible(self, one_week):
        # a component duration always carries all six fields, even when zero
        with pytest.raises(IncompatibilityError):
            one_week + construct()

    def test_weeks_plus_empty_mapping_is_copy(self, one_week):
        result = one_week + {}
        assert result == one_week
        assert result is not one_week

    def test_components_plus_weeks_ignores_weeks(self):
        assert construct(days=1) + construct(weeks=1) == construct(days=1)

    def test_components_plus_week_mapping_ignores_weeks(self):
        assert add(construct(hours=1), {"weeks": 2, "hours": 1}) == construct(hours=2)

    def test_weeks_overflow_raises(self):
        with pytest.raises(DurationTypeError):
            construct(weeks=1e308) + {"weeks": 1e308}

    def test_components_overflow_raises(self):
        with pytest.raises(DurationTypeError):
            construct(seconds=1e308) + construct(seconds=1e308)

    def test_incompatibility_is_type_error(self, one_week):
        with pytest.raises(TypeError):
            one_week + {"days": 1}

    def test_non_duration_raises(self):
        with pytest.raises(DurationTypeError):
            add(construct(days=1), 5)

    def test_operator_with_number_raises_type_error(self):
        with pytest.raises(TypeError):
            construct(days=1) + 5


# ── Inversion and subtraction ─────────────────────────────────────────────────

class TestInvertSubtract:

    def test_invert_components(self):
        assert invert(construct(hours=2)) == construct(hours=-2)

    def test_invert_all_fields(self, full):
        assert -full == construct(years=-1, months=-2, days=-3, hours=-4, minutes=-5, seconds=-6)

    def test_invert_weeks(self):
        assert -construct(weeks=2) == WeekDuration(-2)

    def test_double_invert(self, full):
        assert -(-full) == full

    def test_invert_returns_new_instance(self, full):
        _ = -full
        assert full == construct(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)

    def test_subtract(self):
        assert subtract(construct(days=2), construct(days=1, hours=6)) == construct(days=1, hours=-6)

    def test_subtract_operator_weeks(self):
        assert construct(weeks=3) - construct(weeks=1) == WeekDuration(2)

    def test_subtract_mapping(self, full):
        assert full - {"years": 1} == construct(months=2, days=3, hours=4, minutes=5, seconds=6)

    @pytest.mark.parametrize(
        "a, b",
        [
            ("P1D", "PT1H"),
            ("P1Y2M3DT4H5M6S", "P6Y5M4DT3H2M1S"),
            ("PT0S", "PT1.5S"),
            ("P3W", "P1W"),
        ],
    )
    def test_subtract_is_add_of_inverse(self, a, b):
        assert subtract(parse(a), parse(b)) == add(parse(a), invert(parse(b)))

    def test_subtract_mapping_is_add_of_negated(self, one_week):
        assert one_week - {} == add(one_week, {})

    def test_subtract_incompatible(self):
        with pytest.raises(IncompatibilityError):
            subtract(parse("P1W"), parse("PT1H"))
        with pytest.raises(IncompatibilityError):
            add(parse("P1W"), invert(parse("PT1H")))

    def test_subtract_weeks_from_components_ignores_weeks(self):
        a, b = parse("PT1H"), parse("P1W")
        assert subtract(a, b) == a
        assert subtract(a, b) == add(a, invert(b))


# ── Precision ─────────────────────────────────────────────────────────────────

class TestReducePrecision:

    def test_to_days(self, full):
        assert reduce_precision(full, "days") == construct(years=1, months=2, days=3)

    def test_to_years(self, full):
        assert full.reduce_precision("years") == construct(years=1)

    def test_to_seconds_keeps_everything(self, full):
        assert full.reduce_precision(Unit.SECONDS) == full

    def test_returns_new_instance(self, full):
        result = full.reduce_precision("seconds")
        result.normalize()
        assert result is not full

    def test_unknown_unit_raises(self, full):
        with pytest.raises(UnknownUnitError):
            full.reduce_precision("fortnights")

    def test_weeks_is_not_a_precision(self, one_week):
        with pytest.raises(UnknownUnitError):
            one_week.reduce_precision("weeks")

    @pytest.mark.parametrize("unit", ["years", "months"])
    def test_weeks_to_coarse_unit_is_zero(self, one_week, unit):
        result = one_week.reduce_precision(unit)
        assert isinstance(result, ComponentDuration)
        assert result == construct()

    @pytest.mark.parametrize("unit", ["days", "hours", "minutes", "seconds"])
    def test_weeks_to_fine_unit_is_unchanged(self, one_week, unit):
        assert one_week.reduce_precision(unit) == WeekDuration(1)


# ── Seconds ───────────────────────────────────────────────────────────────────

class TestToSeconds:

    def test_one_day(self):
        assert to_seconds(construct(days=1)) == 86400

    def test_all_time_fields(self):
        assert parse("P1DT1H1M1S").to_seconds() == 90061

    def test_fractional_seconds(self):
        assert parse("PT1.5S").to_seconds() == pytest.approx(1.5)

    def test_weeks(self):
        assert to_seconds(construct(weeks=1)) == 604800

    def test_float_conversion(self):
        assert float(parse("PT2M")) == 120.0

    @pytest.mark.parametrize("text", ["P1Y", "P1M", "P1Y1D", "P0.5M"])
    def test_years_or_months_out_of_range(self, text):
        with pytest.raises(OutOfRangeError):
            to_seconds(parse(text))

    def test_negative_duration(self):
        assert to_seconds(construct(hours=-1)) == -3600


# ── Copy and equality ─────────────────────────────────────────────────────────

class TestCopyEquality:

    def test_copy_is_equal_and_independent(self):
        d = construct(seconds=90)
        c = copy(d)
        c.normalize()
        assert c is not d
        assert d == construct(seconds=90)
        assert c == construct(minutes=1, seconds=30)

    def test_stdlib_copy(self):
        d = construct(weeks=2)
        assert copy_module.copy(d) == d
        assert copy_module.deepcopy(d) == d

    def test_different_forms_are_not_equal(self):
        assert construct(weeks=0) != construct()

    def test_not_equal_to_other_types(self):
        assert construct(seconds=1) != 1
        assert construct(seconds=1) != "PT1S"

    def test_equality_is_by_fields_not_normal_form(self):
        assert construct(seconds=60) != construct(minutes=1)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(construct(days=1))

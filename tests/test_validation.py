"""
Tests for the validation pipeline.

Covers the per-field parsers, the minimum-age rule, the variant decision
and the result wrapper.
"""

from datetime import date

import pytest

from cellarbook.constants import Messages, WineType
from cellarbook.error_handling import (
    CellarError,
    InvalidWineType,
    InvalidYearFormat,
    OtherValidationError,
    WineTooYoung,
    WineValidationError,
)
from cellarbook.schema import PremiumVariant, RawWineFields, StandardVariant
from cellarbook.validation import (
    BuildResult,
    build_wine,
    is_old_enough,
    parse_rating,
    parse_wine_type,
    parse_year,
    validate_and_build,
)


class TestParseWineType:
    """Type text must name a WineType, any case."""

    @pytest.mark.parametrize("text", ["red", "Red", "RED", "rEd"])
    def test_case_insensitive(self, text):
        assert parse_wine_type(text) is WineType.RED

    @pytest.mark.parametrize("text,expected", [
        ("white", WineType.WHITE),
        ("Rose", WineType.ROSE),
        ("SPARKLING", WineType.SPARKLING),
    ])
    def test_all_types(self, text, expected):
        assert parse_wine_type(text) is expected

    @pytest.mark.parametrize("text", ["rosado", "", "orange", "red wine", " red"])
    def test_unknown_text_rejected(self, text):
        """Anything but an exact name is rejected."""
        with pytest.raises(InvalidWineType) as exc_info:
            parse_wine_type(text)
        assert exc_info.value.field == "type"
        assert exc_info.value.value == text

    def test_error_lists_choices(self):
        with pytest.raises(InvalidWineType) as exc_info:
            parse_wine_type("rosado")
        assert "RED, WHITE, ROSE, SPARKLING" in str(exc_info.value)


class TestParseYear:
    """Year must be an integer and old enough."""

    @pytest.mark.parametrize("text", ["abc", "", "20.15", "2015a", "two thousand"])
    def test_non_numeric_rejected(self, text, today):
        with pytest.raises(InvalidYearFormat) as exc_info:
            parse_year(text, today)
        assert exc_info.value.field == "year"
        assert exc_info.value.message == Messages.INVALID_YEAR_FORMAT

    def test_current_year_too_young(self, today):
        """A wine from this year is always under six months old."""
        with pytest.raises(WineTooYoung) as exc_info:
            parse_year(str(today.year), today)
        assert exc_info.value.field == "year"
        assert exc_info.value.year == today.year
        assert "6 months" in exc_info.value.message

    def test_future_year_too_young(self, today):
        with pytest.raises(WineTooYoung):
            parse_year(str(today.year + 2), today)

    def test_five_years_ago_accepted(self, today):
        assert parse_year(str(today.year - 5), today) == today.year - 5

    def test_too_young_distinct_from_format_error(self, today):
        """Both are validation errors but of different kinds."""
        assert not issubclass(WineTooYoung, InvalidYearFormat)
        assert not issubclass(InvalidYearFormat, WineTooYoung)
        assert issubclass(WineTooYoung, WineValidationError)
        assert issubclass(InvalidYearFormat, WineValidationError)

    def test_signed_year_parses(self, today):
        assert parse_year("+2010", today) == 2010

    def test_very_old_year_accepted(self, today):
        """Years before the calendar minimum are old enough."""
        assert parse_year("-500", today) == -500
        assert parse_year("0", today) == 0

    def test_huge_year_too_young(self, today):
        with pytest.raises(WineTooYoung):
            parse_year("123456", today)

    def test_overlong_digit_string_is_format_error(self, today):
        """Digit strings too long for int conversion are rejected, not crashed on."""
        with pytest.raises(InvalidYearFormat) as exc_info:
            parse_year("9" * 5000, today)
        assert exc_info.value.field == "year"

    def test_overlong_year_recoverable_through_result(self, raw_fields, today):
        raw_fields['year'] = "9" * 5000
        result = validate_and_build(raw_fields, today=today)
        assert not result.ok
        assert isinstance(result.error, InvalidYearFormat)


class TestMinimumAgeBoundary:
    """July 1 of the year must be strictly before today minus six months."""

    def test_exact_boundary_rejected(self):
        """Cutoff equal to July 1 is not strictly before."""
        assert not is_old_enough(2024, date(2025, 1, 1))

    def test_day_after_boundary_accepted(self):
        assert is_old_enough(2024, date(2025, 1, 2))

    def test_last_year_accepted_in_spring(self, today):
        """Mid-March: last July is more than six months back."""
        assert is_old_enough(today.year - 1, today)

    def test_same_year_rejected_on_new_years_eve(self):
        """Dec 31: July 1 of the same year is only six months back."""
        assert not is_old_enough(2024, date(2024, 12, 31))

    def test_month_end_clamped(self):
        """Aug 31 minus six months is Feb 28, well after the previous July."""
        assert is_old_enough(2024, date(2025, 8, 31))
        assert not is_old_enough(2025, date(2025, 8, 31))


class TestParseRating:
    """Rating is optional and never raises."""

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent(self, text):
        assert parse_rating(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("4.5", 4.5),
        ("9", 9.0),
        ("-3", -3.0),
        ("150", 150.0),
        ("1e2", 100.0),
    ])
    def test_numbers_parse_without_bounds(self, text, expected):
        assert parse_rating(text) == expected

    def test_unparseable_dropped_with_warning(self):
        warnings = []
        assert parse_rating("excellent", warnings) is None
        assert warnings == [Messages.INVALID_RATING]

    def test_whitespace_only_dropped(self):
        warnings = []
        assert parse_rating("   ", warnings) is None
        assert warnings == [Messages.INVALID_RATING]


class TestBuildWine:
    """Full record construction and the variant rule."""

    def test_standard_when_no_rating_no_comments(self, raw_fields, today):
        wine = build_wine(raw_fields, today=today)
        assert isinstance(wine.variant, StandardVariant)
        assert wine.rating is None
        assert wine.comments is None
        assert not wine.is_premium

    def test_premium_when_rated(self, raw_fields, today):
        raw_fields['rating'] = '4.5'
        wine = build_wine(raw_fields, today=today)
        assert isinstance(wine.variant, PremiumVariant)
        assert wine.rating == 4.5
        assert wine.vintage_label == "Special Vintage"

    def test_premium_when_commented(self, raw_fields, today):
        raw_fields['comments'] = 'lovely'
        wine = build_wine(raw_fields, today=today)
        assert wine.is_premium
        assert wine.rating is None
        assert wine.comments == 'lovely'

    def test_bad_rating_with_no_comments_is_standard(self, raw_fields, today):
        """A dropped rating does not count towards premium."""
        raw_fields['rating'] = 'great'
        wine = build_wine(raw_fields, today=today)
        assert not wine.is_premium
        assert wine.rating is None

    def test_custom_vintage_label(self, raw_fields, today):
        raw_fields['rating'] = '8'
        wine = build_wine(raw_fields, today=today, vintage_label="Grand Cru")
        assert wine.vintage_label == "Grand Cru"

    def test_fields_copied(self, raw_fields, today):
        wine = build_wine(raw_fields, today=today)
        assert wine.name == 'Rioja Reserva'
        assert wine.type is WineType.RED
        assert wine.year == 2015
        assert wine.country == 'Spain'

    def test_empty_name_and_country_accepted(self, raw_fields, today):
        """Mandatory text fields have no emptiness check."""
        raw_fields['name'] = ''
        raw_fields['country'] = ''
        wine = build_wine(raw_fields, today=today)
        assert wine.name == ''
        assert wine.country == ''

    def test_accepts_raw_model(self, today):
        raw = RawWineFields(name='Chablis', type='white', year='2019', country='France')
        wine = build_wine(raw, today=today)
        assert wine.type is WineType.WHITE

    def test_numeric_year_coerced(self, raw_fields, today):
        raw_fields['year'] = 2015
        assert build_wine(raw_fields, today=today).year == 2015

    def test_missing_mandatory_field(self, raw_fields, today):
        del raw_fields['country']
        with pytest.raises(OtherValidationError) as exc_info:
            build_wine(raw_fields, today=today)
        assert exc_info.value.field == 'country'
        assert 'mandatory' in exc_info.value.message

    def test_type_checked_before_year(self, raw_fields, today):
        raw_fields['type'] = 'rosado'
        raw_fields['year'] = 'abc'
        with pytest.raises(InvalidWineType):
            build_wine(raw_fields, today=today)


class TestValidateAndBuild:
    """Result wrapper around build_wine."""

    @pytest.mark.parametrize("text", ["red", "Red", "RED"])
    def test_type_variants_succeed(self, raw_fields, today, text):
        raw_fields['type'] = text
        result = validate_and_build(raw_fields, today=today)
        assert result.ok
        assert result.error is None
        assert result.record.type is WineType.RED

    def test_invalid_type(self, raw_fields, today):
        raw_fields['type'] = 'rosado'
        result = validate_and_build(raw_fields, today=today)
        assert not result.ok
        assert result.record is None
        assert isinstance(result.error, InvalidWineType)

    def test_invalid_year_format(self, raw_fields, today):
        raw_fields['year'] = 'abc'
        result = validate_and_build(raw_fields, today=today)
        assert isinstance(result.error, InvalidYearFormat)
        assert result.error.field == 'year'

    def test_wine_too_young(self, raw_fields, today):
        raw_fields['year'] = str(today.year)
        result = validate_and_build(raw_fields, today=today)
        assert isinstance(result.error, WineTooYoung)

    def test_five_years_ago_succeeds(self, raw_fields, today):
        raw_fields['year'] = str(today.year - 5)
        assert validate_and_build(raw_fields, today=today).ok

    def test_missing_field_is_other(self, raw_fields, today):
        del raw_fields['name']
        result = validate_and_build(raw_fields, today=today)
        assert isinstance(result.error, OtherValidationError)
        assert isinstance(result.error, CellarError)

    def test_bad_rating_is_warning_not_error(self, raw_fields, today):
        raw_fields['rating'] = 'n/a'
        result = validate_and_build(raw_fields, today=today)
        assert result.ok
        assert result.record.rating is None
        assert result.warnings == [Messages.INVALID_RATING]

    def test_no_warnings_on_clean_input(self, raw_fields, today):
        raw_fields['rating'] = '7'
        result = validate_and_build(raw_fields, today=today)
        assert result.warnings == []

    def test_result_type(self, raw_fields, today):
        assert isinstance(validate_and_build(raw_fields, today=today), BuildResult)

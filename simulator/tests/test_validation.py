from __future__ import annotations

from math import isclose

import pytest

from simulator.core.validation import (
    FormValidationError,
    localize_errors,
    parse_form,
)


def form(**overrides) -> dict:
    raw = {
        "initial_investment": "100",
        "monthly_contribution": "1",
        "annual_rate_percent": "5",
        "periods": "10",
    }
    raw.update(overrides)
    return raw


def error_codes(raw: dict) -> dict:
    with pytest.raises(FormValidationError) as excinfo:
        parse_form(raw)
    return {error.field: error.code for error in excinfo.value.errors}


def test_form_is_converted_to_engine_units():
    params = parse_form(form(annual_rate_percent="3.5"))

    assert params.initial_investment == 1_000_000.0
    assert params.periodic_contribution == 10_000.0
    assert isclose(params.annual_rate, 0.035)
    assert params.periods == 10


def test_amount_unit_is_configurable():
    params = parse_form(form(initial_investment="2.5", monthly_contribution="0"), amount_unit=1.0)

    assert params.initial_investment == 2.5
    assert params.periodic_contribution == 0.0


def test_initial_investment_defaults_to_zero():
    raw = form()
    del raw["initial_investment"]

    assert parse_form(raw).initial_investment == 0.0


def test_json_numbers_are_accepted():
    params = parse_form(
        {"initial_investment": 0, "monthly_contribution": 1.5, "annual_rate_percent": 4.2, "periods": 20}
    )

    assert params.periodic_contribution == 15_000.0
    assert params.periods == 20


@pytest.mark.parametrize("value", ["", "   ", "abc", "12abc", "nan", "Infinity", None, True, [1]])
def test_amount_not_a_number(value):
    assert error_codes(form(monthly_contribution=value)) == {"monthly_contribution": "not_a_number"}


def test_negative_amount_is_out_of_range():
    assert error_codes(form(initial_investment="-1")) == {"initial_investment": "out_of_range"}


@pytest.mark.parametrize(
    "value, code",
    [
        ("100.1", "out_of_range"),
        ("-0.5", "out_of_range"),
        ("5.25", "wrong_precision"),
        ("0.05", "wrong_precision"),
        ("x", "not_a_number"),
    ],
)
def test_rate_rules(value, code):
    assert error_codes(form(annual_rate_percent=value)) == {"annual_rate_percent": code}


@pytest.mark.parametrize("value", ["0", "100", "7.5", "7.0"])
def test_rate_accepts_bounds_and_one_decimal(value):
    assert parse_form(form(annual_rate_percent=value)).annual_rate == float(value) / 100


@pytest.mark.parametrize(
    "value, code",
    [
        ("", "not_a_number"),
        ("0", "out_of_range"),
        ("101", "out_of_range"),
        ("2.5", "wrong_precision"),
        ("ten", "not_a_number"),
    ],
)
def test_periods_rules(value, code):
    assert error_codes(form(periods=value)) == {"periods": code}


@pytest.mark.parametrize("value, expected", [("1", 1), ("100", 100), (" 30 ", 30), ("12.0", 12)])
def test_periods_accepts_whole_numbers_in_range(value, expected):
    assert parse_form(form(periods=value)).periods == expected


def test_every_failing_field_is_reported():
    codes = error_codes(
        form(initial_investment="-5", monthly_contribution="", annual_rate_percent="1.23", periods="200")
    )

    assert codes == {
        "initial_investment": "out_of_range",
        "monthly_contribution": "not_a_number",
        "annual_rate_percent": "wrong_precision",
        "periods": "out_of_range",
    }


def test_missing_and_unknown_fields():
    raw = form(bonus="1")
    del raw["periods"]

    assert error_codes(raw) == {"periods": "missing", "bonus": "extra_forbidden"}


def test_localized_messages_ja():
    with pytest.raises(FormValidationError) as excinfo:
        parse_form(form(initial_investment="-1", annual_rate_percent="1.25", periods="1.5"))

    messages = {item["field"]: item["message"] for item in localize_errors(excinfo.value.errors, "ja")}
    assert messages == {
        "initial_investment": "0から100000000の範囲で入力してください",
        "annual_rate_percent": "小数点以下1桁まで入力可能です",
        "periods": "整数で入力してください",
    }


def test_localized_messages_en():
    with pytest.raises(FormValidationError) as excinfo:
        parse_form(form(monthly_contribution="abc", periods="101"))

    localized = localize_errors(excinfo.value.errors, "en")
    assert localized == [
        {"field": "monthly_contribution", "code": "not_a_number", "message": "Enter a number."},
        {"field": "periods", "code": "out_of_range", "message": "Enter a value between 1 and 100."},
    ]


def test_unknown_locale_falls_back_to_japanese():
    with pytest.raises(FormValidationError) as excinfo:
        parse_form(form(periods=""))

    [item] = localize_errors(excinfo.value.errors, "fr")
    assert item["message"] == "数値を入力してください"


@pytest.mark.parametrize("value", ["1_0", "1e290", "5.0E-1", "0x10", "1,000"])
def test_only_plain_decimals_are_numbers(value):
    assert error_codes(form(monthly_contribution=value)) == {"monthly_contribution": "not_a_number"}


def test_rate_in_exponent_notation_is_not_a_number():
    assert error_codes(form(annual_rate_percent="5.0E-1")) == {"annual_rate_percent": "not_a_number"}


@pytest.mark.parametrize("value", [".5", "+3", "7."])
def test_plain_decimal_variants_are_accepted(value):
    assert parse_form(form(monthly_contribution=value)).periodic_contribution == float(value) * 10_000


def test_amounts_have_an_upper_bound():
    assert error_codes(form(initial_investment="100000001")) == {"initial_investment": "out_of_range"}
    assert parse_form(form(initial_investment="100000000")).initial_investment == 1e12


def test_amount_overflowing_the_unit_is_reported_on_its_field():
    with pytest.raises(FormValidationError) as excinfo:
        parse_form(form(initial_investment="100"), amount_unit=1e307)

    assert localize_errors(excinfo.value.errors, "en") == [
        {
            "field": "initial_investment",
            "code": "out_of_range",
            "message": "Enter a value between 0 and 100000000.",
        }
    ]

"""Parse and range-check raw simulator form input."""

from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from simulator.schemas.simulation import MAX_PERIODS, InvestmentParams

# form amounts are entered in units of 10,000 yen
DEFAULT_AMOUNT_UNIT = 10_000.0
MAX_FORM_AMOUNT = 100_000_000

MIN_PERIODS = 1
MAX_RATE_PERCENT = 100
RATE_DECIMAL_PLACES = 1

SUPPORTED_LOCALES = ("ja", "en")

# plain decimals only: no exponent, no digit separators
PLAIN_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

# engine parameter -> form field it was built from
FORM_FIELDS = {
    "initial_investment": "initial_investment",
    "periodic_contribution": "monthly_contribution",
    "annual_rate": "annual_rate_percent",
    "periods": "periods",
}

MESSAGES: Dict[str, Dict[str, str]] = {
    "ja": {
        "not_a_number": "数値を入力してください",
        "out_of_range": "{min}から{max}の範囲で入力してください",
        "wrong_precision": "小数点以下{decimal_places}桁まで入力可能です",
        "whole_number": "整数で入力してください",
        "missing": "入力してください",
    },
    "en": {
        "not_a_number": "Enter a number.",
        "out_of_range": "Enter a value between {min} and {max}.",
        "wrong_precision": "Use at most {decimal_places} decimal place(s).",
        "whole_number": "Enter a whole number.",
        "missing": "This field is required.",
    },
}


@dataclass
class FieldError:
    field: str
    code: str
    message: str
    context: Dict[str, Any] = dataclass_field(default_factory=dict)


class FormValidationError(ValueError):
    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(f"{error.field}: {error.code}" for error in errors))
        self.errors = errors


def _to_decimal(value: Any) -> Decimal:
    """Read a raw field as a finite Decimal, keeping the digits the user typed."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise PydanticCustomError("not_a_number", "Input should be a number")

    text = value.strip() if isinstance(value, str) else str(value)
    if not text or (isinstance(value, str) and not PLAIN_DECIMAL.match(text)):
        raise PydanticCustomError("not_a_number", "Input should be a number")

    try:
        number = Decimal(text)
    except InvalidOperation:
        raise PydanticCustomError("not_a_number", "Input should be a number") from None

    if not number.is_finite():
        raise PydanticCustomError("not_a_number", "Input should be a number")
    return number


def _decimal_places(number: Decimal) -> int:
    exponent = number.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def _check_range(number: Decimal, minimum: Any, maximum: Any) -> None:
    if number < minimum or number > maximum:
        raise PydanticCustomError(
            "out_of_range",
            "Input should be between {min} and {max}",
            {"min": minimum, "max": maximum},
        )


class SimulationForm(BaseModel):
    """The four simulator fields as entered by the user."""

    model_config = ConfigDict(extra="forbid")

    initial_investment: float = 0.0
    monthly_contribution: float
    annual_rate_percent: float
    periods: int

    @field_validator("initial_investment", "monthly_contribution", mode="before")
    @classmethod
    def _parse_amount(cls, value: Any) -> float:
        number = _to_decimal(value)
        _check_range(number, 0, MAX_FORM_AMOUNT)
        return float(number)

    @field_validator("annual_rate_percent", mode="before")
    @classmethod
    def _parse_rate(cls, value: Any) -> float:
        number = _to_decimal(value)
        _check_range(number, 0, MAX_RATE_PERCENT)
        if _decimal_places(number) > RATE_DECIMAL_PLACES:
            raise PydanticCustomError(
                "wrong_precision",
                "Input should have at most {decimal_places} decimal places",
                {"decimal_places": RATE_DECIMAL_PLACES},
            )
        return float(number)

    @field_validator("periods", mode="before")
    @classmethod
    def _parse_periods(cls, value: Any) -> int:
        number = _to_decimal(value)
        if number != number.to_integral_value():
            raise PydanticCustomError(
                "wrong_precision",
                "Input should be a whole number",
                {"decimal_places": 0},
            )
        _check_range(number, MIN_PERIODS, MAX_PERIODS)
        return int(number)

    def to_params(self, amount_unit: float = DEFAULT_AMOUNT_UNIT) -> InvestmentParams:
        """Convert form units (10,000 yen, percent) into engine units."""
        return InvestmentParams(
            initial_investment=self.initial_investment * amount_unit,
            periodic_contribution=self.monthly_contribution * amount_unit,
            annual_rate=self.annual_rate_percent / 100,
            periods=self.periods,
        )


def parse_form(raw: Any, amount_unit: float = DEFAULT_AMOUNT_UNIT) -> InvestmentParams:
    """Validate every field, then build engine params; nothing is built on failure."""
    try:
        form = SimulationForm.model_validate(raw)
    except ValidationError as exc:
        raise FormValidationError(
            [
                FieldError(
                    field=".".join(str(part) for part in error["loc"]) or "form",
                    code=error["type"],
                    message=error["msg"],
                    context=dict(error.get("ctx") or {}),
                )
                for error in exc.errors()
            ]
        ) from exc

    try:
        return form.to_params(amount_unit)
    except ValidationError as exc:
        # a huge amount_unit can still push a bounded amount past float range
        raise FormValidationError(
            [
                FieldError(
                    field=FORM_FIELDS.get(str(error["loc"][0]), "form") if error["loc"] else "form",
                    code="out_of_range",
                    message=error["msg"],
                    context={"min": 0, "max": MAX_FORM_AMOUNT},
                )
                for error in exc.errors()
            ]
        ) from exc


def _message_key(error: FieldError) -> str:
    if error.code == "wrong_precision" and error.context.get("decimal_places") == 0:
        return "whole_number"
    return error.code


def localize_errors(errors: List[FieldError], locale: str) -> List[Dict[str, str]]:
    """Render field errors in the requested locale, falling back to pydantic's text."""
    catalog: Mapping[str, str] = MESSAGES.get(locale, MESSAGES[SUPPORTED_LOCALES[0]])
    localized: List[Dict[str, str]] = []
    for error in errors:
        template = catalog.get(_message_key(error))
        message = template.format(**error.context) if template else error.message
        localized.append({"field": error.field, "code": error.code, "message": message})
    return localized


__all__ = [
    "DEFAULT_AMOUNT_UNIT",
    "MAX_FORM_AMOUNT",
    "FieldError",
    "FormValidationError",
    "MESSAGES",
    "SUPPORTED_LOCALES",
    "SimulationForm",
    "localize_errors",
    "parse_form",
]

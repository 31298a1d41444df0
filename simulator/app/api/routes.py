"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from simulator.core.ping import get_ping
from simulator.core.presentation import summarize, to_series
from simulator.core.projection import project
from simulator.core.validation import (
    SUPPORTED_LOCALES,
    FormValidationError,
    localize_errors,
    parse_form,
)
from simulator.schemas.simulation import ProjectionRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _request_locale() -> str:
    """?lang= wins, then Accept-Language, then the configured default."""
    requested = request.args.get("lang")
    if requested in SUPPORTED_LOCALES:
        return requested
    return request.accept_languages.best_match(
        SUPPORTED_LOCALES, default=current_app.config["DEFAULT_LOCALE"]
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Malformed or missing JSON bodies."""
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FormValidationError)
def _handle_form_error(exc: FormValidationError):
    """Field-level, localized messages for rejected form input."""
    locale = _request_locale()
    logger.warning("Rejected simulation form: %s", exc)
    return (
        jsonify({"errors": localize_errors(exc.errors, locale)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping(current_app.config).model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Run the engine on numeric parameters held to the form's limits."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = ProjectionRequest.model_validate(raw_payload)
    result = project(params)
    logger.info("Projection over %d periods, final value %.2f", params.periods, result.final_value)
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/simulation")
def simulation() -> Any:
    """Validate raw form input, project it and shape it for the dashboard."""
    raw_payload = request.get_json(force=True, silent=False)
    params = parse_form(raw_payload, amount_unit=current_app.config["AMOUNT_UNIT"])
    result = project(params)
    logger.info("Simulation over %d periods, final value %.2f", params.periods, result.final_value)
    return jsonify(
        {
            "params": params.model_dump(mode="json"),
            "result": result.model_dump(mode="json"),
            "summary": summarize(result).model_dump(mode="json"),
            "chart": to_series(result).model_dump(mode="json"),
        }
    )

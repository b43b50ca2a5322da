"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from issuance.core.errors import ArithmeticOverflow, InvalidTimeOrdering, Unauthorized
from issuance.core.projection import cumulative_issuance, project_yearly_issuance
from issuance.core.schedule import RATE_DENOMINATOR
from issuance.schemas.issuance import (
    AccrualQuery,
    AccrualResponse,
    BalanceResponse,
    ErrorResponse,
    IssueRequest,
    IssueResponse,
    PingResponse,
    ProjectionQuery,
    ProjectionResponse,
    RoleChangeRequest,
    RoleChangeResponse,
    ScheduleResponse,
    StateResponse,
    YearRateResponse,
)

EXTENSION_KEY = "issuance"

api_bp = Blueprint("api", __name__)


def _services():
    return current_app.extensions[EXTENSION_KEY]


def _error(exc: Exception, status: HTTPStatus):
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return jsonify(body.model_dump()), status


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidTimeOrdering)
def _handle_time_ordering(exc: InvalidTimeOrdering):
    return _error(exc, HTTPStatus.CONFLICT)


@api_bp.errorhandler(Unauthorized)
def _handle_unauthorized(exc: Unauthorized):
    return _error(exc, HTTPStatus.FORBIDDEN)


@api_bp.errorhandler(ArithmeticOverflow)
def _handle_overflow(exc: ArithmeticOverflow):
    return _error(exc, HTTPStatus.UNPROCESSABLE_ENTITY)


@api_bp.errorhandler(ValueError)
def _handle_value_error(exc: ValueError):
    return _error(exc, HTTPStatus.BAD_REQUEST)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/state")
def state() -> Any:
    services = _services()
    controller = services.controller
    now = max(services.clock(), controller.origin_time)
    response = StateResponse(
        originTime=controller.origin_time,
        lastIssuanceTime=controller.last_issuance_time,
        totalSupply=services.ledger.total_supply(),
        currentRate=controller.current_rate(now),
    )
    return jsonify(response.model_dump())


@api_bp.get("/schedule")
def schedule() -> Any:
    table = _services().controller.schedule
    response = ScheduleResponse(
        rates=list(table.rates),
        terminalRate=table.terminal_rate,
        yearSeconds=table.year_seconds,
        rateDenominator=RATE_DENOMINATOR,
    )
    return jsonify(response.model_dump())


@api_bp.get("/schedule/<int:year_index>")
def schedule_year(year_index: int) -> Any:
    table = _services().controller.schedule
    response = YearRateResponse(yearIndex=year_index, rate=table.rate_for_year(year_index))
    return jsonify(response.model_dump())


@api_bp.get("/accrual")
def accrual() -> Any:
    """Read-only preview of what ``issue`` would mint at ``now``."""
    services = _services()
    query = AccrualQuery.model_validate(request.args.to_dict())
    now = query.now if query.now is not None else services.clock()
    amount = services.controller.preview_accrual(now)
    return jsonify(AccrualResponse(now=now, amount=amount).model_dump())


@api_bp.post("/issue")
def issue() -> Any:
    services = _services()
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = IssueRequest.model_validate(raw_payload)
    now = payload.now if payload.now is not None else services.clock()

    amount = services.controller.issue(now, payload.beneficiary, payload.caller)
    response = IssueResponse(
        now=now,
        amount=amount,
        lastIssuanceTime=services.controller.last_issuance_time,
        totalSupply=services.ledger.total_supply(),
    )
    return jsonify(response.model_dump())


@api_bp.get("/projection")
def projection() -> Any:
    services = _services()
    query = ProjectionQuery.model_validate(request.args.to_dict())
    rows = project_yearly_issuance(
        base_amount=services.config.initialSupply,
        schedule=services.controller.schedule,
        years=query.years,
    )
    response = ProjectionResponse(rows=rows, cumulative=cumulative_issuance(rows))
    return jsonify(response.model_dump())


@api_bp.post("/roles/grant")
def grant_role() -> Any:
    payload = RoleChangeRequest.model_validate(request.get_json(force=True, silent=False))
    _services().roles.grant_role(payload.role, payload.account, payload.caller)
    return jsonify(RoleChangeResponse(role=payload.role, account=payload.account, granted=True).model_dump())


@api_bp.post("/roles/revoke")
def revoke_role() -> Any:
    payload = RoleChangeRequest.model_validate(request.get_json(force=True, silent=False))
    _services().roles.revoke_role(payload.role, payload.account, payload.caller)
    return jsonify(RoleChangeResponse(role=payload.role, account=payload.account, granted=False).model_dump())


@api_bp.get("/balances/<account>")
def balance(account: str) -> Any:
    ledger = _services().ledger
    return jsonify(BalanceResponse(account=account, balance=ledger.balance_of(account)).model_dump())

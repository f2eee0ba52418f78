"""JSON API over the bid evaluator for the auction room front end."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cricauction.api.schemas import (
    BidValidationRequest,
    CurrencyFormatRequest,
    CurrencyFormatResponse,
    EvaluateRequest,
    EvaluateTeamsRequest,
    EvaluateTeamsResponse,
    EvaluationResponse,
    ValidationResponse,
    WalletSummaryResponse,
)
from cricauction.config_loader import resolve_settings
from cricauction.evaluator import TeamBidView, evaluate_team, validate_bid
from cricauction.formatting import format_currency, format_currency_locale
from cricauction.models import AuctionSettings


logger = logging.getLogger(__name__)


def _view_to_response(view: TeamBidView, currency: str) -> EvaluationResponse:
    return EvaluationResponse(
        team_id=view.team_id,
        state=view.state,
        can_bid=view.can_bid,
        is_highest_bidder=view.is_highest_bidder,
        minimum_bid=view.minimum_bid,
        projected_wallet=view.projected_wallet,
        wallet=WalletSummaryResponse(**asdict(view.wallet)),
        minimum_bid_display=format_currency(view.minimum_bid, currency),
        projected_wallet_display=format_currency(view.projected_wallet, currency),
    )


def create_app(settings: Optional[AuctionSettings] = None) -> FastAPI:
    app = FastAPI(title="cricauction evaluator")
    app.state.settings = settings or resolve_settings()

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Raw inputs are dropped; non-finite numbers are not valid JSON.
        errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})

    def effective_settings(override: Optional[AuctionSettings]) -> AuctionSettings:
        return override or app.state.settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/settings", response_model=AuctionSettings)
    async def get_settings() -> AuctionSettings:
        return app.state.settings

    @app.post("/evaluate", response_model=EvaluationResponse)
    async def evaluate(payload: EvaluateRequest) -> EvaluationResponse:
        view = evaluate_team(
            payload.team,
            payload.highest_bid,
            payload.current_player,
            effective_settings(payload.settings),
        )
        return _view_to_response(view, payload.currency)

    @app.post("/evaluate/teams", response_model=EvaluateTeamsResponse)
    async def evaluate_teams(payload: EvaluateTeamsRequest) -> EvaluateTeamsResponse:
        settings_in_use = effective_settings(payload.settings)
        team_ids = [team.id for team in payload.teams]
        if len(set(team_ids)) != len(team_ids):
            raise HTTPException(status_code=400, detail="Duplicate team ids in request")
        evaluations = [
            _view_to_response(
                evaluate_team(team, payload.highest_bid, payload.current_player, settings_in_use),
                payload.currency,
            )
            for team in payload.teams
        ]
        return EvaluateTeamsResponse(
            min_bid_increment=settings_in_use.min_bid_increment,
            evaluations=evaluations,
        )

    @app.post("/bids/validate", response_model=ValidationResponse)
    async def validate(payload: BidValidationRequest) -> ValidationResponse:
        result = validate_bid(payload.amount, payload.min_bid, payload.wallet_balance)
        return ValidationResponse.model_validate(result.to_dict())

    @app.post("/format/currency", response_model=CurrencyFormatResponse)
    async def format_amount(payload: CurrencyFormatRequest) -> CurrencyFormatResponse:
        if payload.locale is None:
            return CurrencyFormatResponse(formatted=format_currency(payload.amount, payload.currency))
        try:
            formatted = format_currency_locale(payload.amount, payload.locale)
        except KeyError as exc:
            logger.warning("Currency format requested for unknown locale %s", payload.locale)
            raise HTTPException(status_code=400, detail=f"Unsupported locale {payload.locale!r}") from exc
        return CurrencyFormatResponse(formatted=formatted)

    return app

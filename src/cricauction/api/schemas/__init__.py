"""Pydantic models for API I/O."""

from .evaluation import (
    EvaluateRequest,
    EvaluateTeamsRequest,
    EvaluateTeamsResponse,
    EvaluationResponse,
    WalletSummaryResponse,
)
from .validation import (
    BidValidationRequest,
    CurrencyFormatRequest,
    CurrencyFormatResponse,
    ValidationResponse,
)

__all__ = [
    "BidValidationRequest",
    "CurrencyFormatRequest",
    "CurrencyFormatResponse",
    "EvaluateRequest",
    "EvaluateTeamsRequest",
    "EvaluateTeamsResponse",
    "EvaluationResponse",
    "ValidationResponse",
    "WalletSummaryResponse",
]

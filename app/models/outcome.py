"""Resolved result of one analysis attempt."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from app.models.analysis import CoinAnalysis


class Found(BaseModel):
    """The service acknowledged and analysis data exists for the pair."""

    kind: Literal["found"] = "found"
    analysis: CoinAnalysis

    model_config = {"frozen": True}


class NotFound(BaseModel):
    """The service acknowledged but there is no analysis for the pair."""

    kind: Literal["not_found"] = "not_found"
    symbol: str

    model_config = {"frozen": True}


class TransportFailure(BaseModel):
    """The webhook call failed; reason is for logs and messaging only."""

    kind: Literal["transport_failure"] = "transport_failure"
    reason: str

    model_config = {"frozen": True}


AnalysisOutcome = Annotated[
    Union[Found, NotFound, TransportFailure],
    Field(discriminator="kind"),
]

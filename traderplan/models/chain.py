"""ChainResult data model."""

from pydantic import BaseModel, Field

from traderplan.models.trade import TradeRecord


class ChainResult(BaseModel):
    """Output of a history replay: annotated trades and the resulting balance."""

    trades: list[TradeRecord] = Field(default_factory=list, description="Annotated trades, oldest first")
    final_balance: float = Field(..., description="Balance after the last trade")

    model_config = {"frozen": True}

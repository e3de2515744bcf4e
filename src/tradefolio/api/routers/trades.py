"""Trade ledger API: record, list and delete trades."""

from fastapi import APIRouter, Depends

from tradefolio.api.deps import get_ledger_service
from tradefolio.api.schemas import TradeCreateRequest, TradeResponse, DeleteTradeResponse
from tradefolio.services import LedgerService, TradeCreate

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.post("", response_model=TradeResponse, status_code=201)
def create_trade(
    data: TradeCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Record a BUY or SELL trade."""
    trade = ledger.record_trade(
        TradeCreate(
            symbol=data.symbol,
            quantity=data.quantity,
            price=data.price,
            trade_type=data.trade_type,
            executed_at=data.executed_at,
        )
    )
    return TradeResponse.from_domain(trade)


@router.get("", response_model=list[TradeResponse])
def list_trades(ledger: LedgerService = Depends(get_ledger_service)):
    """List all trades, newest first."""
    return [TradeResponse.from_domain(t) for t in ledger.list_trades()]


@router.get("/{trade_id}", response_model=TradeResponse)
def get_trade(trade_id: str, ledger: LedgerService = Depends(get_ledger_service)):
    """Get a single trade."""
    return TradeResponse.from_domain(ledger.get_trade(trade_id))


@router.delete("/{trade_id}", response_model=DeleteTradeResponse)
def delete_trade(trade_id: str, ledger: LedgerService = Depends(get_ledger_service)):
    """Delete a trade (idempotent)."""
    ledger.delete_trade(trade_id)
    return DeleteTradeResponse(success=True)

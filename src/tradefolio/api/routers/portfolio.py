"""Portfolio API: positions aggregated from the ledger, valued at live prices."""

from fastapi import APIRouter, Depends

from tradefolio.api.deps import get_portfolio_service
from tradefolio.api.schemas import PortfolioResponse
from tradefolio.services import PortfolioService

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(portfolio: PortfolioService = Depends(get_portfolio_service)):
    """
    Return open positions with current prices.

    - positions: symbol, net_quantity, average_price, current_price, market_value
      (current_price and market_value are null when the price is unknown)
    - total_value: sum of the known market values
    """
    return PortfolioResponse.from_view(portfolio.get_portfolio())

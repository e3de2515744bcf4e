"""Trade repository protocol."""

from typing import Protocol, Optional

from tradefolio.domain.models import TradeRecord


class TradeRepository(Protocol):
    """Interface for trade ledger data access."""

    def insert(self, trade: TradeRecord) -> TradeRecord:
        """Persist a new trade."""
        ...

    def get_by_id(self, trade_id: str) -> Optional[TradeRecord]:
        """Retrieve trade by ID."""
        ...

    def list_all(self) -> list[TradeRecord]:
        """List all trades, newest first."""
        ...

    def delete(self, trade_id: str) -> bool:
        """Delete a trade (hard delete). Returns False if nothing was removed."""
        ...

class TradeError(Exception):
    """Base class for trade domain errors."""


class TradeNotFoundError(TradeError):
    def __init__(self, trade_id: int):
        self.trade_id = trade_id
        super().__init__(f"Trade {trade_id} not found")


class TradeIdMismatchError(TradeError):
    def __init__(self, path_id: int, body_id):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(
            f"Trade id in path ({path_id}) does not match id in body ({body_id})"
        )


class TradeUpdateConflictError(TradeError):
    """The UPDATE statement matched no row."""

    def __init__(self, trade_id: int):
        self.trade_id = trade_id
        super().__init__(f"Update of trade {trade_id} matched no rows")

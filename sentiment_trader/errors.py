"""Exception types shared across the pipeline."""


class SentimentTraderError(Exception):
    """Base class for pipeline errors."""


class ClassificationUnavailable(SentimentTraderError):
    """No sentiment provider could produce a usable result."""

    def __init__(self, message: str = "No sentiment provider available", *, attempts: list[str] | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts or []


class InvalidOracleResponse(SentimentTraderError):
    """The oracle answered, but the answer was malformed or out of range."""

    def __init__(self, message: str, *, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class ItemProcessingError(SentimentTraderError):
    """A single batch item failed; recorded on the item, never propagated."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"item {index}: {cause}")
        self.index = index
        self.cause = cause


class ExecutionError(SentimentTraderError):
    """Raised by an execution gateway when a trade, balance or transfer call fails."""


class IngestionError(SentimentTraderError):
    """The text source could not be queried (e.g. missing credentials)."""

"""Exception types raised while reading and aggregating forecast documents."""

from datetime import datetime


class ForecastError(Exception):
    """Base class for all yrweather errors."""


class MalformedInput(ForecastError):
    """Raised (or reported, in lenient mode) for an entry the merge cannot use."""

    def __init__(
        self,
        reason: str,
        index: int | None = None,
        from_: datetime | None = None,
    ):
        self.reason = reason
        self.index = index
        self.from_ = from_
        where = []
        if index is not None:
            where.append(f"entry {index}")
        if from_ is not None:
            where.append(f"from={from_.isoformat()}")
        prefix = f"{', '.join(where)}: " if where else ""
        super().__init__(f"{prefix}{reason}")


class NotAvailable(ForecastError):
    """Raised when a derived view has no data to be built from."""

    def __init__(self, view: str, reason: str = ""):
        self.view = view
        message = f"'{view}' is not available"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class YrClientError(ForecastError):
    """Raised when the forecast service returns an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

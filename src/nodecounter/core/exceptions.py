class NodeCounterError(Exception):
    """Base exception for the node counter."""

    pass


class FetchError(NodeCounterError):
    """Base exception for failures while fetching nodes from the GraphQL endpoint."""

    pass


class NetworkError(FetchError):
    """Raised when the endpoint cannot be reached (connection, DNS, timeout)."""

    pass


class HttpStatusError(FetchError):
    """Raised when the endpoint replies with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class JsonParseError(FetchError):
    """Raised when the response body is not valid JSON."""

    pass


class SchemaError(FetchError):
    """Raised when the response does not have the expected shape."""

    pass


class ReportWriteError(NodeCounterError):
    """Raised when the CSV report cannot be created or written."""

    pass


class ClockError(NodeCounterError):
    """Raised when a month start timestamp cannot be built."""

    pass

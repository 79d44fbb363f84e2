# errors.py


class TtfbGateError(Exception):
    """Base class for fatal errors that abort a run"""


class TransportError(TtfbGateError):
    """A sample request failed at the network/transport level"""

    def __init__(self, index: int, count: int, url: str, cause: Exception):
        self.index = index
        self.count = count
        self.url = url
        self.cause = cause
        super().__init__(f"Request {index}/{count} to {url} failed: {cause}")


class EmptySampleError(TtfbGateError, ValueError):
    """No valid (non-NaN) latency values to compute statistics from"""

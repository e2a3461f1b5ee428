"""
Proxy Error Taxonomy

Every failure path of the summary proxy ends in exactly one of these
exceptions. Each carries the HTTP status returned to the caller and the
public message placed in the `{"message": ...}` body. Diagnostic detail
(upstream error bodies, transport exceptions) is logged server-side and
never attached to the public message.

  - MissingParametersError: client input is incomplete (400)
  - ConfigurationError: server is missing a credential or provider (500)
  - UpstreamError: provider answered with a non-success status (passthrough)
  - InternalProxyError: transport or unexpected failure (500)
"""

from typing import Optional


class SummaryProxyError(Exception):
    """Base class for errors rendered as `{"message": ...}` responses."""

    status_code: int = 500
    default_message: str = "An internal error occurred."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


class MissingParametersError(SummaryProxyError):
    status_code = 400
    default_message = "Missing required parameters."


class ConfigurationError(SummaryProxyError):
    """The server cannot serve the request until it is reconfigured."""

    status_code = 500
    default_message = "Server not configured."


class UpstreamError(SummaryProxyError):
    """The upstream provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code=status_code)


class InternalProxyError(SummaryProxyError):
    status_code = 500
    default_message = "An internal error occurred."

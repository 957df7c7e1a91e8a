# =============================================================================
# Router Errors
# =============================================================================
# Dispatch-level failures. Handler failures are never raised from the router;
# they are encoded into the response error payload instead.
# =============================================================================

from typing import Any


class RouterError(Exception):
    """Base class for errors raised by the router itself."""


class UnrecognizedProcedure(RouterError):
    """No handler is registered for the requested procedure."""

    def __init__(self, procedure: str):
        self.procedure = procedure
        super().__init__(f"unrecognized procedure '{procedure}'")


class InvalidRequest(RouterError):
    """The invocation event could not be decoded into a Request."""


class HandlerFailed(RouterError):
    """Raised by Response.unwrap() when the routed handler reported an error."""

    def __init__(self, error: Any):
        self.error = error
        super().__init__(error if isinstance(error, str) else repr(error))

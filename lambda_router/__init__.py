# =============================================================================
# Lambda Router
# =============================================================================
# Multiplexes many named procedures behind one Lambda invoke entry point.
# Events look like {"procedure": "<name>", "body": <json>} and produce
# {"body": <json>} or, when the handler raised, {"error": <json>}.
# =============================================================================

from lambda_router.envelope import Request, Response
from lambda_router.errors import HandlerFailed, InvalidRequest, RouterError, UnrecognizedProcedure
from lambda_router.registry import Handler, HandlerFunc, Registry
from lambda_router.dispatch import (
    Option,
    Router,
    log_events,
    marshal_errors_with,
    on_marshal_error,
    with_registry,
)
from lambda_router.marshalers import marshal_client_error, marshal_error_json, marshal_error_message
from lambda_router.config import RouterConfig, configure_logging, load_config, options_from_env

__all__ = [
    "Request",
    "Response",
    "RouterError",
    "UnrecognizedProcedure",
    "InvalidRequest",
    "HandlerFailed",
    "Handler",
    "HandlerFunc",
    "Registry",
    "Option",
    "Router",
    "marshal_errors_with",
    "on_marshal_error",
    "with_registry",
    "log_events",
    "marshal_error_message",
    "marshal_error_json",
    "marshal_client_error",
    "RouterConfig",
    "load_config",
    "configure_logging",
    "options_from_env",
]

# =============================================================================
# Router - Procedure Dispatch
# =============================================================================
# Single entry point multiplexing many procedures behind one Lambda function.
# Handler exceptions never escape handle(): they are marshaled into the
# response error payload. Only an unrecognized procedure is raised.
# =============================================================================

import asyncio
import inspect
import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from lambda_router.envelope import Request, Response
from lambda_router.errors import UnrecognizedProcedure
from lambda_router.marshalers import Marshaler, error_message, marshal_error_message
from lambda_router.registry import Registry

logger = logging.getLogger(__name__)

# Type definitions
Option = Callable[["Router"], None]
MarshalErrorHook = Callable[[Exception, Exception], None]


class Router:
    """
    Routes requests to the handler registered for their procedure.

    Usage:
        router = Router(marshal_errors_with(marshal_error_json))
        router.route("Do", HandlerFunc(do))

        def lambda_handler(event, context):
            return router.lambda_handler(event, context)
    """

    def __init__(self, *options: Option):
        self.registry = Registry()
        self.marshal_error: Marshaler = marshal_error_message
        self.on_marshal_error: Optional[MarshalErrorHook] = None
        self.log_events = False
        for option in options:
            option(self)

    def route(self, procedure: str, handler: Any) -> None:
        """
        Register handler for procedure.

        If several handlers are registered to the same procedure, only the
        last one is called.
        """
        self.registry.register(procedure, handler)

    def handle(self, request: Request, context: Any = None) -> Response:
        """
        Dispatch request to its handler.

        Args:
            request: Decoded request envelope
            context: Invocation context, passed to the handler unchanged

        Returns:
            Response with either the handler's body or the encoded error

        Raises:
            UnrecognizedProcedure: no handler is registered for request.procedure
        """
        handler = self.registry.lookup(request.procedure)
        if handler is None:
            logger.warning(f"Unrecognized procedure: '{request.procedure}'")
            raise UnrecognizedProcedure(request.procedure)

        logger.info(f"Dispatching procedure={request.procedure}")

        try:
            body = _resolve(handler.handle(request.body, context))
        except Exception as e:
            logger.exception("Handler error for procedure '%s'", request.procedure)
            return Response.failure(self._marshal(e))

        return Response.success(body)

    def _marshal(self, err: Exception) -> Any:
        """Encode err, falling back to its message when the marshaler fails."""
        try:
            encoded = self.marshal_error(err)
            if encoded is None:
                raise ValueError("error marshaler returned None")
            return encoded
        except Exception as me:
            logger.exception("Failed to marshal %s", type(err).__name__)
            self._notify_marshal_error(err, me)
            return error_message(err)

    def _notify_marshal_error(self, err: Exception, marshal_err: Exception) -> None:
        if self.on_marshal_error is None:
            return
        try:
            self.on_marshal_error(err, marshal_err)
        except Exception:
            logger.exception("on_marshal_error hook failed")

    def lambda_handler(self, event: Union[Mapping[str, Any], str, bytes], context: Any = None) -> Dict[str, Any]:
        """
        Lambda entry point: decode the event, dispatch, encode the response.

        InvalidRequest and UnrecognizedProcedure propagate so the invocation
        itself fails.
        """
        if self.log_events:
            logger.info("RAW_EVENT=%s", _dump_event(event))
        request = Request.from_event(event)
        return self.handle(request, context).to_dict()

    def __call__(self, event: Union[Mapping[str, Any], str, bytes], context: Any = None) -> Dict[str, Any]:
        return self.lambda_handler(event, context)


async def _await(awaitable: Any) -> Any:
    return await awaitable


def _resolve(result: Any) -> Any:
    """Run an async handler's result to completion on a fresh event loop."""
    if not inspect.isawaitable(result):
        return result
    runner = _await(result)
    try:
        return asyncio.run(runner)
    finally:
        # no-op once awaited; asyncio.run refuses to start inside a running loop
        runner.close()
        if inspect.iscoroutine(result):
            result.close()


def _dump_event(event: Any) -> str:
    try:
        return json.dumps(event, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(event)


# =============================================================================
# OPTIONS
# =============================================================================

def marshal_errors_with(marshaler: Marshaler) -> Option:
    """
    Configure the Router to encode handler exceptions with marshaler.

    Without a custom marshaler only the exception message reaches the caller.
    If the marshaler raises (or returns None) the router sends str(err) of
    the original exception instead.
    """
    def option(router: Router) -> None:
        router.marshal_error = marshaler
    return option


def on_marshal_error(hook: MarshalErrorHook) -> Option:
    """Call hook(original_error, marshal_error) whenever the marshaler fails."""
    def option(router: Router) -> None:
        router.on_marshal_error = hook
    return option


def with_registry(registry: Registry) -> Option:
    """Dispatch against a pre-built registry instead of an empty one."""
    def option(router: Router) -> None:
        router.registry = registry
    return option


def log_events(enabled: bool = True) -> Option:
    """Log every raw invocation event in lambda_handler."""
    def option(router: Router) -> None:
        router.log_events = enabled
    return option

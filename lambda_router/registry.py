# =============================================================================
# Handler Registry
# =============================================================================
# Procedure name -> handler binding table, owned by a Router instance.
# Names are exact-match keys: case-sensitive, untrimmed, "" is legal.
# Registering a name twice replaces the first binding (last write wins).
# =============================================================================

import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


class Handler(Protocol):
    """Anything with a handle(body, context) method can serve a procedure."""

    def handle(self, body: Any, context: Any) -> Any:
        ...


class HandlerFunc:
    """
    Adapter allowing an ordinary function to be used as a Handler.

    Usage:
        registry.register("Do", HandlerFunc(lambda body, context: body))
    """

    def __init__(self, func: Callable[[Any, Any], Any]):
        self.func = func
        self.__doc__ = func.__doc__
        self.__name__ = getattr(func, "__name__", type(func).__name__)

    def handle(self, body: Any, context: Any) -> Any:
        return self.func(body, context)

    def __call__(self, body: Any, context: Any) -> Any:
        return self.func(body, context)

    def __repr__(self) -> str:
        return f"HandlerFunc({self.__name__})"


def as_handler(handler: Any) -> Handler:
    """Return handler unchanged if it implements handle(), else wrap a callable."""
    if isinstance(handler, type):
        raise TypeError(f"handler must be an instance, got class {handler.__name__}")
    if callable(getattr(handler, "handle", None)):
        return handler
    if callable(handler):
        return HandlerFunc(handler)
    raise TypeError(f"handler must be callable or implement handle(), got {type(handler).__name__}")


def _describe(handler: Handler) -> str:
    doc = getattr(handler, "__doc__", None)
    if doc:
        return doc.strip().split("\n")[0].strip()
    return ""


class Registry:
    """Binding table from procedure name to Handler."""

    def __init__(self):
        self._handlers: Dict[str, Handler] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, procedure: str, handler: Any, description: str = None) -> None:
        """Bind handler to procedure, replacing any previous binding."""
        handler = as_handler(handler)
        if procedure in self._handlers:
            logger.debug(f"Replacing handler for procedure '{procedure}'")
        self._handlers[procedure] = handler
        self._descriptions[procedure] = description or _describe(handler)

    def route(self, procedure: str, description: str = None):
        """
        Decorator to register a plain function.

        Usage:
            @registry.route("GetUser")
            def get_user(body, context):
                return {"id": body["id"]}
        """
        def decorator(func: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
            self.register(procedure, HandlerFunc(func), description)
            return func
        return decorator

    def unregister(self, procedure: str) -> None:
        self._handlers.pop(procedure, None)
        self._descriptions.pop(procedure, None)

    def lookup(self, procedure: str) -> Optional[Handler]:
        """Get the handler bound to procedure, or None."""
        return self._handlers.get(procedure)

    def procedures(self) -> List[str]:
        return list(self._handlers)

    def describe(self) -> Dict[str, str]:
        """Map each bound procedure to its one-line description."""
        return {name: self._descriptions.get(name, "") for name in sorted(self._handlers)}

    def __contains__(self, procedure: object) -> bool:
        return procedure in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

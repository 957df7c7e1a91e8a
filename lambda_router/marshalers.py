# =============================================================================
# Error Marshalers
# =============================================================================
# Strategies turning a handler exception into the response error payload.
# A marshaler signals failure by raising; the router then falls back to the
# original exception's message.
# =============================================================================

from typing import Any, Callable, Dict

from botocore.exceptions import ClientError

# Type definitions
Marshaler = Callable[[Exception], Any]


def error_message(err: Exception) -> str:
    """str(err), or a placeholder when the exception cannot render itself."""
    try:
        return str(err)
    except Exception:
        return f"<unprintable {type(err).__name__}>"


def marshal_error_message(err: Exception) -> str:
    """Default strategy: the exception's message. Never fails."""
    return error_message(err)


def marshal_error_json(err: Exception) -> Dict[str, Any]:
    """
    Encode the exception as a JSON object.

    Exceptions exposing a to_dict() method contribute extra fields, letting
    handlers stream structured error detail to the caller.
    """
    payload: Dict[str, Any] = {
        "type": type(err).__name__,
        "message": str(err),
    }
    to_dict = getattr(err, "to_dict", None)
    if callable(to_dict):
        payload.update(to_dict())
    return payload


def marshal_client_error(err: Exception) -> Dict[str, Any]:
    """
    Encode a botocore ClientError with its AWS error code and request metadata.

    Raises:
        TypeError: err is not a ClientError
    """
    if not isinstance(err, ClientError):
        raise TypeError(f"cannot marshal {type(err).__name__} as a ClientError")

    error = err.response.get("Error", {})
    meta = err.response.get("ResponseMetadata", {})
    return {
        "code": error.get("Code", "Unknown"),
        "message": error.get("Message", str(err)),
        "operation": err.operation_name,
        "requestId": meta.get("RequestId", ""),
        "httpStatusCode": meta.get("HTTPStatusCode"),
    }


MARSHALERS: Dict[str, Marshaler] = {
    "message": marshal_error_message,
    "json": marshal_error_json,
    "client_error": marshal_client_error,
}


def get_marshaler(name: str) -> Marshaler:
    """Look up a built-in marshaler by its configuration name."""
    try:
        return MARSHALERS[name]
    except KeyError:
        raise ValueError(f"Unknown error format '{name}'. Valid values: {sorted(MARSHALERS)}") from None

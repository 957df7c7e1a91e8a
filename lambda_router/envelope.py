# =============================================================================
# Envelope - Request / Response Containers
# =============================================================================
# Wire shape:
#   request  = {"procedure": "<name>", "body": <json>}
#   response = {"body": <json>}  on success
#            = {"error": <json>} on handler failure
# =============================================================================

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from lambda_router.errors import HandlerFailed, InvalidRequest


@dataclass(frozen=True)
class Request:
    """
    Routable invocation event.

    Attributes:
        procedure: Name of the handler which should process the request
        body: Opaque payload passed to the handler untouched
    """
    procedure: str
    body: Any = None

    @classmethod
    def from_event(cls, event: Union[Mapping[str, Any], str, bytes]) -> "Request":
        """
        Decode a Lambda invocation event into a Request.

        Accepts an already-decoded mapping (the usual Lambda case) or a raw
        JSON document. A missing procedure decodes to "" so that it surfaces
        as an unrecognized procedure at dispatch time.

        Raises:
            InvalidRequest: event is not a JSON object or procedure is not a string
        """
        if isinstance(event, (str, bytes, bytearray)):
            try:
                event = json.loads(event)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise InvalidRequest(f"event is not valid JSON: {e}") from e

        if not isinstance(event, Mapping):
            raise InvalidRequest(f"event must be a JSON object, got {type(event).__name__}")

        procedure = event.get("procedure", "")
        if procedure is None:
            procedure = ""
        if not isinstance(procedure, str):
            raise InvalidRequest(f"procedure must be a string, got {type(procedure).__name__}")

        return cls(procedure=procedure, body=event.get("body"))

    def to_dict(self) -> Dict[str, Any]:
        return {"procedure": self.procedure, "body": self.body}


@dataclass(frozen=True)
class Response:
    """
    Normalized result of a dispatch.

    Exactly one of body / error is meaningful: is_error tells which. A
    successful handler may legitimately return None as its body. Build with
    success() / failure().
    """
    body: Any = None
    error: Any = None
    is_error: bool = False

    def __post_init__(self):
        if self.is_error and self.body is not None:
            raise ValueError("failed Response cannot carry a body")
        if not self.is_error and self.error is not None:
            raise ValueError("successful Response cannot carry an error")

    @classmethod
    def success(cls, body: Any) -> "Response":
        return cls(body=body)

    @classmethod
    def failure(cls, error: Any) -> "Response":
        return cls(error=error, is_error=True)

    @property
    def ok(self) -> bool:
        return not self.is_error

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the Lambda runtime, omitting the unused field."""
        if self.is_error:
            return {"error": self.error}
        return {"body": self.body}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Response":
        """Read the output of a routed function back into a Response."""
        if "error" in data:
            return cls.failure(data["error"])
        return cls.success(data.get("body"))

    def unwrap(self) -> Any:
        """Return the success body, or raise HandlerFailed with the error payload."""
        if self.is_error:
            raise HandlerFailed(self.error)
        return self.body

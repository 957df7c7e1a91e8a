# =============================================================================
# Configuration
# =============================================================================
# Environment-driven router settings:
#   LOG_LEVEL            root logger level (default INFO)
#   ROUTER_ERROR_FORMAT  message | json | client_error (default message)
#   ROUTER_LOG_EVENTS    log each raw invocation event (default false)
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import List

from lambda_router.dispatch import Option, log_events, marshal_errors_with
from lambda_router.marshalers import get_marshaler


def _get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _get_env_bool(key: str, default: bool = False) -> bool:
    return _get_env(key, str(default)).lower() == "true"


@dataclass(frozen=True)
class RouterConfig:
    log_level: str = "INFO"
    error_format: str = "message"
    log_events: bool = False


def load_config() -> RouterConfig:
    """Read RouterConfig from the environment."""
    return RouterConfig(
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
        error_format=_get_env("ROUTER_ERROR_FORMAT", "message").lower(),
        log_events=_get_env_bool("ROUTER_LOG_EVENTS", False),
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set the root logger level, as the Lambda runtime installs its own handler."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


def options_from_env(config: RouterConfig = None) -> List[Option]:
    """
    Build router options from configuration.

    Raises:
        ValueError: ROUTER_ERROR_FORMAT names an unknown marshaler
    """
    if config is None:
        config = load_config()
    return [
        marshal_errors_with(get_marshaler(config.error_format)),
        log_events(config.log_events),
    ]

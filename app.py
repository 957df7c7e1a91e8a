# =============================================================================
# Lambda Function Entry Point
# =============================================================================
# Handler setting: app.lambda_handler
# Application procedures are registered on `router` at import time, before
# the first invocation. The utility procedures below are always available.
# =============================================================================

from datetime import datetime, timezone
from typing import Any, Dict

from lambda_router import Router, configure_logging, load_config, options_from_env

CONFIG = load_config()

# ---------- Logger ----------
logger = configure_logging(CONFIG.log_level)

router = Router(*options_from_env(CONFIG))


@router.registry.route("ping", description="Health check")
def handle_ping(body: Any, context: Any) -> Dict[str, Any]:
    """Health check."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "procedureCount": len(router.registry),
    }


@router.registry.route("list_procedures", description="List all registered procedures")
def handle_list_procedures(body: Any, context: Any) -> Dict[str, Any]:
    """List all registered procedures with descriptions."""
    procedures = router.registry.describe()
    return {"count": len(procedures), "procedures": procedures}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request_id = getattr(context, "aws_request_id", "")
    logger.debug(f"Invocation requestId={request_id}")
    return router.lambda_handler(event, context)

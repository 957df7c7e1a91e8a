#!/usr/bin/env python3
"""
Tests for the Lambda function entry point (app.lambda_handler).

Run with: pytest tests/test_app.py -v
"""
import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set required environment variables BEFORE imports
os.environ.setdefault("ROUTER_ERROR_FORMAT", "message")


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.aws_request_id = "req-abc"
    ctx.function_name = "lambda-router"
    return ctx


class TestLambdaHandler:
    """Tests for the deployed entry point."""

    def test_ping(self, context):
        from app import lambda_handler

        result = lambda_handler({"procedure": "ping"}, context)

        assert result["body"]["status"] == "ok"
        assert result["body"]["procedureCount"] >= 2
        assert "error" not in result

    def test_list_procedures(self, context):
        from app import lambda_handler

        result = lambda_handler({"procedure": "list_procedures", "body": {}}, context)

        procedures = result["body"]["procedures"]
        assert procedures["ping"] == "Health check"
        assert procedures["list_procedures"] == "List all registered procedures"
        assert result["body"]["count"] == len(procedures)

    def test_unknown_procedure_fails_invocation(self, context):
        from app import lambda_handler
        from lambda_router import UnrecognizedProcedure

        with pytest.raises(UnrecognizedProcedure, match="^unrecognized procedure 'missing'$"):
            lambda_handler({"procedure": "missing"}, context)

    def test_application_procedure(self, context):
        import app

        def fail(body, ctx):
            raise RuntimeError(f"cannot process {body['id']}")

        app.router.route("test_fail", fail)
        try:
            result = app.lambda_handler({"procedure": "test_fail", "body": {"id": 7}}, context)
        finally:
            app.router.registry.unregister("test_fail")

        assert result == {"error": "cannot process 7"}

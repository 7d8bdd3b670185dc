"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_command_context() context manager
- Context isolation and cleanup
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import bind_command_context


def _bound(key):
    return structlog.contextvars.get_contextvars().get(key)


@pytest.fixture(autouse=True)
def clean_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
class TestBindCommandContext:
    """Test suite for bind_command_context context manager."""

    def test_auto_generates_invocation_id(self):
        """Invocation ID is auto-generated if not provided."""
        with bind_command_context(command="list-groups") as invocation_id:
            assert _bound("invocation_id") == invocation_id
            uuid.UUID(invocation_id)

    def test_uses_provided_invocation_id(self):
        with bind_command_context(command="list-users", invocation_id="inv-1"):
            assert _bound("invocation_id") == "inv-1"

    def test_binds_command_and_extra_context(self):
        with bind_command_context(command="list-users", region="us-east-1"):
            assert _bound("command") == "list-users"
            assert _bound("region") == "us-east-1"

    def test_drops_none_values(self):
        with bind_command_context(command="list-users", region=None):
            assert "region" not in structlog.contextvars.get_contextvars()

    def test_context_removed_after_block(self):
        with bind_command_context(command="list-groups"):
            pass

        assert _bound("invocation_id") is None
        assert _bound("command") is None

    def test_context_removed_after_exception(self):
        with pytest.raises(RuntimeError):
            with bind_command_context(command="list-groups"):
                raise RuntimeError("boom")

        assert _bound("invocation_id") is None

    def test_unrelated_context_survives(self):
        structlog.contextvars.bind_contextvars(session="s-1")

        with bind_command_context(command="list-users"):
            pass

        assert _bound("session") == "s-1"

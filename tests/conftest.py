"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
    from ._upstream import RecordingUpstream
except ImportError:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401
    from _upstream import RecordingUpstream  # type: ignore

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()

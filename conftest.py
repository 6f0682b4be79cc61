from __future__ import annotations

# Lightweight pytest helpers for running asyncio tests without extra plugins,
# plus application fixtures shared by the HTTP tests.

import asyncio
import inspect
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from doctor_service.config import get_settings
from doctor_service.main import create_app


def _should_handle_asyncio(pyfuncitem: pytest.Function) -> bool:
    """Return ``True`` if the test should run inside an asyncio loop."""

    if not inspect.iscoroutinefunction(pyfuncitem.obj):
        return False
    return pyfuncitem.get_closest_marker("asyncio") is not None


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute ``@pytest.mark.asyncio`` tests on a fresh event loop.

    Returning ``None`` hands every other test back to pytest's default call.
    """

    if not _should_handle_asyncio(pyfuncitem):
        return None

    argnames = pyfuncitem._fixtureinfo.argnames
    kwargs = {name: pyfuncitem.funcargs[name] for name in argnames}
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(pyfuncitem.obj(**kwargs))
    finally:
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            asyncio.set_event_loop(None)
            loop.close()
    return True


def pytest_configure(config: pytest.Config) -> None:
    """Register the custom asyncio marker to silence warnings."""

    config.addinivalue_line("markers", "asyncio: mark test to run in an asyncio event loop")


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def body_ran() -> Iterator[list[str]]:
    """Collect markers from the test body; teardown fails if none arrived."""

    markers: list[str] = []
    yield markers
    assert markers, "test body was never executed"


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client

"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import asyncio
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from restservice.handlers import RequestHandlers
from restservice.network.app import create_app
from restservice.network.http_server import RestServer
from restservice.store.rwlock import ReadWriteLock
from restservice.store.store import KeyValueStore


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> KeyValueStore:
    """Create a fresh, empty KeyValueStore."""
    return KeyValueStore()


@pytest.fixture
def lock() -> ReadWriteLock:
    """Create a fresh ReadWriteLock."""
    return ReadWriteLock()


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def handlers(store: KeyValueStore) -> RequestHandlers:
    """Create RequestHandlers bound to the fresh store."""
    return RequestHandlers(store)


@pytest.fixture
def app(store: KeyValueStore) -> FastAPI:
    """Create the FastAPI application around the fresh store."""
    return create_app(store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """In-process client for the application (no sockets)."""
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# Server Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def server() -> AsyncGenerator[RestServer, None]:
    """
    Create and start a server instance for testing.

    This fixture:
    1. Creates a RestServer bound to a free port on 127.0.0.1
    2. Starts it in a background task
    3. Yields the server for testing
    4. Cleans up after the test
    """
    srv = RestServer(host='127.0.0.1', port=0)
    srv.bind()

    # Start server in background task
    server_task = asyncio.create_task(srv.start())

    # Wait for server to be ready
    for _ in range(100):
        if srv.is_running():
            break
        await asyncio.sleep(0.02)

    yield srv

    # Cleanup
    await asyncio.wait_for(srv.stop(), timeout=15)
    server_task.cancel()
    try:
        await server_task
    except asyncio.CancelledError:
        pass


@pytest_asyncio.fixture
async def http(server: RestServer) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client pointed at the running server."""
    async with httpx.AsyncClient(base_url=f"http://127.0.0.1:{server.port}", timeout=10) as client:
        yield client


@pytest.fixture
def client_factory(server: RestServer):
    """
    Factory fixture to create extra HTTP clients (one connection pool each).

    Usage:
        async def test_something(server, client_factory):
            async with client_factory() as client:
                response = await client.get("/list")
    """
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=f"http://127.0.0.1:{server.port}", timeout=10)
    return factory


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

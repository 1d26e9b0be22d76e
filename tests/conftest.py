"""Test fixtures for the Short Iron application."""

import os

# Must be set before the application settings are instantiated
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

import pytest
from typing import Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient

from short_iron.main import create_app
from short_iron.services.registry import URLRegistry


@pytest.fixture
def registry() -> URLRegistry:
    """Return an empty registry with the default generator."""
    return URLRegistry()


@pytest.fixture
def test_app(registry) -> FastAPI:
    """Create a FastAPI app sharing the registry fixture."""
    return create_app(registry=registry)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance that does not follow redirects."""
    with TestClient(test_app, follow_redirects=False) as test_client:
        yield test_client

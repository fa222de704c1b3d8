"""Shared test fixtures and configuration."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from chat_gateway.api import create_app
from chat_gateway.gateway import InferenceGateway


@pytest.fixture
def mock_model():
    """Chat model stand-in whose ainvoke returns a fixed reply."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Hello from the model"))
    return model


@pytest.fixture
def gateway(mock_model):
    return InferenceGateway(mock_model)


@pytest.fixture
def client(gateway):
    with TestClient(create_app(gateway=gateway)) as test_client:
        yield test_client


@pytest.fixture
def chat_body():
    return b'{"messages":[{"role":"user","content":"hi"}]}'

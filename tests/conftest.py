"""Pytest fixtures for the vote store and HTTP app.

Every test gets its own VoteStore so state never leaks between tests.
"""

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from comfort_vote.main import create_app
from comfort_vote.state import VoteStore


@pytest.fixture
def categories() -> List[str]:
    """Category labels used across the tests."""
    return ["Hot", "Mild", "Cold"]


@pytest.fixture
def store(categories: List[str]) -> VoteStore:
    """Fresh store with every category at zero."""
    return VoteStore(categories)


@pytest.fixture
def client(store: VoteStore) -> Generator[TestClient, None, None]:
    """HTTP client bound to an app that owns `store`."""
    with TestClient(create_app(store)) as c:
        yield c

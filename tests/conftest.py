"""Pytest configuration and shared fixtures for quote tests."""

from __future__ import annotations

import pytest

from cabinet_quotes.domain import CabinetItem, Quote, Space
from cabinet_quotes.infrastructure import InMemoryQuoteRepository


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or HTTP front ends"
    )


class SequentialIds:
    """Deterministic identifier source: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.count = 0

    def new_id(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"

    __call__ = new_id


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def two_space_quote() -> Quote:
    """Quote with two spaces holding one default-priced item each."""
    return Quote(
        id="quote-1",
        client_name="Ada Lovelace",
        email="ada@example.com",
        phone="555-0100",
        project_name="Kitchen",
        installation_address="12 Analytical Way",
        spaces=(
            Space(
                id="space-a",
                name="Space #1",
                items=(CabinetItem("item-a", 30, 30, 24, 299.99),),
            ),
            Space(
                id="space-b",
                name="Space #2",
                items=(CabinetItem("item-b", 30, 30, 24, 299.99),),
            ),
        ),
    )


@pytest.fixture
def repository(two_space_quote: Quote) -> InMemoryQuoteRepository:
    """In-memory store holding two_space_quote under its id."""
    return InMemoryQuoteRepository(
        {"quote-1": two_space_quote}, id_generator=SequentialIds("new")
    )

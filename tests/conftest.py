"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from application.commands import CreateSeriesCommand, UpdateSeriesCommand
from application.interfaces import IClock
from application.mappers import ExpansionSerializer
from domain.entities import Expansion
from infrastructure.container import build_series_use_cases
from infrastructure.memory import InMemorySeriesRepository

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0)


class FixedClock(IClock):
    """Clock frozen at a settable moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_now():
    """Fixture for the moment the fixed clock starts at."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Fixture for a clock frozen at FIXED_NOW."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def serializer():
    """Fixture for the default expansion serializer."""
    return ExpansionSerializer()


@pytest.fixture
def repository():
    """Fixture for an empty in-memory series store."""
    return InMemorySeriesRepository()


@pytest.fixture
def use_cases(repository, fixed_clock, serializer):
    """Fixture for every series use case wired to the in-memory store."""
    return build_series_use_cases(repository, fixed_clock, serializer)


@pytest.fixture
def create_command():
    """Fixture for a valid create command."""
    return CreateSeriesCommand(
        code="SV01",
        name="Scarlet & Violet Base Set",
        release_year=2023,
        image_url="https://images.example.com/sv01.png",
        expansions=[Expansion(code="SVI"), Expansion(code="PAL")],
    )


@pytest.fixture
def update_command_factory():
    """Factory fixture for update commands with overridable fields."""

    def _create(**overrides) -> UpdateSeriesCommand:
        fields = {
            "code": "SV02",
            "name": "Scarlet & Violet Paldea Evolved",
            "release_year": 2023,
        }
        fields.update(overrides)
        return UpdateSeriesCommand(**fields)

    return _create

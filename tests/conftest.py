# tests/conftest.py

import pytest

from nodecounter.models.node import Node, Resources

# Unix timestamps of month starts used across the tests.
JAN_2022 = 1640995200
FEB_2022 = 1643673600
MAR_2022 = 1646092800
APR_2022 = 1648771200


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to isolate the configuration from the real environment.

    This fixture runs automatically for every test (`autouse=True`) and removes
    every override so the config falls back to its defaults.
    """
    for key in (
        "NODECOUNTER_GRAPHQL_URL",
        "NODECOUNTER_START_YEAR",
        "NODECOUNTER_YEARS",
        "NODECOUNTER_OUTPUT",
        "NODECOUNTER_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_node():
    """Factory building a Node from plain values."""

    def _make(node_id, farm_id, created, cru=1, mru=2, sru=3, hru=4):
        return Node(
            node_id=node_id,
            farm_id=farm_id,
            created=created,
            resources=Resources(cru=cru, mru=mru, sru=sru, hru=hru),
        )

    return _make


@pytest.fixture
def sample_nodes(make_node):
    """Six nodes on four farms, created between December 2021 and March 2022."""
    return [
        make_node(1, 10, JAN_2022 - 86400, cru=4, mru=16, sru=500, hru=0),
        make_node(2, 10, JAN_2022 + 3600, cru=8, mru=32, sru=1000, hru=2000),
        make_node(3, 11, FEB_2022 - 1, cru=2, mru=8, sru=250, hru=4000),
        make_node(4, 12, FEB_2022, cru=16, mru=64, sru=0, hru=8000),
        make_node(5, 11, FEB_2022 + 10 * 86400, cru=1, mru=1, sru=1, hru=1),
        make_node(6, 13, MAR_2022 + 3600, cru=32, mru=128, sru=2000, hru=12000),
    ]

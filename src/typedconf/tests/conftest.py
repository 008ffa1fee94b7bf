"""Shared test fixtures for typedconf tests."""

import pytest

from typedconf.utils.config import ClientConf, ConfigEntry, DeprecatedEntry


@pytest.fixture
def entries():
    """Provide a set of entries covering every supported type."""
    return {
        "enabled": ConfigEntry("client.enabled", False),
        "pool_size": ConfigEntry("client.pool.size", 4),
        "max_bytes": ConfigEntry("client.max.bytes", 1024),
        "name": ConfigEntry("client.name", "default-client"),
        "proxy": ConfigEntry("client.proxy", None),
        "timeout": ConfigEntry("timeout", "30s"),
        "rpc_timeout": ConfigEntry("client.rpc.timeout", None),
    }


@pytest.fixture
def configs_with_alternatives():
    """Canonical key -> deprecation record of its old key."""
    return {
        "client.http.timeout": DeprecatedEntry("client.connect.timeout", "0.5"),
        "client.jobs.max": DeprecatedEntry("client.job.limit", "0.6"),
    }


@pytest.fixture
def deprecated_configs():
    """Keys deprecated without replacement."""
    return {
        "client.legacy.mode": DeprecatedEntry(
            "client.legacy.mode", "0.4", "Legacy mode is always off now."
        ),
    }


@pytest.fixture
def deprecating_conf(configs_with_alternatives, deprecated_configs):
    """Provide an empty configuration with both deprecation tables."""
    return ClientConf(
        configs_with_alternatives=configs_with_alternatives,
        deprecated_configs=deprecated_configs,
    )


@pytest.fixture
def properties_file(tmp_path):
    """Provide a small properties file on disk."""
    path = tmp_path / "client.properties"
    path.write_text(
        "# client settings\n"
        "client.name=reporting\n"
        "client.pool.size=8\n"
        "timeout=2m\n"
        "client.proxy=http://proxy:${PORT}\n"
    )
    return path

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from yang_thrift.models import SchemaNode


def make_node(name: str, **fields: Any) -> SchemaNode:
    """Build a schema node from plain data, as the loader would."""
    return SchemaNode.model_validate({"name": name, **fields})


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def device_yaml(fixtures_dir: Path) -> Path:
    """Return path to the device tree dump."""
    return fixtures_dir / "device.yaml"


@pytest.fixture
def device_data() -> dict[str, Any]:
    """Return a container with a string leaf and a uint16 leaf-list."""
    return {
        "name": "Device",
        "kind": "container",
        "children": {
            "host-name": {"kind": "leaf", "type": "string", "source": "dev.yang:4:5"},
            "ip-addr": {"kind": "leaf-list", "type": "uint16", "source": "dev.yang:7:5"},
        },
    }


@pytest.fixture
def device_node(device_data: dict[str, Any]) -> SchemaNode:
    """Return the Device container as a schema node."""
    return SchemaNode.model_validate(device_data)


@pytest.fixture
def nested_tree() -> SchemaNode:
    """Return a three-level tree with containers, lists and an RPC."""
    return make_node(
        "system",
        children={
            "config": {
                "children": {
                    "hostname": {"kind": "leaf", "type": "string"},
                    "ntp": {
                        "children": {"server": {"kind": "leaf-list", "type": "string"}},
                    },
                },
            },
            "users": {
                "kind": "list",
                "children": {"uid": {"kind": "leaf", "type": "uint32"}},
            },
            "restart": {"kind": "rpc"},
        },
    )

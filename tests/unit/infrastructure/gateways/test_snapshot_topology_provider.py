from __future__ import annotations

import json

import pytest

from src.domain.entities.errors import TopologyLookupError
from src.domain.entities.state import LifecycleState
from src.domain.entities.topology import ComponentCategory, ServiceRef, StackId
from src.domain.services.hive_service_state import HiveServiceStateCalculator
from src.infrastructure.gateways.snapshot_topology_provider import (
    SnapshotTopologyProvider,
    TopologySnapshot,
)


def _entry(name: str, host: str, state: str) -> dict:
    return {"component_name": name, "host_name": host, "state": state}


SNAPSHOT = {
    "stacks": {
        "HDP-3.0": {
            "HIVE": {
                "HIVE_METASTORE": "MASTER",
                "HIVE_SERVER": "MASTER",
                "WEBHCAT_SERVER": "MASTER",
                "MYSQL_SERVER": "MASTER",
                "HIVE_CLIENT": "CLIENT",
            }
        }
    },
    "clusters": {
        "c1": {
            "services": {
                "HIVE": {
                    "stack": "HDP-3.0",
                    "components": [
                        _entry("HIVE_SERVER", "h1", "STARTED"),
                        _entry("HIVE_METASTORE", "h1", "STARTED"),
                        _entry("WEBHCAT_SERVER", "h2", "STARTED"),
                        _entry("MYSQL_SERVER", "h2", "installed"),
                        _entry("HIVE_CLIENT", "h3", "bogus"),
                    ],
                }
            }
        }
    },
}


@pytest.fixture()
def provider() -> SnapshotTopologyProvider:
    return SnapshotTopologyProvider(TopologySnapshot.model_validate(SNAPSHOT))


def test_resolve_service(provider) -> None:
    handle = provider.resolve_service(ServiceRef("c1", "HIVE"))

    assert handle is not None
    assert handle.stack_id == StackId("HDP", "3.0")


@pytest.mark.parametrize("ref", [ServiceRef("c2", "HIVE"), ServiceRef("c1", "HDFS")])
def test_resolve_unknown_service_returns_none(provider, ref) -> None:
    assert provider.resolve_service(ref) is None


def test_list_component_instances_parses_states(provider) -> None:
    handle = provider.resolve_service(ServiceRef("c1", "HIVE"))

    instances = provider.list_component_instances(handle)

    states = {i.component_kind: i.lifecycle_state for i in instances}
    assert states["MYSQL_SERVER"] is LifecycleState.INSTALLED
    assert states["HIVE_CLIENT"] is LifecycleState.UNKNOWN
    assert all(i.service_name == "HIVE" for i in instances)


def test_describe_component_role(provider) -> None:
    handle = provider.resolve_service(ServiceRef("c1", "HIVE"))

    assert provider.describe_component_role("HIVE_SERVER", handle).category is (
        ComponentCategory.MASTER
    )
    client_role = provider.describe_component_role("HIVE_CLIENT", handle)
    assert client_role.is_primary_role is False
    assert provider.describe_component_role("UNLISTED", handle) is None


def test_from_file_feeds_the_hive_calculator(tmp_path) -> None:
    path = tmp_path / "topology.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")

    provider = SnapshotTopologyProvider.from_file(path)
    state = HiveServiceStateCalculator(provider).compute_service_state(
        ServiceRef("c1", "HIVE")
    )

    assert state is LifecycleState.INSTALLED


def test_from_file_missing_file(tmp_path) -> None:
    with pytest.raises(TopologyLookupError):
        SnapshotTopologyProvider.from_file(tmp_path / "missing.json")


def test_from_file_invalid_snapshot(tmp_path) -> None:
    path = tmp_path / "topology.json"
    path.write_text(json.dumps({"clusters": {"c1": {"services": {"HIVE": {}}}}}))

    with pytest.raises(TopologyLookupError) as exc:
        SnapshotTopologyProvider.from_file(path)

    assert exc.value.details["path"] == str(path)


def test_bad_stack_id_is_a_lookup_error() -> None:
    snapshot = TopologySnapshot.model_validate(
        {"clusters": {"c1": {"services": {"HIVE": {"stack": "HDP"}}}}}
    )
    provider = SnapshotTopologyProvider(snapshot)

    with pytest.raises(TopologyLookupError):
        provider.resolve_service(ServiceRef("c1", "HIVE"))


def test_stopped_webhcat_in_snapshot_reports_stopped() -> None:
    snapshot = {
        "stacks": SNAPSHOT["stacks"],
        "clusters": {
            "c1": {
                "services": {
                    "HIVE": {
                        "stack": "HDP-3.0",
                        "components": [
                            _entry("HIVE_SERVER", "h1", "STARTED"),
                            _entry("HIVE_METASTORE", "h1", "STARTED"),
                            _entry("WEBHCAT_SERVER", "h2", "STOPPED"),
                        ],
                    }
                }
            }
        },
    }
    provider = SnapshotTopologyProvider(TopologySnapshot.model_validate(snapshot))

    state = HiveServiceStateCalculator(provider).compute_service_state(
        ServiceRef("c1", "HIVE")
    )

    assert state is LifecycleState.STOPPED

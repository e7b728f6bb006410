from __future__ import annotations

from datetime import timezone

import pytest

from src.application.use_cases.service_state_use_cases import GetServiceStateUseCase
from src.domain.entities.state import LifecycleState
from src.domain.entities.topology import ComponentInstance
from src.domain.services.calculator_registry import build_calculator_registry


@pytest.mark.asyncio
async def test_execute_uses_hive_calculator(topology) -> None:
    topology.instances = [
        ComponentInstance("HIVE_SERVER", LifecycleState.STARTED),
        ComponentInstance("HIVE_METASTORE", LifecycleState.STARTED),
        ComponentInstance("WEBHCAT_SERVER", LifecycleState.INSTALLED),
    ]
    use_case = GetServiceStateUseCase(build_calculator_registry(topology))

    dto = await use_case.execute("c1", "HIVE")

    assert dto.state is LifecycleState.INSTALLED
    assert dto.calculator == "hive"
    assert dto.cluster_name == "c1"
    assert dto.service_name == "HIVE"
    assert dto.checked_at.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_execute_falls_back_to_default_calculator(topology) -> None:
    topology.instances = [ComponentInstance("HIVE_SERVER", LifecycleState.STARTED)]
    use_case = GetServiceStateUseCase(build_calculator_registry(topology))

    dto = await use_case.execute("c1", "HDFS")

    assert dto.calculator == "default"
    assert dto.state is LifecycleState.STARTED


@pytest.mark.asyncio
async def test_execute_reports_unknown_for_missing_service(topology) -> None:
    use_case = GetServiceStateUseCase(build_calculator_registry(topology))

    dto = await use_case.execute("c1", "KAFKA")

    assert dto.state is LifecycleState.UNKNOWN

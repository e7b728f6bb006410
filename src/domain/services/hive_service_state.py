"""
Hive service state calculator - Domain Layer

Hive is reported as STARTED when nothing is down, or when every role that
clients depend on is running even if some other master is not: HiveServer2,
WebHCat, at least one Metastore, and the embedded MySQL server when one is
deployed. Otherwise the concrete non-running state is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from src.domain.entities.state import LifecycleState, is_running_class
from src.domain.entities.topology import ComponentInstance
from src.domain.services.service_state_calculator import ServiceStateCalculator

HIVE_SERVICE_NAME = "HIVE"

HIVE_METASTORE = "HIVE_METASTORE"
HIVE_SERVER = "HIVE_SERVER"
MYSQL_SERVER = "MYSQL_SERVER"
WEBHCAT_SERVER = "WEBHCAT_SERVER"


@dataclass(slots=True)
class AggregationTally:
    """Accumulator for a single Hive state computation."""

    active_metastore_count: int = 0
    last_non_running_state: Optional[LifecycleState] = None
    embedded_mysql_present: bool = False
    hive_server_started: bool = False
    webhcat_server_started: bool = False
    mysql_server_started: bool = False

    def record(self, instance: ComponentInstance) -> None:
        kind = instance.component_kind
        state = instance.lifecycle_state

        if kind == MYSQL_SERVER:
            self.embedded_mysql_present = True

        if not is_running_class(state):
            # Last write wins when several masters are down.
            self.last_non_running_state = state
            return

        if kind == HIVE_METASTORE:
            self.active_metastore_count += 1
        elif kind == HIVE_SERVER:
            self.hive_server_started = True
        elif kind == MYSQL_SERVER:
            self.mysql_server_started = True
        elif kind == WEBHCAT_SERVER:
            self.webhcat_server_started = True

    @property
    def required_roles_running(self) -> bool:
        return (
            self.hive_server_started
            and self.webhcat_server_started
            and self.active_metastore_count > 0
            and (not self.embedded_mysql_present or self.mysql_server_started)
        )


class HiveServiceStateCalculator(ServiceStateCalculator):
    """Calculator of the HIVE service state."""

    name = "hive"

    def aggregate(
        self, primary_instances: Iterable[ComponentInstance]
    ) -> LifecycleState:
        tally = AggregationTally()
        for instance in primary_instances:
            tally.record(instance)

        if tally.last_non_running_state is None or tally.required_roles_running:
            return LifecycleState.STARTED
        return tally.last_non_running_state

"""
Component status as reported by the application master.

Design Principles:
- Immutable: frozen dataclass, built from a complete field set
- Counters always carry a value; only failure_message is optional
- containers distinguishes absent (None) from empty (())
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ComponentInformation:
    """
    Status snapshot of one component (role) of a Slider application.

    Attributes:
        name: Component name
        priority: Role priority, unique per application
        placement_policy: Placement policy flags
        actual..failed_recently: Container counters
        failure_message: Last failure message, None when there was none
        containers: Ids of live containers, None when not collected
    """
    name: str = ""
    priority: int = 0
    placement_policy: int = 0

    actual: int = 0
    completed: int = 0
    desired: int = 0
    failed: int = 0
    releasing: int = 0
    requested: int = 0
    started: int = 0
    start_failed: int = 0
    total_requested: int = 0
    node_failed: int = 0
    preempted: int = 0
    failed_recently: int = 0

    failure_message: Optional[str] = None
    containers: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.containers is not None and not isinstance(self.containers, tuple):
            object.__setattr__(self, "containers", tuple(self.containers))

    def to_dict(self) -> Dict[str, Any]:
        """REST JSON rendering; absent optionals are omitted."""
        data: Dict[str, Any] = {
            "name": self.name,
            "priority": self.priority,
            "placementPolicy": self.placement_policy,
            "actual": self.actual,
            "completed": self.completed,
            "desired": self.desired,
            "failed": self.failed,
            "releasing": self.releasing,
            "requested": self.requested,
            "started": self.started,
            "startFailed": self.start_failed,
            "totalRequested": self.total_requested,
            "nodeFailed": self.node_failed,
            "preempted": self.preempted,
            "failedRecently": self.failed_recently,
        }
        if self.failure_message is not None:
            data["failureMessage"] = self.failure_message
        if self.containers is not None:
            data["containers"] = list(self.containers)
        return data

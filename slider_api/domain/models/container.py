"""
Container status as reported by the application master.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ContainerInformation:
    """
    Status snapshot of one container.

    The identity and timing fields are always on the wire; the rest are
    independently optional and None when unknown.

    Attributes:
        container_id: YARN container id
        component: Name of the component the container belongs to
        app_version: Application version running in the container
        create_time: Creation time, epoch millis
        start_time: Start time, epoch millis
        state: Container state code
        released: Whether the container has been released
        exit_code: Exit code once the container has finished
        diagnostics: Diagnostics text from the node manager
        host: Host name or host URL of the node running the container
        placement: Placement description
        output: Output lines, None when not collected
    """
    container_id: str = ""
    component: str = ""
    app_version: str = ""
    create_time: int = 0
    start_time: int = 0
    state: int = 0

    released: Optional[bool] = None
    exit_code: Optional[int] = None
    diagnostics: Optional[str] = None
    host: Optional[str] = None
    placement: Optional[str] = None
    output: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.output is not None and not isinstance(self.output, tuple):
            object.__setattr__(self, "output", tuple(self.output))

    @property
    def is_finished(self) -> bool:
        """True once an exit code has been reported."""
        return self.exit_code is not None

    def to_dict(self) -> Dict[str, Any]:
        """REST JSON rendering; absent optionals are omitted."""
        data: Dict[str, Any] = {
            "containerId": self.container_id,
            "component": self.component,
            "appVersion": self.app_version,
            "createTime": self.create_time,
            "startTime": self.start_time,
            "state": self.state,
        }
        optional = {
            "released": self.released,
            "exitCode": self.exit_code,
            "diagnostics": self.diagnostics,
            "host": self.host,
            "placement": self.placement,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        if self.output is not None:
            data["output"] = list(self.output)
        return data

"""
Application liveness status.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ApplicationLivenessInformation:
    """
    Whether the application master has satisfied all container requests.

    Attributes:
        all_requests_satisfied: True when no requests are outstanding
        requests_outstanding: Number of container requests still pending
    """
    all_requests_satisfied: bool = False
    requests_outstanding: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """REST JSON rendering."""
        return {
            "allRequestsSatisfied": self.all_requests_satisfied,
            "requestsOutstanding": self.requests_outstanding,
        }

"""Observation dataclass for analyzer outputs."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass
class Observation:
    """Observation output from an analyzer.

    Observations are timestamped per-frame results that flow from one
    module to the modules depending on it.

    Attributes:
        source: Name of the module that produced this observation.
        frame_id: Frame identifier from the source stream.
        t_ns: Timestamp in nanoseconds (source timeline).
        signals: Flat dictionary of scalar results.
        data: Type-safe output data (e.g., HandMovementOutput, HandFrame).
        metadata: Additional metadata about the observation.
        timing: Optional per-step timing in milliseconds.
    """

    source: str
    frame_id: int
    t_ns: int
    signals: Dict[str, Any] = field(default_factory=dict)
    data: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    timing: Optional[Dict[str, float]] = None  # {"classification": 0.02}

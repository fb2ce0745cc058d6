"""Hysteresis thresholds for the hand movement classifier.

Defaults match the tuned constants of the recognition graph. Override
individual values with ``HANDMOTION_*`` environment variables through
:meth:`HandMovementConfig.from_env`, e.g. ``HANDMOTION_SLIDE_ANGLE_THRESHOLD=15``.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

ENV_PREFIX = "HANDMOTION_"


@dataclass(frozen=True)
class HandMovementConfig:
    """Static thresholds; nothing adapts them at runtime.

    Distance and height thresholds are fractions of the current hand
    rectangle height so a hand near the camera and a hand far from it need
    comparable relative movement.
    """

    # Scroll: minimum center displacement, as a fraction of rect height
    scroll_distance_factor: float = 0.02

    # Zoom: minimum height change, as a fraction of the *current* rect height
    zoom_height_factor: float = 0.03

    # Slide: minimum tilt change in degrees
    slide_angle_threshold: int = 12
    # Slide only fires when the previous tilt was within this band (upright hand)
    slide_gate_min: int = 80
    slide_gate_max: int = 100
    # Slide is evaluated on every n-th frame
    slide_frame_stride: int = 2

    # Landmark list must reach the middle finger MCP (index 9)
    min_landmarks: int = 10

    def __post_init__(self):
        if self.slide_frame_stride < 1:
            raise ValueError(
                f"slide_frame_stride must be >= 1, got {self.slide_frame_stride}"
            )
        if self.slide_gate_min > self.slide_gate_max:
            raise ValueError(
                f"slide_gate_min ({self.slide_gate_min}) exceeds "
                f"slide_gate_max ({self.slide_gate_max})"
            )
        if self.min_landmarks < 10:
            raise ValueError(
                f"min_landmarks must be >= 10, got {self.min_landmarks}"
            )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["HandMovementConfig"] = None,
    ) -> "HandMovementConfig":
        """Build a config from ``HANDMOTION_<FIELD>`` environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``).
            base: Config supplying values for unset variables (default: defaults).

        Raises:
            ValueError: If a variable cannot be parsed as the field's type.
        """
        environ = os.environ if environ is None else environ
        base = base or cls()

        overrides = {}
        for f in fields(cls):
            var = ENV_PREFIX + f.name.upper()
            raw = environ.get(var)
            if raw is None or raw.strip() == "":
                continue
            convert = int if isinstance(getattr(base, f.name), int) else float
            try:
                overrides[f.name] = convert(raw)
            except ValueError:
                raise ValueError(
                    f"{var}={raw!r} is not a valid {convert.__name__}"
                ) from None

        return replace(base, **overrides) if overrides else base


__all__ = ["ENV_PREFIX", "HandMovementConfig"]

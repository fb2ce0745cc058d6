"""Output types for the hand movement classifier."""

from dataclasses import dataclass
from typing import Dict, Optional

from handmotion.types import ScrollDirection, ZoomDirection, SlideDirection


@dataclass(frozen=True)
class ClassificationResult:
    """Three independent per-frame decisions.

    Every field always holds an enum member; "nothing recognized" is the
    explicit NONE member of each category.
    """

    scroll: ScrollDirection = ScrollDirection.NONE
    zoom: ZoomDirection = ZoomDirection.NONE
    slide: SlideDirection = SlideDirection.NONE

    def __iter__(self):
        # Allows ``scroll, zoom, slide = classifier.classify(frame)``
        return iter((self.scroll, self.zoom, self.slide))

    @property
    def has_gesture(self) -> bool:
        return self.scroll.detected or self.zoom.detected or self.slide.detected

    def to_dict(self) -> Dict[str, str]:
        return {
            "scroll": self.scroll.value,
            "zoom": self.zoom.value,
            "slide": self.slide.value,
        }

    def labels(self) -> Dict[str, str]:
        """Human readable label per category (``"___"`` when none)."""
        return {
            "scroll": self.scroll.label,
            "zoom": self.zoom.label,
            "slide": self.slide.label,
        }


@dataclass
class HandMovementOutput:
    """Output from HandMovementAnalyzer.

    Attributes:
        result: The classification for this frame.
        movement_bearing: Bearing of the hand center movement in degrees, or
            None when the scroll threshold was not exceeded.
        hand_angle: Wrist to middle finger MCP tilt in degrees, or None when
            the slide step did not run this frame.
        slide_evaluated: Whether the slide step ran this frame.
    """

    result: ClassificationResult = ClassificationResult()
    movement_bearing: Optional[int] = None
    hand_angle: Optional[int] = None
    slide_evaluated: bool = False


__all__ = ["ClassificationResult", "HandMovementOutput"]

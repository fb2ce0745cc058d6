"""Hand movement domain types."""

from enum import Enum

# Placeholder emitted on the label streams when nothing was recognized.
NO_MOVEMENT_LABEL = "___"


class HandLandmarkIndex:
    """MediaPipe hand landmark indices.

    21 landmarks per hand as defined by MediaPipe Hands. The movement
    classifier only reads WRIST and MIDDLE_FINGER_MCP.

    Example:
        >>> lms = frame.landmarks
        >>> wrist = lms[HandLandmarkIndex.WRIST]
        >>> knuckle = lms[HandLandmarkIndex.MIDDLE_FINGER_MCP]
    """

    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


class _MovementEnum(Enum):
    """Enum base carrying a human readable stream label per member."""

    @property
    def label(self) -> str:
        return _LABELS.get(self, NO_MOVEMENT_LABEL)

    @property
    def detected(self) -> bool:
        return self.value != "none"


class ScrollDirection(_MovementEnum):
    """Direction of a whole-hand translation.

    Example:
        >>> result.scroll is ScrollDirection.UP
        True
        >>> result.scroll.label
        'Scrolling up'
    """

    NONE = "none"
    RIGHT = "scroll_right"
    UP = "scroll_up"
    LEFT = "scroll_left"
    DOWN = "scroll_down"


class ZoomDirection(_MovementEnum):
    """Zoom derived from the hand moving towards or away from the camera."""

    NONE = "none"
    IN = "zoom_in"
    OUT = "zoom_out"


class SlideDirection(_MovementEnum):
    """Slide derived from tilting an upright hand."""

    NONE = "none"
    LEFT = "slide_left"
    RIGHT = "slide_right"


_LABELS = {
    ScrollDirection.RIGHT: "Scrolling right",
    ScrollDirection.UP: "Scrolling up",
    ScrollDirection.LEFT: "Scrolling left",
    ScrollDirection.DOWN: "Scrolling down",
    ZoomDirection.IN: "Zoom in",
    ZoomDirection.OUT: "Zoom out",
    SlideDirection.LEFT: "Slide left",
    SlideDirection.RIGHT: "Slide right",
}


__all__ = [
    "NO_MOVEMENT_LABEL",
    "HandLandmarkIndex",
    "ScrollDirection",
    "ZoomDirection",
    "SlideDirection",
]

"""Per-frame hand observation consumed by the movement classifier."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from handmotion.errors import InvalidInput
from handmotion.types import HandLandmarkIndex


@dataclass(frozen=True)
class NormalizedRect:
    """Hand bounding rectangle in normalized [0, 1] frame coordinates.

    Values are not range-checked; out-of-range input simply produces
    out-of-range geometry.

    Attributes:
        x_center: Horizontal center.
        y_center: Vertical center (grows downwards).
        height: Rectangle height, relative to frame height.
        width: Rectangle width. Carried along, never used for classification.
    """

    x_center: float
    y_center: float
    height: float
    width: Optional[float] = None

    @property
    def center(self) -> tuple:
        return (self.x_center, self.y_center)


@dataclass
class HandFrame:
    """One tracked hand in one frame.

    Attributes:
        rect: Hand rectangle for this frame.
        landmarks: Array of shape (N, 2) or (N, 3), normalized (x, y[, z]).
            MediaPipe Hands yields N = 21.
        frame_index: Per-call sequence number used for slide sampling.
            None lets the classifier count calls itself.
        frame_id: Source frame identifier (bookkeeping only).
        t_ns: Source timestamp in nanoseconds (bookkeeping only).
    """

    rect: NormalizedRect
    landmarks: np.ndarray
    frame_index: Optional[int] = None
    frame_id: int = 0
    t_ns: int = 0

    @classmethod
    def create(
        cls,
        rect: Any,
        landmarks: Any,
        frame_index: Optional[int] = None,
        frame_id: int = 0,
        t_ns: int = 0,
    ) -> "HandFrame":
        """Build a frame from loosely typed input.

        Args:
            rect: NormalizedRect, a ``(x_center, y_center, height)`` tuple or
                an object with those attributes (e.g. a MediaPipe NormalizedRect).
            landmarks: Array, sequence of ``(x, y[, z])`` tuples, or sequence
                of objects with ``.x`` / ``.y`` attributes.

        Raises:
            InvalidInput: If landmarks cannot be read as 2D points.
        """
        return cls(
            rect=_to_rect(rect),
            landmarks=landmarks_to_array(landmarks),
            frame_index=frame_index,
            frame_id=frame_id,
            t_ns=t_ns,
        )


def _to_rect(rect: Any) -> NormalizedRect:
    if isinstance(rect, NormalizedRect):
        return rect
    if isinstance(rect, (tuple, list)):
        return NormalizedRect(*(float(v) for v in rect))
    width = getattr(rect, "width", None)
    return NormalizedRect(
        x_center=float(rect.x_center),
        y_center=float(rect.y_center),
        height=float(rect.height),
        width=float(width) if width is not None else None,
    )


def landmarks_to_array(landmarks: Any) -> np.ndarray:
    """Convert landmarks to a float array of shape (N, 2) or (N, 3).

    Raises:
        InvalidInput: If the input is absent or not a list of 2D/3D points.
    """
    if landmarks is None:
        raise InvalidInput("Input landmark list is missing")

    try:
        if isinstance(landmarks, np.ndarray):
            arr = landmarks.astype(np.float64, copy=False)
        else:
            points = list(landmarks)
            if points and hasattr(points[0], "x"):
                points = [(p.x, p.y) for p in points]
            arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Landmarks are not numeric points: {e}") from e

    if arr.size == 0:
        raise InvalidInput("Input landmark list is empty")
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise InvalidInput(
            f"Landmarks must have shape (N, 2) or (N, 3), got {arr.shape}"
        )
    return arr


def validate_landmarks(landmarks: Any, min_count: int = 10) -> np.ndarray:
    """Check that the landmarks reach every index the classifier reads.

    Returns:
        The landmarks as a float array of shape (N, 2) or (N, 3).

    Raises:
        InvalidInput: If landmarks are missing, empty, malformed or too short.
    """
    arr = landmarks_to_array(landmarks)
    if arr.shape[0] < min_count:
        raise InvalidInput(
            f"Expected at least {min_count} landmarks, got {arr.shape[0]}"
        )
    return arr


def frame_from_points(
    center: Sequence[float],
    height: float,
    wrist: Sequence[float],
    knuckle: Sequence[float],
    frame_index: Optional[int] = None,
    num_landmarks: int = 21,
) -> HandFrame:
    """Build a frame from the few values the classifier actually reads.

    Remaining landmarks are placed on the wrist. Handy for tests and for
    callers that only track the wrist and middle finger MCP.
    """
    landmarks = np.tile(np.asarray(wrist[:2], dtype=np.float64), (num_landmarks, 1))
    if num_landmarks > HandLandmarkIndex.MIDDLE_FINGER_MCP:
        landmarks[HandLandmarkIndex.MIDDLE_FINGER_MCP] = knuckle[:2]
    return HandFrame(
        rect=NormalizedRect(x_center=center[0], y_center=center[1], height=height),
        landmarks=landmarks,
        frame_index=frame_index,
    )


__all__ = [
    "NormalizedRect",
    "HandFrame",
    "landmarks_to_array",
    "validate_landmarks",
    "frame_from_points",
]

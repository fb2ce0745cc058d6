"""Stateful scroll / zoom / slide classifier.

Each frame is compared against a snapshot of the previous one:

- scroll: the hand rectangle center moved further than a fraction of the
  hand height; the movement bearing picks one of four 90 degree sectors.
- zoom: the hand rectangle grew or shrank by more than a fraction of its
  current height.
- slide: an upright hand (wrist to middle finger MCP axis near vertical)
  tilted by more than a fixed number of degrees. Evaluated on every second
  frame only, against the last evaluated frame.

The three steps share the snapshot but are otherwise independent. There is
no lookahead and no history beyond one frame.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
from handmotion.config import HandMovementConfig
from handmotion.frame import HandFrame, NormalizedRect, validate_landmarks
from handmotion.geometry import bearing_degrees, euclidean_distance
from handmotion.output import ClassificationResult, HandMovementOutput
from handmotion.types import (
    HandLandmarkIndex,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
)

logger = logging.getLogger(__name__)


@dataclass
class PreviousSnapshot:
    """Values retained from the previous evaluated frame.

    None means the owning step has not run yet. A stored 0.0 is a real
    measurement.
    """

    center: Optional[Tuple[float, float]] = None
    rect_height: Optional[float] = None
    wrist_to_knuckle_angle: Optional[int] = None


def scroll_direction_for_bearing(bearing: int) -> ScrollDirection:
    """Map a movement bearing in degrees to a scroll sector.

    Sectors are half-open: ``[-45, 45)`` right, ``[45, 135)`` up,
    ``[135, 180] + [-180, -135)`` left, ``[-135, -45)`` down.
    """
    if -45 <= bearing < 45:
        return ScrollDirection.RIGHT
    if 45 <= bearing < 135:
        return ScrollDirection.UP
    if bearing >= 135 or bearing < -135:
        return ScrollDirection.LEFT
    return ScrollDirection.DOWN


class HandMovementClassifier:
    """Per-stream hand movement classifier.

    One instance serves one ordered frame stream. Instances share nothing,
    so independent streams need independent classifiers. Not thread-safe.

    Args:
        config: Thresholds (default: HandMovementConfig()).

    Example:
        >>> classifier = HandMovementClassifier()
        >>> for frame in frames:
        ...     scroll, zoom, slide = classifier.classify(frame)
    """

    def __init__(self, config: Optional[HandMovementConfig] = None):
        self.config = config or HandMovementConfig()
        self._previous = PreviousSnapshot()
        self._frame_count = 0

    @property
    def snapshot(self) -> PreviousSnapshot:
        """Copy of the retained previous-frame values."""
        return replace(self._previous)

    @property
    def frame_count(self) -> int:
        """Number of frames classified successfully."""
        return self._frame_count

    def classify(self, frame: HandFrame) -> ClassificationResult:
        """Classify one frame and advance the snapshot.

        Raises:
            InvalidInput: If the landmark list is missing or too short. The
                snapshot and call counter are left unchanged.
        """
        return self.classify_detailed(frame).result

    def classify_many(self, frames: Iterable[HandFrame]) -> Iterator[ClassificationResult]:
        """Classify frames in order, yielding one result per frame."""
        for frame in frames:
            yield self.classify(frame)

    def classify_detailed(
        self,
        frame: HandFrame,
        landmarks: Optional[np.ndarray] = None,
    ) -> HandMovementOutput:
        """Like :meth:`classify`, also returning the measured bearing/angle.

        Args:
            frame: Frame to classify.
            landmarks: ``frame.landmarks`` as already returned by
                :func:`validate_landmarks`. None validates here.
        """
        if landmarks is None:
            landmarks = validate_landmarks(frame.landmarks, self.config.min_landmarks)

        frame_index = frame.frame_index
        if frame_index is None:
            frame_index = self._frame_count + 1

        scroll, bearing = self._classify_scroll(frame.rect)
        zoom = self._classify_zoom(frame.rect)

        slide = SlideDirection.NONE
        hand_angle = None
        slide_evaluated = frame_index % self.config.slide_frame_stride == 0
        if slide_evaluated:
            slide, hand_angle = self._classify_slide(
                landmarks[HandLandmarkIndex.WRIST],
                landmarks[HandLandmarkIndex.MIDDLE_FINGER_MCP],
            )

        self._frame_count += 1

        return HandMovementOutput(
            result=ClassificationResult(scroll=scroll, zoom=zoom, slide=slide),
            movement_bearing=bearing,
            hand_angle=hand_angle,
            slide_evaluated=slide_evaluated,
        )

    def _classify_scroll(self, rect: NormalizedRect) -> Tuple[ScrollDirection, Optional[int]]:
        center = rect.center
        previous = self._previous.center
        self._previous.center = center

        if previous is None:
            return ScrollDirection.NONE, None

        distance = euclidean_distance(center, previous)
        threshold = self.config.scroll_distance_factor * rect.height
        # NaN distances must not scroll
        if not distance > threshold:
            return ScrollDirection.NONE, None

        bearing = bearing_degrees(previous, center)
        direction = scroll_direction_for_bearing(bearing)
        logger.debug(
            "scroll: distance=%.4f threshold=%.4f bearing=%d -> %s",
            distance, threshold, bearing, direction.value,
        )
        return direction, bearing

    def _classify_zoom(self, rect: NormalizedRect) -> ZoomDirection:
        height = rect.height
        previous = self._previous.rect_height
        self._previous.rect_height = height

        if previous is None:
            return ZoomDirection.NONE

        # Threshold scales with the current height, not the previous one
        threshold = height * self.config.zoom_height_factor
        if height < previous - threshold:
            return ZoomDirection.OUT
        if height > previous + threshold:
            return ZoomDirection.IN
        return ZoomDirection.NONE

    def _classify_slide(self, wrist, knuckle) -> Tuple[SlideDirection, int]:
        cfg = self.config
        angle = bearing_degrees(wrist, knuckle)
        previous = self._previous.wrist_to_knuckle_angle
        self._previous.wrist_to_knuckle_angle = angle

        if previous is None:
            return SlideDirection.NONE, angle

        if not (cfg.slide_gate_min <= previous <= cfg.slide_gate_max):
            return SlideDirection.NONE, angle

        if angle > previous + cfg.slide_angle_threshold:
            direction = SlideDirection.LEFT
        elif angle < previous - cfg.slide_angle_threshold:
            direction = SlideDirection.RIGHT
        else:
            direction = SlideDirection.NONE

        logger.debug("slide: angle=%d previous=%d -> %s", angle, previous, direction.value)
        return direction, angle


__all__ = [
    "PreviousSnapshot",
    "HandMovementClassifier",
    "scroll_direction_for_bearing",
]

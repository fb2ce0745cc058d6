"""handmotion — scroll / zoom / slide recognition from hand landmarks.

Example:
    >>> from handmotion import HandMovementClassifier, HandFrame
    >>> classifier = HandMovementClassifier()
    >>> result = classifier.classify(HandFrame.create(rect, landmarks))
    >>> result.scroll, result.zoom, result.slide
"""

from handmotion.analyzer import HandMovementAnalyzer
from handmotion.classifier import (
    HandMovementClassifier,
    PreviousSnapshot,
    scroll_direction_for_bearing,
)
from handmotion.config import HandMovementConfig
from handmotion.errors import HandMovementError, InvalidInput
from handmotion.frame import HandFrame, NormalizedRect
from handmotion.output import ClassificationResult, HandMovementOutput
from handmotion.types import (
    HandLandmarkIndex,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
)

__all__ = [
    # Core
    "HandMovementClassifier",
    "PreviousSnapshot",
    "scroll_direction_for_bearing",
    "HandMovementConfig",
    # Input / output
    "HandFrame",
    "NormalizedRect",
    "ClassificationResult",
    "HandMovementOutput",
    "HandLandmarkIndex",
    "ScrollDirection",
    "ZoomDirection",
    "SlideDirection",
    # Errors
    "HandMovementError",
    "InvalidInput",
    # Pipeline module
    "HandMovementAnalyzer",
]

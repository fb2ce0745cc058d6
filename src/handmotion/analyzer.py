"""Hand movement analyzer: scroll / zoom / slide per frame."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Optional

import numpy as np

from handmotion.sdk import (
    Capability,
    Module,
    ModuleCapabilities,
    Observation,
    ProcessingStep,
    get_processing_steps,
    processing_step,
)
from handmotion.classifier import HandMovementClassifier
from handmotion.config import HandMovementConfig
from handmotion.frame import HandFrame, validate_landmarks
from handmotion.output import ClassificationResult, HandMovementOutput

logger = logging.getLogger(__name__)

# Upstream module providing a HandFrame as observation data
HAND_LANDMARKS_SOURCE = "hand.landmarks"


class HandMovementAnalyzer(Module):
    """Analyzer emitting scroll, zoom and slide labels for one hand stream.

    Wraps a :class:`HandMovementClassifier`. The hand is taken from the
    ``"hand.landmarks"`` dependency when present, otherwise the frame itself
    must be a :class:`HandFrame`. Frames without a hand yield an all-none
    observation and leave the classifier state untouched.

    Args:
        config: Classifier thresholds (default: HandMovementConfig()).

    Example:
        >>> analyzer = HandMovementAnalyzer()
        >>> with analyzer:
        ...     obs = analyzer.process(hand_frame)
        ...     print(obs.signals["scroll"], obs.metadata["labels"]["zoom"])
    """

    depends = [HAND_LANDMARKS_SOURCE]

    def __init__(self, config: Optional[HandMovementConfig] = None):
        self._config = config or HandMovementConfig()
        self._classifier = HandMovementClassifier(self._config)
        self._recognized: Counter = Counter()
        self._frames = 0

        # Step timing tracking (auto-populated by @processing_step decorator)
        self._step_timings: Optional[Dict[str, float]] = None

    @property
    def name(self) -> str:
        return "hand.movement"

    @property
    def capabilities(self) -> ModuleCapabilities:
        return ModuleCapabilities(
            flags=Capability.STATEFUL | Capability.DETERMINISTIC,
        )

    @property
    def processing_steps(self) -> List[ProcessingStep]:
        return get_processing_steps(self)

    @property
    def classifier(self) -> HandMovementClassifier:
        return self._classifier

    def initialize(self) -> None:
        logger.info("HandMovementAnalyzer initialized (config=%s)", self._config)

    def cleanup(self) -> None:
        if self._frames > 0:
            logger.info(
                "hand.movement summary: %d frames, recognized: %s",
                self._frames,
                dict(self._recognized) if self._recognized else "none",
            )

    # ========== Processing Steps (decorated methods) ==========

    @processing_step(
        name="validation",
        description="Check the landmark list reaches the middle finger MCP",
        input_type="HandFrame",
        output_type="np.ndarray",
    )
    def _validate(self, hand: HandFrame) -> np.ndarray:
        return validate_landmarks(hand.landmarks, self._config.min_landmarks)

    @processing_step(
        name="classification",
        description="Scroll, zoom and slide decisions against the previous frame",
        input_type="HandFrame, np.ndarray",
        output_type="HandMovementOutput",
        depends_on=["validation"],
    )
    def _classify(self, hand: HandFrame, landmarks: np.ndarray) -> HandMovementOutput:
        return self._classifier.classify_detailed(hand, landmarks)

    # ========== Main process method ==========

    def process(self, frame, deps: Optional[Dict[str, Observation]] = None) -> Observation:
        """Classify the hand movement of one frame.

        Args:
            frame: A HandFrame, or any frame object when the hand comes from deps.
            deps: Optional ``{"hand.landmarks": Observation(data=HandFrame)}``.

        Returns:
            Observation with ``scroll``/``zoom``/``slide`` signals.

        Raises:
            InvalidInput: If the hand landmarks violate the input contract.
        """
        hand = _resolve_hand(frame, deps)
        frame_id = getattr(hand if hand is not None else frame, "frame_id", 0)
        t_ns = getattr(hand if hand is not None else frame, "t_ns", None)
        if t_ns is None:
            t_ns = getattr(frame, "t_src_ns", 0)

        self._step_timings = {}
        try:
            if hand is None:
                output = HandMovementOutput()
            else:
                output = self._classify(hand, self._validate(hand))
        finally:
            timing = self._step_timings.copy() if self._step_timings else None
            self._step_timings = None

        self._frames += 1
        result = output.result
        self._log_recognized(result)

        return Observation(
            source=self.name,
            frame_id=frame_id,
            t_ns=t_ns,
            signals={
                "hand_detected": hand is not None,
                "gesture_detected": result.has_gesture,
                **result.to_dict(),
            },
            data=output,
            metadata={
                "labels": result.labels(),
                "_metrics": {
                    "frames": self._frames,
                    "gestures_recognized": sum(
                        1 for d in result if d.detected
                    ),
                },
            },
            timing=timing,
        )

    def _log_recognized(self, result: ClassificationResult) -> None:
        for category, direction in zip(("scrolling", "zooming", "sliding"), result):
            if direction.detected:
                self._recognized[direction.value] += 1
                logger.info(
                    "recognized_hand_movement_%s: %s", category, direction.label
                )


def _resolve_hand(frame, deps: Optional[Dict[str, Observation]]) -> Optional[HandFrame]:
    """Pick the hand from the upstream observation, falling back to the frame."""
    if deps:
        upstream = deps.get(HAND_LANDMARKS_SOURCE)
        if upstream is not None:
            data = getattr(upstream, "data", None)
            return data if isinstance(data, HandFrame) else None
    if isinstance(frame, HandFrame):
        return frame
    return None


__all__ = ["HandMovementAnalyzer", "HAND_LANDMARKS_SOURCE"]

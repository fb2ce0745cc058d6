"""JSON record codec for hand frames and classification results.

Frame records are JSON-compatible dicts, one per frame::

    {
        "frame_index": 2,            # optional
        "frame_id": 17,              # optional
        "t_ns": 566666666,           # optional
        "rect": {"x_center": 0.5, "y_center": 0.5, "height": 0.3},
        "landmarks": [[0.4, 0.6], [0.41, 0.58, 0.0], {"x": 0.4, "y": 0.4}, ...]
    }
"""

from typing import Any, Dict, Optional

from handmotion.errors import InvalidInput
from handmotion.frame import HandFrame, NormalizedRect, landmarks_to_array
from handmotion.output import ClassificationResult, HandMovementOutput

_RECT_KEYS = ("x_center", "y_center", "height")


def decode_hand_frame(data: Dict[str, Any]) -> HandFrame:
    """Decode a frame record into a HandFrame.

    Args:
        data: Dict in the record format described in the module docstring.

    Returns:
        Decoded HandFrame.

    Raises:
        InvalidInput: If the record lacks a usable rect or landmark list.
    """
    if not isinstance(data, dict):
        raise InvalidInput(f"Frame record must be an object, got {type(data).__name__}")

    rect_data = data.get("rect")
    if not isinstance(rect_data, dict):
        raise InvalidInput("Frame record has no 'rect' object")
    missing = [k for k in _RECT_KEYS if k not in rect_data]
    if missing:
        raise InvalidInput(f"Frame rect is missing {', '.join(missing)}")

    try:
        rect = NormalizedRect(
            x_center=float(rect_data["x_center"]),
            y_center=float(rect_data["y_center"]),
            height=float(rect_data["height"]),
            width=_optional_float(rect_data.get("width")),
        )
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Frame rect is not numeric: {e}") from e

    landmarks = data.get("landmarks")
    if isinstance(landmarks, list) and landmarks and isinstance(landmarks[0], dict):
        try:
            landmarks = [(p["x"], p["y"]) for p in landmarks]
        except (KeyError, TypeError) as e:
            raise InvalidInput(f"Landmark object without x/y: {e}") from e

    frame_index = data.get("frame_index")
    try:
        frame_index = int(frame_index) if frame_index is not None else None
        frame_id = int(data.get("frame_id", 0))
        t_ns = int(data.get("t_ns", 0))
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Frame bookkeeping field is not an integer: {e}") from e

    return HandFrame(
        rect=rect,
        landmarks=landmarks_to_array(landmarks),
        frame_index=frame_index,
        frame_id=frame_id,
        t_ns=t_ns,
    )


def encode_result(
    result: ClassificationResult,
    frame: Optional[HandFrame] = None,
    output: Optional[HandMovementOutput] = None,
) -> Dict[str, Any]:
    """Encode a result as a JSON-serializable dict.

    Args:
        result: Classification to encode.
        frame: Source frame; adds ``frame_id``/``t_ns`` when given.
        output: Detailed output; adds measured bearing/angle when given.
    """
    record: Dict[str, Any] = {}
    if frame is not None:
        record["frame_id"] = frame.frame_id
        record["t_ns"] = frame.t_ns
    record.update(result.to_dict())
    if output is not None:
        record["movement_bearing"] = output.movement_bearing
        record["hand_angle"] = output.hand_angle
    return record


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


__all__ = ["decode_hand_frame", "encode_result"]

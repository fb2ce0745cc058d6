"""Tests for HandMovementConfig."""

import pytest

from handmotion.config import HandMovementConfig


class TestDefaults:
    def test_tuned_constants(self):
        cfg = HandMovementConfig()
        assert cfg.scroll_distance_factor == 0.02
        assert cfg.zoom_height_factor == 0.03
        assert cfg.slide_angle_threshold == 12
        assert (cfg.slide_gate_min, cfg.slide_gate_max) == (80, 100)
        assert cfg.slide_frame_stride == 2
        assert cfg.min_landmarks == 10

    def test_frozen(self):
        cfg = HandMovementConfig()
        with pytest.raises(Exception):
            cfg.slide_angle_threshold = 5


class TestValidation:
    def test_stride_must_be_positive(self):
        with pytest.raises(ValueError, match="slide_frame_stride"):
            HandMovementConfig(slide_frame_stride=0)

    def test_gate_order(self):
        with pytest.raises(ValueError, match="slide_gate_min"):
            HandMovementConfig(slide_gate_min=110, slide_gate_max=100)

    def test_min_landmarks_reaches_knuckle(self):
        with pytest.raises(ValueError, match="min_landmarks"):
            HandMovementConfig(min_landmarks=5)


class TestFromEnv:
    def test_no_overrides_returns_defaults(self):
        assert HandMovementConfig.from_env({}) == HandMovementConfig()

    def test_overrides(self):
        cfg = HandMovementConfig.from_env({
            "HANDMOTION_SLIDE_ANGLE_THRESHOLD": "15",
            "HANDMOTION_ZOOM_HEIGHT_FACTOR": "0.05",
            "UNRELATED": "x",
        })
        assert cfg.slide_angle_threshold == 15
        assert isinstance(cfg.slide_angle_threshold, int)
        assert cfg.zoom_height_factor == 0.05
        assert cfg.scroll_distance_factor == 0.02

    def test_blank_value_ignored(self):
        cfg = HandMovementConfig.from_env({"HANDMOTION_SLIDE_GATE_MIN": "  "})
        assert cfg.slide_gate_min == 80

    def test_invalid_value_names_variable(self):
        with pytest.raises(ValueError, match="HANDMOTION_SLIDE_FRAME_STRIDE"):
            HandMovementConfig.from_env({"HANDMOTION_SLIDE_FRAME_STRIDE": "two"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("HANDMOTION_SCROLL_DISTANCE_FACTOR", "0.1")
        assert HandMovementConfig.from_env().scroll_distance_factor == 0.1

    def test_base_config(self):
        base = HandMovementConfig(slide_angle_threshold=20)
        cfg = HandMovementConfig.from_env({"HANDMOTION_SLIDE_GATE_MAX": "95"}, base=base)
        assert cfg.slide_angle_threshold == 20
        assert cfg.slide_gate_max == 95

"""Tests for the analyzer SDK (Module, Observation, processing steps)."""

import pytest

from handmotion.sdk import (
    Capability,
    Module,
    ModuleCapabilities,
    Observation,
    ProcessingStep,
    get_processing_steps,
    processing_step,
)


class _EchoModule(Module):
    def __init__(self):
        self.events = []
        self._step_timings = None

    @property
    def name(self):
        return "test.echo"

    def initialize(self):
        self.events.append("init")

    def cleanup(self):
        self.events.append("cleanup")

    @processing_step("second", description="Runs after first", depends_on=["first"])
    def _second(self, value):
        return value + 1

    @processing_step("first", description="Runs first")
    def _first(self, value):
        return value * 2

    def process(self, frame, deps=None):
        return Observation(source=self.name, frame_id=0, t_ns=0, signals={"v": self._second(self._first(frame))})


class TestModule:
    def test_abstract_module_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Module()

    def test_context_manager_lifecycle(self):
        module = _EchoModule()
        with module as m:
            assert m is module
            assert module.events == ["init"]
        assert module.events == ["init", "cleanup"]

    def test_process_runs_steps(self):
        obs = _EchoModule().process(3)
        assert obs.signals["v"] == 7

    def test_default_capabilities(self):
        caps = _EchoModule().capabilities
        assert caps == ModuleCapabilities()
        assert caps.flags == Capability.NONE
        assert not caps.is_stateful


class TestProcessingSteps:
    def test_steps_sorted_by_dependency(self):
        steps = get_processing_steps(_EchoModule)
        assert [s.name for s in steps] == ["first", "second"]
        assert steps[1].depends_on == ["first"]
        assert steps[0].method_name == "_first"

    def test_instance_and_class_agree(self):
        assert get_processing_steps(_EchoModule()) == get_processing_steps(_EchoModule)

    def test_timing_only_when_enabled(self):
        module = _EchoModule()
        module._first(1)
        assert module._step_timings is None

        module._step_timings = {}
        module._first(1)
        assert set(module._step_timings) == {"first"}

    def test_timing_recorded_on_error(self):
        class Failing(_EchoModule):
            @processing_step("boom")
            def _boom(self):
                raise RuntimeError("boom")

        module = Failing()
        module._step_timings = {}
        with pytest.raises(RuntimeError):
            module._boom()
        assert "boom" in module._step_timings

    def test_inherited_steps_included(self):
        class Child(_EchoModule):
            @processing_step("third", depends_on=["second"])
            def _third(self, value):
                return value

        assert [s.name for s in get_processing_steps(Child)] == ["first", "second", "third"]

    def test_circular_dependency(self):
        class Cyclic(_EchoModule):
            @processing_step("a", depends_on=["b"])
            def _a(self):
                pass

            @processing_step("b", depends_on=["a"])
            def _b(self):
                pass

        with pytest.raises(ValueError, match="Circular"):
            get_processing_steps(Cyclic)

    def test_step_str(self):
        assert str(ProcessingStep(name="x", description="does x")) == "x: does x"

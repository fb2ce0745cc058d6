"""Processing step registry for analyzers.

Steps describe the internal data flow of an analyzer and record per-step
timing when the analyzer exposes a ``_step_timings`` dict.
"""

import time
from dataclasses import dataclass, field
from functools import wraps
from typing import List, Optional


@dataclass
class ProcessingStep:
    """Describes a single processing step within an analyzer.

    Attributes:
        name: Short identifier (e.g., "validation", "classification").
        description: What this step does.
        input_type: Description of input data type.
        output_type: Description of output data type.
        depends_on: Names of steps that must run before this one.
        method_name: Name of the method implementing this step.
    """

    name: str
    description: str
    input_type: str = "Any"
    output_type: str = "Any"
    depends_on: List[str] = field(default_factory=list)
    method_name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"


def processing_step(
    name: str,
    description: str = "",
    input_type: str = "Any",
    output_type: str = "Any",
    depends_on: Optional[List[str]] = None,
):
    """Register a method as a processing step.

    While ``self._step_timings`` is a dict, each call stores its elapsed time
    in milliseconds under the step name.

    Example:
        class HandMovementAnalyzer(Module):
            @processing_step(
                "classification",
                description="Scroll / zoom / slide decision",
                depends_on=["validation"],
            )
            def _classify(self, hand):
                return self._classifier.classify_detailed(hand)
    """

    def decorator(func):
        step_info = ProcessingStep(
            name=name,
            description=description or func.__doc__ or "",
            input_type=input_type,
            output_type=output_type,
            depends_on=depends_on or [],
            method_name=func.__name__,
        )

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            timings = getattr(self, "_step_timings", None)
            if timings is None:
                return func(self, *args, **kwargs)
            start = time.perf_counter_ns()
            try:
                return func(self, *args, **kwargs)
            finally:
                timings[name] = (time.perf_counter_ns() - start) / 1_000_000

        wrapper._step_info = step_info
        return wrapper

    return decorator


def get_processing_steps(cls_or_instance) -> List[ProcessingStep]:
    """Registered steps of an analyzer class or instance, in dependency order."""
    cls = cls_or_instance if isinstance(cls_or_instance, type) else type(cls_or_instance)
    steps = [
        attr._step_info
        for attr in vars(cls).values()
        if callable(attr) and hasattr(attr, "_step_info")
    ]
    for base in cls.__mro__[1:]:
        steps.extend(
            attr._step_info
            for attr in vars(base).values()
            if callable(attr) and hasattr(attr, "_step_info")
            and attr._step_info.name not in {s.name for s in steps}
        )
    return _topological_sort_steps(steps)


def _topological_sort_steps(steps: List[ProcessingStep]) -> List[ProcessingStep]:
    by_name = {s.name: s for s in steps}
    result: List[ProcessingStep] = []
    visited = set()
    in_progress = set()

    def visit(step: ProcessingStep):
        if step.name in visited:
            return
        if step.name in in_progress:
            raise ValueError(f"Circular dependency detected involving {step.name}")
        in_progress.add(step.name)
        for dep_name in step.depends_on:
            if dep_name in by_name:
                visit(by_name[dep_name])
        in_progress.discard(step.name)
        visited.add(step.name)
        result.append(step)

    for step in steps:
        visit(step)
    return result


__all__ = ["ProcessingStep", "processing_step", "get_processing_steps"]

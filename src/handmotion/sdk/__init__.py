"""Minimal analyzer SDK for plugging the classifier into a frame pipeline.

Owns the analyzer types (Module, Observation, ProcessingStep) and the
capability declarations modules publish about themselves.

Example:
    >>> from handmotion.sdk import Module, Observation, Capability, ModuleCapabilities
"""

from handmotion.sdk.capabilities import Capability, ModuleCapabilities
from handmotion.sdk.module import Module
from handmotion.sdk.observation import Observation
from handmotion.sdk.steps import ProcessingStep, processing_step, get_processing_steps

__all__ = [
    "Capability",
    "ModuleCapabilities",
    "Module",
    "Observation",
    "ProcessingStep",
    "processing_step",
    "get_processing_steps",
]

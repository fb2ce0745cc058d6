"""Module base class for frame analyzers."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from handmotion.sdk.capabilities import ModuleCapabilities
from handmotion.sdk.observation import Observation


class Module(ABC):
    """Base class for per-frame analyzers.

    Subclasses provide ``name`` and ``process()``; ``initialize()`` and
    ``cleanup()`` bracket the lifetime of a stream and are also invoked by
    the context manager protocol.

    Attributes:
        depends: Names of modules whose observations process() reads from deps.
    """

    depends: List[str] = []

    @property
    @abstractmethod
    def name(self) -> str:
        """Dot-notation module name (e.g. "hand.movement")."""

    @property
    def capabilities(self) -> ModuleCapabilities:
        return ModuleCapabilities()

    def initialize(self) -> None:
        """Acquire resources before the first frame."""

    def cleanup(self) -> None:
        """Release resources after the last frame."""

    @abstractmethod
    def process(
        self,
        frame,
        deps: Optional[Dict[str, Observation]] = None,
    ) -> Optional[Observation]:
        """Analyze one frame.

        Args:
            frame: Input frame.
            deps: Observations of upstream modules keyed by module name.

        Returns:
            Observation for this frame.
        """

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False

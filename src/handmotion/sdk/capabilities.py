"""Capability declarations for modules.

Example:
    >>> class HandMovementAnalyzer(Module):
    ...     @property
    ...     def capabilities(self) -> ModuleCapabilities:
    ...         return ModuleCapabilities(
    ...             flags=Capability.STATEFUL | Capability.DETERMINISTIC,
    ...         )
"""

from dataclasses import dataclass
from enum import Flag, auto


class Capability(Flag):
    """Capability flags for modules.

    Combine with bitwise OR: ``Capability.STATEFUL | Capability.DETERMINISTIC``.
    """

    NONE = 0
    STATEFUL = auto()          # Maintains state across frames
    DETERMINISTIC = auto()     # Same input sequence -> same output


@dataclass(frozen=True)
class ModuleCapabilities:
    """Declarative capability metadata for a module.

    Attributes:
        flags: Bitwise combination of Capability flags.
    """

    flags: Capability = Capability.NONE

    @property
    def is_stateful(self) -> bool:
        return bool(self.flags & Capability.STATEFUL)


__all__ = ["Capability", "ModuleCapabilities"]

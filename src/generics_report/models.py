from dataclasses import dataclass, field
from typing import Literal

ContextMode = Literal["stack", "overwrite"]

CONTEXT_MODES: tuple[str, ...] = ("stack", "overwrite")


@dataclass(slots=True, frozen=True)
class TypeParamEntry:
    """A generic type parameter and the trait bounds declared with it."""

    name: str
    bounds: tuple[str, ...]
    context: str


@dataclass(slots=True, frozen=True)
class LifetimeEntry:
    """A lifetime parameter, named without its leading sigil."""

    name: str
    context: str


@dataclass
class CollectedGenerics:
    """Entries gathered by one traversal, in collection order."""

    types: list[TypeParamEntry] = field(default_factory=list)
    lifetimes: list[LifetimeEntry] = field(default_factory=list)

    @property
    def distinct_lifetimes(self) -> int:
        return len({lt.name for lt in self.lifetimes})

    @property
    def contexts(self) -> int:
        """Return how many distinct context labels carry at least one entry."""
        labels = {t.context for t in self.types}
        labels.update(lt.context for lt in self.lifetimes)
        return len(labels)

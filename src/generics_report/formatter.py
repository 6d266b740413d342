from collections import defaultdict
from typing import Iterable

from .models import CollectedGenerics, LifetimeEntry, TypeParamEntry

TYPES_HEADER = "=== Generic Types ==="
LIFETIMES_HEADER = "=== Lifetimes ==="


def group_lifetimes(lifetimes: Iterable[LifetimeEntry]) -> dict[str, list[str]]:
    """
    Group lifetime contexts by lifetime name.

    The order in which distinct names are enumerated is unspecified and must
    not be relied on. Within a group, contexts keep collection order.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for lifetime in lifetimes:
        groups[lifetime.name].append(lifetime.context)
    return dict(groups)


def format_report(collected: CollectedGenerics) -> str:
    """Render the "Generic Types" and "Lifetimes" sections as one string."""
    out: list[str] = [f"\n{TYPES_HEADER}\n"]
    for entry in collected.types:
        out.append(_format_type(entry))

    out.append(f"\n{LIFETIMES_HEADER}\n")
    for name, contexts in group_lifetimes(collected.lifetimes).items():
        out.append(f"\nLifetime '{name}\n")
        out.append("  Used in:\n")
        out.extend(f"    - {context}\n" for context in contexts)

    return "".join(out)


def _format_type(entry: TypeParamEntry) -> str:
    text = f"\nIn {entry.context}:\n  Type: {entry.name}\n"
    if entry.bounds:
        text += "  Bounds:\n"
        text += "".join(f"    - {bound.strip()}\n" for bound in entry.bounds)
    return text

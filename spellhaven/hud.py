"""Text shown in the on-screen statistics panel."""

from __future__ import annotations

from typing import Iterable


def group_thousands(value: int) -> str:
    """Decimal digits of ``value`` grouped in threes from the right with apostrophes."""
    if value < 0:
        raise ValueError("value must not be negative")
    digits = str(value)
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return "'".join(groups)


def format_fps(fps: float) -> str:
    """Frames per second, rounded to a whole number."""
    return f"FPS: {fps:.0f}"


def format_triangles(counts: Iterable[int]) -> str:
    """Triangle counts per level of detail and their total."""
    values = list(counts)
    grouped = ", ".join(group_thousands(v) for v in values)
    return f"Triangles: {grouped}, Total: {sum(values)}"


def format_country_tasks(count: int) -> str:
    """Number of country caches being generated."""
    return f"Country Tasks: {count}"


def format_chunk_tasks(running: int, queued: int) -> str:
    """Running chunk tasks and those still waiting."""
    return f"Chunk Tasks: {running} + {queued}"
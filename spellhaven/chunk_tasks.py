"""Scheduling of chunk and country-cache generation work."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

Pos = Tuple[int, int]

MAX_RUNNING_TASKS = 5


@dataclass(frozen=True)
class ChunkTaskRequest:
    """A chunk waiting to be generated.

    ``parent_pos`` is the owning top-level chunk, ``lod_pos`` the position
    within it at ``lod``, ``height`` the vertical chunk index and ``owner``
    the entity the generated chunk is attached to.
    """

    parent_pos: Pos
    lod: int
    lod_pos: Pos
    height: int = 0
    owner: Optional[Hashable] = None


class GenerationState(Enum):
    """Marker for a country cache whose generation has started but not finished."""

    GENERATING = "generating"


@dataclass
class ChunkTriangles:
    """Triangle counts of generated chunks, one entry per level of detail."""

    max_lod: int
    counts: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.max_lod < 1:
            raise ValueError("max_lod must be at least 1")
        self.counts = [0] * self.max_lod

    def add(self, lod: int, triangles: int) -> None:
        """Record ``triangles`` more triangles drawn at ``lod``."""
        if not 1 <= lod <= self.max_lod:
            raise ValueError(f"level of detail {lod} outside 1..{self.max_lod}")
        if triangles < 0:
            raise ValueError("triangle count cannot be negative")
        self.counts[lod - 1] += triangles

    def total(self) -> int:
        """Triangles over all levels of detail."""
        return sum(self.counts)


def country_position(
    parent_pos: Sequence[int],
    country_size: float,
    chunk_size: float,
    max_lod_multiplier: float,
) -> Pos:
    """Country holding the top-level chunk at ``parent_pos``."""
    chunks_per_country = country_size / (max_lod_multiplier * chunk_size)
    x, y = parent_pos
    return (
        math.floor(x / chunks_per_country),
        math.floor(y / chunks_per_country),
    )


def chunk_name(pos: Sequence[int]) -> str:
    """Display name of a top-level chunk."""
    x, y = pos
    return f"Chunk [{x}, {y}]"


def subchunk_name(lod: Any, pos: Sequence[int], height: Optional[int] = None) -> str:
    """Display name of a chunk inside a quad tree, with its height once it has one."""
    x, y = pos
    if height is None:
        return f"SubChunk[lod: {lod}, pos:[{x}, {y}]]"
    return f"SubChunk[lod: {lod}, pos: [{x}, {y}], height: {height}]"


@dataclass
class ScheduleResult:
    """What one scheduling pass decided to start."""

    started: List[Tuple[ChunkTaskRequest, Any]] = field(default_factory=list)
    countries: List[Pos] = field(default_factory=list)


@dataclass
class TaskScheduler:
    """Starts chunk generation once the country cache it depends on is ready.

    ``caches`` maps a country position to ``GenerationState.GENERATING``
    while its cache is being built and to the finished cache afterwards.
    """

    country_size: float
    chunk_size: float
    max_lod_multiplier: float
    max_tasks: int = MAX_RUNNING_TASKS
    caches: Dict[Pos, Any] = field(default_factory=dict)

    def complete_country(self, pos: Pos, cache: Any) -> None:
        """Store the finished cache of a country."""
        self.caches[pos] = cache

    def schedule(self, requests: Iterable[ChunkTaskRequest], running: int) -> ScheduleResult:
        """Pick requests to start, finest detail first, up to ``max_tasks`` running.

        Countries whose cache is missing are requested once and marked as
        generating; requests in them wait for a later pass.
        """
        result = ScheduleResult()
        if running >= self.max_tasks:
            return result

        added = 0
        for request in sorted(requests, key=lambda r: r.lod):
            country = country_position(
                request.parent_pos,
                self.country_size,
                self.chunk_size,
                self.max_lod_multiplier,
            )
            state = self.caches.get(country)
            if country not in self.caches:
                self.caches[country] = GenerationState.GENERATING
                result.countries.append(country)
            elif state is not GenerationState.GENERATING:
                result.started.append((request, state))
                added += 1

            if running + added >= self.max_tasks:
                break
        return result
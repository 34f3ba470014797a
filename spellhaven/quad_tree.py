"""Level-of-detail quad trees that split terrain chunks near chunk loaders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import (
    Callable,
    Container,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from spellhaven.blocks import CHUNK_SIZE, VOXEL_SIZE

Entity = Hashable
Pos = Tuple[int, int]

FULL_LOD = 1


def lod_multiplier(lod: int) -> int:
    """Size of a chunk at ``lod`` measured in full-detail chunks along one axis."""
    return 2 ** (lod - 1)


@dataclass(frozen=True)
class ChunkLoader:
    """Something in the world that asks for detailed terrain around it.

    ``lod_range`` holds, for each step below the coarsest level, how many
    chunks around the loader are divided further.
    """

    translation: Tuple[float, float, float]
    lod_range: Tuple[int, ...]

    def chunk_position(self, lod: int) -> Pos:
        """Chunk column holding the loader at the given level of detail."""
        size = CHUNK_SIZE * VOXEL_SIZE * lod_multiplier(lod)
        x, _, z = self.translation
        return (math.floor(x / size), math.floor(z / size))


@dataclass
class Leaf:
    """A node drawn as chunks: entities keyed by chunk height."""

    children: Dict[int, Entity] = field(default_factory=dict)
    despawn: List[Entity] = field(default_factory=list)


@dataclass
class Branch:
    """A node split into four quadrants of the next finer level."""

    children: Tuple["Node", "Node", "Node", "Node"]
    despawn: List[Entity] = field(default_factory=list)
    counter: int = 0


Node = Union[Leaf, Branch]


def _quadrants(lod_pos: Pos) -> List[Pos]:
    x, y = lod_pos
    return [
        (x * 2, y * 2),
        (x * 2 + 1, y * 2),
        (x * 2, y * 2 + 1),
        (x * 2 + 1, y * 2 + 1),
    ]


def collect_entities(node: Node) -> List[Entity]:
    """Every entity a node and its descendants hold, chunks before pending despawns."""
    if isinstance(node, Leaf):
        return [*node.children.values(), *node.despawn]
    collected: List[Entity] = []
    for child in node.children:
        collected.extend(collect_entities(child))
    collected.extend(node.despawn)
    return collected


def filter_for_deletion(
    entities: Iterable[Entity],
    generated: Container[Entity],
    exists: Container[Entity],
    despawn: Callable[[Entity], None],
) -> List[Entity]:
    """Despawn live entities that never finished generating; return the rest.

    Generated chunks stay so they can be replaced once their successors are
    ready; entities that no longer exist are kept as well.
    """
    kept: List[Entity] = []
    for entity in entities:
        if entity in generated:
            kept.append(entity)
        elif entity in exists:
            despawn(entity)
        else:
            kept.append(entity)
    return kept


def _ignore(_entity: Entity) -> None:
    return None


@dataclass
class QuadTreeBuilder:
    """Builds and refines chunk quad trees against a set of loaders.

    ``spawn`` is called with the owner chunk position, the level of detail
    and the position within the owner, and returns the new chunk entity.
    """

    loaders: Sequence[ChunkLoader]
    spawn: Callable[[Pos, int, Pos], Entity]
    max_lod: int
    generated: Container[Entity] = frozenset()
    alive: Container[Entity] = frozenset()
    despawn: Callable[[Entity], None] = _ignore

    def _check_lod(self, lod: int) -> None:
        if not FULL_LOD <= lod <= self.max_lod:
            raise ValueError(f"level of detail {lod} outside 1..{self.max_lod}")

    def should_divide(self, lod: int, lod_pos: Pos, owner_pos: Pos) -> bool:
        """Whether a node at ``lod`` lies within range of any loader."""
        self._check_lod(lod)
        if lod == FULL_LOD:
            return False
        scale = 2 ** (self.max_lod - lod)
        current = (
            owner_pos[0] * scale + lod_pos[0],
            owner_pos[1] * scale + lod_pos[1],
        )
        for loader in self.loaders:
            lx, lz = loader.chunk_position(lod)
            reach = loader.lod_range[self.max_lod - lod]
            if abs(lx - current[0]) <= reach and abs(lz - current[1]) <= reach:
                return True
        return False

    def build(
        self,
        lod: int,
        lod_pos: Pos,
        owner_pos: Pos,
        despawn: Optional[List[Entity]] = None,
    ) -> Node:
        """Build a fresh tree, spawning one chunk entity for every leaf."""
        pending = list(despawn) if despawn is not None else []
        if self.should_divide(lod, lod_pos, owner_pos):
            children = tuple(
                self.build(lod - 1, quadrant, owner_pos, [])
                for quadrant in _quadrants(lod_pos)
            )
            return Branch(children, pending)  # type: ignore[arg-type]
        entity = self.spawn(owner_pos, lod, lod_pos)
        return Leaf({0: entity}, pending)

    def upgrade(self, node: Node, lod: int, lod_pos: Pos, owner_pos: Pos) -> Node:
        """Return a tree refined or merged to match the loaders' current positions."""
        divide = self.should_divide(lod, lod_pos, owner_pos)

        if isinstance(node, Leaf):
            if not divide:
                return Leaf(dict(node.children), list(node.despawn))
            entities = filter_for_deletion(
                [*node.children.values(), *node.despawn],
                self.generated,
                self.alive,
                self.despawn,
            )
            children = tuple(
                self.build(lod - 1, quadrant, owner_pos, [])
                for quadrant in _quadrants(lod_pos)
            )
            return Branch(children, entities)  # type: ignore[arg-type]

        if divide:
            children = tuple(
                self.upgrade(child, lod - 1, quadrant, owner_pos)
                for child, quadrant in zip(node.children, _quadrants(lod_pos))
            )
            return Branch(children, list(node.despawn), node.counter)  # type: ignore[arg-type]

        entities = filter_for_deletion(
            collect_entities(node), self.generated, self.alive, self.despawn
        )
        return self.build(lod, lod_pos, owner_pos, entities)
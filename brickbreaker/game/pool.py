"""Id-keyed entity pool.

Balls and power-ups live in pools instead of lists that get filtered
every tick. Each entity gets a monotonically increasing id; iteration
follows id order, so "first" is stable. Removal during iteration is
safe because `ids()` returns a snapshot.
"""

from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class EntityPool(Generic[T]):
    """Live entities keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._entities: Dict[int, T] = {}
        self._next_id = 0

    def add(self, entity: T) -> int:
        """Add an entity and return its id."""
        entity_id = self._next_id
        self._next_id += 1
        self._entities[entity_id] = entity
        return entity_id

    def get(self, entity_id: int) -> Optional[T]:
        return self._entities.get(entity_id)

    def replace(self, entity_id: int, entity: T) -> None:
        """Swap in an updated entity under an existing id."""
        if entity_id not in self._entities:
            raise KeyError(entity_id)
        self._entities[entity_id] = entity

    def remove(self, entity_id: int) -> Optional[T]:
        """Remove an entity; removing an unknown id is a no-op."""
        return self._entities.pop(entity_id, None)

    def ids(self) -> List[int]:
        """Snapshot of live ids in insertion order."""
        return list(self._entities)

    def items(self) -> List[Tuple[int, T]]:
        """Snapshot of (id, entity) pairs in insertion order."""
        return list(self._entities.items())

    def values(self) -> List[T]:
        """Snapshot of live entities in insertion order."""
        return list(self._entities.values())

    def first(self) -> Optional[Tuple[int, T]]:
        """Get the oldest live (id, entity), or None if empty."""
        for item in self._entities.items():
            return item
        return None

    def clear(self) -> None:
        """Remove all entities. Ids keep increasing."""
        self._entities.clear()

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

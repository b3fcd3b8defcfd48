import logging
from collections import Counter
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from rapidfuzz import process

from lod_pipeline.registry import conflict_policies
from lod_pipeline.slug import slugify
from lod_pipeline.types import Entity

logger = logging.getLogger(__name__)

EntityLike = Union[Entity, Mapping[str, Any]]


def url_for(collection: str, name: str, base_url: str = "") -> str:
    """Root-relative URL of an entity page: `<base_url>/<collection>/<slug>/`."""
    return f"{base_url or ''}/{collection}/{slugify(name)}/"


def entity_url(name: str, collection: str, site_url: str = "", base_url: str = "") -> str:
    """Absolute identifier of an entity: `<site_url><base_url>/<collection>/<slug>/`."""
    return f"{site_url or ''}{url_for(collection, name, base_url)}"


def _pair(item: EntityLike) -> Optional[Tuple[str, str]]:
    if isinstance(item, Entity):
        name, collection = item.name, item.collection
    else:
        name, collection = item.get("name"), item.get("collection")
    if not name or not collection:
        logger.warning(f"Skipping entity record without name or collection: {item!r}")
        return None
    return str(name), str(collection)


class EntityIndex(Mapping[str, str]):
    """
    Read-only lookup from entity name to collection.

    Built once per site build and shared by every page; nothing mutates it
    after construction.
    """

    def __init__(self, names: Mapping[str, str], conflicts: Iterable[str] = ()) -> None:
        self._names = MappingProxyType(dict(names))
        self._titles: List[str] = list(self._names)
        self.conflicts: Tuple[str, ...] = tuple(conflicts)

    @classmethod
    def build(
        cls,
        entities: Optional[Iterable[EntityLike]],
        policy: str = "first",
    ) -> "EntityIndex":
        """
        Build the index from dataset records in iteration order.

        Args:
            entities: Entity objects or raw `{name, collection, ...}` records
            policy: Name of the registered duplicate-name policy

        Returns:
            A new, immutable EntityIndex
        """
        pairs = [p for p in (_pair(e) for e in entities or ()) if p is not None]
        counts = Counter(name for name, _ in pairs)
        conflicts = [name for name, count in counts.items() if count > 1]
        resolver = conflict_policies.get(policy)()
        return cls(resolver.resolve(pairs), conflicts)

    def __getitem__(self, name: str) -> str:
        return self._names[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def resolve(self, name: str) -> Optional[str]:
        """Exact lookup of a name's collection; None when the name is unknown."""
        return self._names.get(name)

    def url(self, name: str, base_url: str = "") -> Optional[str]:
        collection = self.resolve(name)
        if collection is None:
            return None
        return url_for(collection, name, base_url)

    def suggest(self, name: str, limit: int = 3) -> List[str]:
        """Closest known names, for diagnostics only."""
        if not self._titles or not name:
            return []
        results = process.extract(name, self._titles, limit=limit)
        return [title for title, _, _ in results]

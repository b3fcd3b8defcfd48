from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Protocol

from lod_pipeline.types import Entity

EXTENSION_LOADERS = {
    ".json": "json",
    ".jsonl": "jsonl",
    ".yml": "yaml",
    ".yaml": "yaml",
}


class DatasetLoader(Protocol):
    """Loads dataset records from a path."""

    def load(self, path: str) -> Iterator[Dict[str, Any]]:
        ...


def loader_for_path(path: str) -> str:
    ext = Path(path).suffix.lower()
    try:
        return EXTENSION_LOADERS[ext]
    except KeyError as exc:
        raise ValueError(f"No dataset loader for '{ext}' files: {path}") from exc


def select(data: Any, key: Optional[str]) -> Any:
    """Walk a dotted key such as `site.people` into nested mappings."""
    if not key:
        return data
    for level in key.split("."):
        if not isinstance(data, Mapping) or level not in data:
            raise KeyError(f"Dataset has no '{level}' in '{key}'.")
        data = data[level]
    return data


def load_entities(records: Iterable[Mapping[str, Any]]) -> List[Entity]:
    entities: List[Entity] = []
    for record in records:
        entities.append(
            Entity(
                name=record.get("name"),
                collection=record.get("collection"),
                data={k: v for k, v in record.items() if k not in {"name", "collection"}},
            )
        )
    return entities

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import yaml

from lod_pipeline.loaders.base import select
from lod_pipeline.registry import loaders


def _records(data: Any, path: str) -> Iterator[Dict[str, Any]]:
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records in {path}, got {type(data).__name__}.")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Record {i} in {path} is not a mapping: {item!r}")
        yield item


@loaders.register("json")
class JSONLoader:
    """Loads a JSON array of records, optionally nested under `key`."""

    def __init__(self, key: Optional[str] = None) -> None:
        self.key = key

    def load(self, path: str) -> Iterator[Dict[str, Any]]:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        yield from _records(select(data, self.key), path)


@loaders.register("jsonl")
class JSONLLoader:
    """Loads JSONL where each line is one record."""

    def load(self, path: str) -> Iterator[Dict[str, Any]]:
        with Path(path).open(encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                item = json.loads(line)
                if not isinstance(item, dict):
                    raise ValueError(f"Line in {path} is not a JSON object: {line.strip()}")
                yield item


@loaders.register("yaml")
class YAMLLoader:
    """Loads a YAML data file, as kept in a site's `_data` directory."""

    def __init__(self, key: Optional[str] = None) -> None:
        self.key = key

    def load(self, path: str) -> Iterator[Dict[str, Any]]:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if data is None:
            return
        yield from _records(select(data, self.key), path)

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from lod_pipeline.markup import DEFAULT_PARSER
from lod_pipeline.types import DEFAULT_CONTEXT

DEFAULT_TYPE = "Thing"


@dataclass
class CollectionConfig:
    """Where a collection's pages go and what they describe."""

    name: str
    dir: Optional[str] = None
    template: Optional[str] = None
    type: str = DEFAULT_TYPE

    @property
    def output_dir(self) -> str:
        return self.dir or self.name

    @property
    def layout(self) -> str:
        return self.template or self.name


@dataclass
class SiteConfig:
    """Site-wide settings threaded into every filter."""

    site_url: str = ""
    base_url: str = ""
    context: str = DEFAULT_CONTEXT
    page_gen_dirs: bool = False
    collections: Dict[str, CollectionConfig] = field(default_factory=dict)
    conflict_policy: str = "first"
    parser: str = DEFAULT_PARSER

    def collection(self, name: str) -> Optional[CollectionConfig]:
        return self.collections.get(name)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SiteConfig":
        """
        Build a config from a mapping.

        Accepts both the snake_case keys of this class and the keys used in
        a Jekyll `_config.yml` (`url`, `baseurl`, `page_gen-dirs`, `data_types`).
        """

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        types = pick("collections", "data_types", default={})
        collections = {
            name: CollectionConfig(
                name=name,
                dir=(entry or {}).get("dir"),
                template=(entry or {}).get("template"),
                type=(entry or {}).get("type") or DEFAULT_TYPE,
            )
            for name, entry in types.items()
        }

        return SiteConfig(
            site_url=pick("site_url", "url", default=""),
            base_url=pick("base_url", "baseurl", default=""),
            context=pick("context", default=DEFAULT_CONTEXT),
            page_gen_dirs=pick("page_gen_dirs", "page_gen-dirs", default=False) is True,
            collections=collections,
            conflict_policy=pick("conflict_policy", default="first"),
            parser=pick("parser", default=DEFAULT_PARSER),
        )

    @staticmethod
    def from_file(path: str) -> "SiteConfig":
        """Load a JSON or YAML config file."""
        text = Path(path).read_text(encoding="utf-8")
        if Path(path).suffix.lower() in {".yml", ".yaml"}:
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping.")
        return SiteConfig.from_dict(data)

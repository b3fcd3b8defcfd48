from dataclasses import dataclass, field
from typing import Any, Dict, List

DEFAULT_CONTEXT = "http://schema.org/"


@dataclass
class Entity:
    """Named record belonging to a collection."""

    name: str
    collection: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Reference:
    """Resolved pointer to an entity, as read back from a rendered link."""

    url: str
    name: str
    collection: str

    def to_dict(self) -> Dict[str, str]:
        return {"url": self.url, "name": self.name, "collection": self.collection}


@dataclass
class Page:
    """Page handed to the JSON-LD builders."""

    content: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    url: str = ""
    context: str = DEFAULT_CONTEXT


@dataclass
class DataPage:
    """Output page generated from a single dataset record."""

    dir: str
    name: str
    url: str
    template: str
    record: Dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return f"{self.dir}/{self.name}"

    def to_page(self, content: str = "") -> Page:
        return Page(
            content=content,
            data=self.record.get("data", {}),
            url=self.url,
            context=self.record.get("@context", DEFAULT_CONTEXT),
        )


ParagraphReferenceMap = Dict[str, List[Reference]]

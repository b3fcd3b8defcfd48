"""
JSON-LD builders.

`build_page_graph` describes the entity a page is about, turning embedded
`{"name": ..., "collection": ...}` pairs into `@id` references, and adds a
WebPage node pointing at it. `build_mentions_graph` lists every entity
linked from a page's rendered content.
"""
import copy
import json
from typing import Any, Dict, List, Mapping

from lod_pipeline.index import entity_url
from lod_pipeline.markup import DEFAULT_PARSER, ENTITY_LINK_SELECTOR, parse
from lod_pipeline.types import Page

MENTIONS_CONTEXT = "http://schema.org"
WEB_PAGE_TYPE = "WebPage"


def _is_entity_pair(value: Any) -> bool:
    return isinstance(value, Mapping) and "name" in value and "collection" in value


def _identify(value: Mapping[str, Any], site_url: str, base_url: str) -> Dict[str, str]:
    return {"@id": entity_url(value["name"], value["collection"], site_url, base_url)}


def resolve_identifiers(data: Mapping[str, Any], site_url: str = "", base_url: str = "") -> Dict[str, Any]:
    """
    Copy of `data` with top-level name/collection pairs replaced by `@id`s.

    Lists are rewritten element by element; elements that are not pairs
    are kept as they are.
    """
    resolved = copy.deepcopy(dict(data))
    for key, value in resolved.items():
        if _is_entity_pair(value):
            resolved[key] = _identify(value, site_url, base_url)
        elif isinstance(value, list):
            converted = False
            items: List[Any] = []
            for item in value:
                if _is_entity_pair(item):
                    items.append(_identify(item, site_url, base_url))
                    converted = True
                else:
                    items.append(item)
            if converted:
                resolved[key] = items
    return resolved


def page_url(page: Page, site_url: str = "", base_url: str = "") -> str:
    return f"{site_url or ''}{base_url or ''}{page.url}"


def build_page_graph(page: Page, site_url: str = "", base_url: str = "") -> Dict[str, Any]:
    url = page_url(page, site_url, base_url)
    node = resolve_identifiers(page.data, site_url, base_url)
    node["@id"] = url
    web_page = {
        "@id": f"{url}index.html",
        "@type": WEB_PAGE_TYPE,
        "mainEntity": {"@id": url},
    }
    return {"@context": page.context, "@graph": [node, web_page]}


def build_mentions_graph(
    page: Page,
    site_url: str = "",
    base_url: str = "",
    parser: str = DEFAULT_PARSER,
) -> Dict[str, Any]:
    """Every entity link in the page content, in order; repeats are kept."""
    soup = parse(page.content, parser)
    mentions = []
    for link in soup.select(ENTITY_LINK_SELECTOR):
        href = link.get("href", "")
        if not href.startswith(("http://", "https://")):
            href = f"{site_url or ''}{href}"
        mentions.append({"@id": href})
    return {
        "@context": MENTIONS_CONTEXT,
        "@id": page_url(page, site_url, base_url),
        "mentions": mentions,
    }


def to_script(payload: Mapping[str, Any]) -> str:
    """Serialize JSON-LD inside a script element for embedding in a page."""
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    # A literal "</" would close the script element early
    text = text.replace("</", "<\\/")
    return f'<script type="application/ld+json">{text}</script>'

"""
Template filters for linked open data.

`LODFilters` bundles the operations a site template calls, bound to an
explicit site configuration and a prebuilt entity index:

    filters = LODFilters(config, index)
    filters.link_to("James", "James Minahan")
    filters.annotate_and_assign_ids(page.content)
    filters.page_graph(page)
"""
import logging
from typing import Any, Callable, Dict, Optional

from lod_pipeline.annotate import MentionAnnotator
from lod_pipeline.config import SiteConfig
from lod_pipeline.ids import assign_ids
from lod_pipeline.index import EntityIndex, entity_url
from lod_pipeline.jsonld import build_mentions_graph, build_page_graph, to_script
from lod_pipeline.links import render_link
from lod_pipeline.markup import is_document, parse, serialize
from lod_pipeline.pages import datapage_url
from lod_pipeline.references import paragraph_references, references_to_json
from lod_pipeline.slug import slugify
from lod_pipeline.types import Page

logger = logging.getLogger(__name__)


class LODFilters:
    """Filter functions bound to one site build."""

    def __init__(self, config: SiteConfig, index: EntityIndex) -> None:
        self.config = config
        self.index = index
        self.annotator = MentionAnnotator(index, base_url=config.base_url)

    def slug(self, text: str) -> str:
        return slugify(text)

    def link_to(self, display_text: str, name: Optional[str] = "") -> str:
        """
        Link `display_text` to the entity called `name`.

        An empty name means the display text is the entity name. Unknown
        names are reported and the text is returned unlinked.
        """
        name = name or display_text
        collection = self.index.resolve(name)
        if collection is None:
            suggestions = self.index.suggest(name)
            hint = f" (did you mean: {', '.join(suggestions)}?)" if suggestions else ""
            logger.warning(f"Not found: {name}{hint}")
            return display_text
        return render_link(display_text, name, collection, self.config.base_url)

    def entity_url(self, name: str, collection: str) -> str:
        return entity_url(name, collection, self.config.site_url, self.config.base_url)

    def datapage_url(self, name: str, dir: str) -> str:
        return datapage_url(name, dir, self.config.base_url, self.config.page_gen_dirs)

    def assign_ids(self, content: str) -> str:
        soup = parse(content, self.config.parser)
        assign_ids(soup)
        return serialize(soup, as_document=is_document(content))

    def annotate(self, content: str) -> str:
        soup = parse(content, self.config.parser)
        self.annotator.annotate(soup)
        return serialize(soup, as_document=is_document(content))

    def annotate_and_assign_ids(self, content: str) -> str:
        soup = parse(content, self.config.parser)
        assign_ids(soup)
        self.annotator.annotate(soup)
        return serialize(soup, as_document=is_document(content))

    def paragraph_references(self, markup: str) -> str:
        soup = parse(markup, self.config.parser)
        return references_to_json(paragraph_references(soup))

    def page_graph(self, page: Page) -> str:
        graph = build_page_graph(page, self.config.site_url, self.config.base_url)
        return to_script(graph)

    def mentions_graph(self, page: Page) -> str:
        graph = build_mentions_graph(
            page, self.config.site_url, self.config.base_url, parser=self.config.parser
        )
        return to_script(graph)

    def as_dict(self) -> Dict[str, Callable[..., Any]]:
        """Filters keyed by the names templates use, for registration with a template engine."""
        return {
            "slugify": self.slug,
            "lod_link": self.link_to,
            "lod_url": self.entity_url,
            "datapage_url": self.datapage_url,
            "lod_ids": self.assign_ids,
            "lod_labels": self.annotate,
            "lod_annotate": self.annotate_and_assign_ids,
            "lod_references": self.paragraph_references,
            "jsonldify": self.page_graph,
            "lod_mentions": self.mentions_graph,
        }

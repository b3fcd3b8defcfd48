"""
Paragraph reference extraction.

Produces JSON linking paragraphs (by position) with the entities linked
inside them, for client-side interface code, e.g.:

    {"para-0": [{"url": "/people/james-minahan/", "name": "James Minahan",
                 "collection": "people"}]}
"""
import json
from collections import OrderedDict
from typing import List

from bs4 import BeautifulSoup

from lod_pipeline.markup import ENTITY_LINK_SELECTOR
from lod_pipeline.types import ParagraphReferenceMap, Reference


def paragraph_references(soup: BeautifulSoup) -> ParagraphReferenceMap:
    references: ParagraphReferenceMap = OrderedDict()
    for index, para in enumerate(soup.find_all("p")):
        para_refs: List[Reference] = []
        for link in para.select(ENTITY_LINK_SELECTOR):
            entity = Reference(
                url=link.get("href", ""),
                name=link.get("data-name", ""),
                collection=link.get("data-collection", ""),
            )
            if entity not in para_refs:
                para_refs.append(entity)
        if para_refs:
            references[f"para-{index}"] = para_refs
    return references


def references_to_json(references: ParagraphReferenceMap) -> str:
    payload = {key: [ref.to_dict() for ref in refs] for key, refs in references.items()}
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

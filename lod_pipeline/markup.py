"""
Parsing and serialization helpers around BeautifulSoup.

Filters receive either whole documents or fragments of rendered content.
Fragments are serialized back as fragments so that templates can embed the
result where the original content was.
"""
import re

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

DEFAULT_PARSER = "lxml"

_DOCUMENT_MARKERS = re.compile(r"<!doctype|<html[\s>]|<body[\s>]", re.IGNORECASE)

ENTITY_LINK_SELECTOR = 'a[property="name"]'


class SourceOrderFormatter(HTMLFormatter):
    """Minimal entity escaping; attributes stay in the order they were set."""

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = SourceOrderFormatter()


def parse(content: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    return BeautifulSoup(content or "", parser)


def is_document(content: str) -> bool:
    return bool(_DOCUMENT_MARKERS.search(content or ""))


def _render(node) -> str:
    if isinstance(node, Tag):
        return node.decode(formatter=FORMATTER)
    return node.output_ready(FORMATTER)


def serialize(soup: BeautifulSoup, as_document: bool = True) -> str:
    """
    Render the tree; fragments come back without the html/head/body wrappers.

    lxml moves leading `<script>`, `<style>`, `<link>` and `<meta>` elements
    of a fragment into `<head>`, and may leave a leading comment outside
    `<html>`, so a fragment is every top-level node with the wrappers
    unpacked in place.
    """
    if as_document:
        return soup.decode(formatter=FORMATTER)
    parts = []
    for node in soup.contents:
        if isinstance(node, Tag) and node.name == "html":
            for child in node.contents:
                if isinstance(child, Tag) and child.name in ("head", "body"):
                    parts.append(child.decode_contents(formatter=FORMATTER))
                else:
                    parts.append(_render(child))
        else:
            parts.append(_render(node))
    return "".join(parts)

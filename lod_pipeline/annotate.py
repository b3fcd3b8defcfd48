"""
Mention annotation over paragraph text.

Known entity names found as plain text inside `<p>` elements are wrapped in
entity links. Matching is done on the text nodes of the parse tree, so
attribute values and markup are never touched, and text that already sits
inside a link is never visited again. This makes annotation idempotent.
"""
import logging
import re
from typing import Dict, List, Sequence, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from lod_pipeline.index import EntityIndex
from lod_pipeline.links import build_link
from lod_pipeline.markup import ENTITY_LINK_SELECTOR
from lod_pipeline.utils.spans import filter_spans

logger = logging.getLogger(__name__)


class MentionAnnotator:
    """Links entity names in paragraphs, longest names first."""

    def __init__(self, index: EntityIndex, base_url: str = "") -> None:
        self.index = index
        self.base_url = base_url or ""
        self._patterns: Dict[str, re.Pattern] = {}

    def _pattern(self, label: str) -> re.Pattern:
        pattern = self._patterns.get(label)
        if pattern is None:
            # Whole-word match; labels may start or end with punctuation
            pattern = re.compile(r"(?<!\w)" + re.escape(label) + r"(?!\w)")
            self._patterns[label] = pattern
        return pattern

    def collect_labels(self, paragraphs: Sequence[Tag]) -> Dict[str, str]:
        """
        Map every candidate label to the canonical name it links to.

        Labels are the names in the index plus the text of entity links
        already present in the paragraphs. An existing link decides what
        its label means on this page, so "James" linked to "James Minahan"
        once is linked the same way everywhere else in the content.
        """
        labels: Dict[str, str] = {name: name for name in self.index}
        page_labels: Dict[str, str] = {}
        for para in paragraphs:
            for link in para.select(ENTITY_LINK_SELECTOR):
                label = link.get_text()
                if not label:
                    continue
                page_labels.setdefault(label, link.get("data-name") or label)
        labels.update(page_labels)
        return labels

    def _resolvable(self, labels: Dict[str, str]) -> List[Tuple[str, str, str]]:
        resolved: List[Tuple[str, str, str]] = []
        for label, name in labels.items():
            collection = self.index.resolve(name)
            if collection is None:
                logger.debug(f"Not linking '{label}': no entity named '{name}'")
                continue
            resolved.append((label, name, collection))
        resolved.sort(key=lambda item: (-len(item[0]), item[0]))
        return resolved

    def _link_text(
        self,
        soup: BeautifulSoup,
        node: NavigableString,
        candidates: List[Tuple[str, str, str]],
    ) -> int:
        text = str(node)
        targets: Dict[str, Tuple[str, str]] = {}
        spans = []
        for label, name, collection in candidates:
            if label not in text:
                continue
            for match in self._pattern(label).finditer(text):
                spans.append((match.start(), match.end(), label))
                targets[label] = (name, collection)

        spans = filter_spans(spans)
        if not spans:
            return 0

        pieces = []
        position = 0
        for start, end, label in spans:
            if start > position:
                pieces.append(NavigableString(text[position:start]))
            name, collection = targets[label]
            pieces.append(build_link(soup, text[start:end], name, collection, self.base_url))
            position = end
        if position < len(text):
            pieces.append(NavigableString(text[position:]))

        node.replace_with(*pieces)
        return len(spans)

    def annotate(self, soup: BeautifulSoup) -> BeautifulSoup:
        """
        Wrap entity mentions in every paragraph of `soup`, in place.

        Args:
            soup: Parsed content

        Returns:
            The same tree, for chaining
        """
        paragraphs = soup.find_all("p")
        candidates = self._resolvable(self.collect_labels(paragraphs))
        if not candidates:
            return soup

        linked = 0
        for para in paragraphs:
            # Only plain text outside existing links; comments and CDATA are skipped
            nodes = [
                node
                for node in para.find_all(string=True)
                if type(node) is NavigableString and node.find_parent("a") is None
            ]
            for node in nodes:
                linked += self._link_text(soup, node, candidates)

        logger.debug(f"Linked {linked} mentions in {len(paragraphs)} paragraphs")
        return soup

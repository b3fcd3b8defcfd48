"""
Policies for entity names that appear more than once in the dataset.

A policy receives the ordered list of (name, collection) pairs and returns
the name -> collection mapping the index should hold.
"""
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Tuple

from lod_pipeline.registry import conflict_policies

logger = logging.getLogger(__name__)


class DuplicateEntityError(ValueError):
    """Raised when a name maps to more than one record and duplicates are not allowed."""


def _group(pairs: Iterable[Tuple[str, str]]) -> "OrderedDict[str, List[str]]":
    grouped: "OrderedDict[str, List[str]]" = OrderedDict()
    for name, collection in pairs:
        grouped.setdefault(name, []).append(collection)
    return grouped


@conflict_policies.register("first")
class FirstSeenPolicy:
    """Keeps the first record seen for a name and warns about the rest."""

    def resolve(self, pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
        resolved: Dict[str, str] = {}
        for name, collections in _group(pairs).items():
            if len(collections) > 1:
                logger.warning(
                    f"Ambiguous entity name '{name}' found in collections "
                    f"{collections}; using '{collections[0]}'"
                )
            resolved[name] = collections[0]
        return resolved


@conflict_policies.register("error")
class StrictPolicy:
    """Refuses to build an index containing duplicate names."""

    def resolve(self, pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
        grouped = _group(pairs)
        duplicates = {name: cols for name, cols in grouped.items() if len(cols) > 1}
        if duplicates:
            listing = ", ".join(f"'{name}' ({', '.join(cols)})" for name, cols in duplicates.items())
            raise DuplicateEntityError(f"Duplicate entity names: {listing}")
        return {name: cols[0] for name, cols in grouped.items()}


@conflict_policies.register("drop")
class DropAmbiguousPolicy:
    """Leaves ambiguous names out of the index so they are never linked."""

    def resolve(self, pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
        resolved: Dict[str, str] = {}
        for name, collections in _group(pairs).items():
            if len(collections) > 1:
                logger.warning(
                    f"Dropping ambiguous entity name '{name}' found in collections {collections}"
                )
                continue
            resolved[name] = collections[0]
        return resolved

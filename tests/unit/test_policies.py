"""Unit tests for duplicate-name policies."""

import logging

import pytest

from lod_pipeline.index import EntityIndex
from lod_pipeline.policies import DuplicateEntityError
from lod_pipeline.registry import conflict_policies

DUPLICATES = [
    {"name": "Victoria", "collection": "places"},
    {"name": "Melbourne", "collection": "places"},
    {"name": "Victoria", "collection": "people"},
]


class TestConflictPolicies:
    """Tests for the registered conflict policies."""

    def test_registered_policies(self):
        assert {"first", "error", "drop"} <= set(conflict_policies.available())

    def test_first_keeps_first_collection(self):
        index = EntityIndex.build(DUPLICATES, policy="first")
        assert index.resolve("Victoria") == "places"
        assert index.resolve("Melbourne") == "places"

    def test_error_raises(self):
        with pytest.raises(DuplicateEntityError) as exc_info:
            EntityIndex.build(DUPLICATES, policy="error")
        assert "Victoria" in str(exc_info.value)

    def test_error_is_value_error(self):
        assert issubclass(DuplicateEntityError, ValueError)

    def test_error_without_duplicates(self):
        index = EntityIndex.build(DUPLICATES[:2], policy="error")
        assert len(index) == 2

    def test_drop_removes_ambiguous_names(self, caplog):
        with caplog.at_level(logging.WARNING):
            index = EntityIndex.build(DUPLICATES, policy="drop")
        assert index.resolve("Victoria") is None
        assert index.resolve("Melbourne") == "places"
        assert "Dropping" in caplog.text

    def test_conflicts_reported_for_every_policy(self):
        for policy in ("first", "drop"):
            assert EntityIndex.build(DUPLICATES, policy=policy).conflicts == ("Victoria",)

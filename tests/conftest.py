"""Shared fixtures for LOD pipeline tests."""

import json
import os
import tempfile
from typing import Dict, Iterator, List

import pytest

from lod_pipeline.config import SiteConfig
from lod_pipeline.filters import LODFilters
from lod_pipeline.index import EntityIndex
from lod_pipeline.types import Entity, Page


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_records() -> List[Dict]:
    """Dataset records as they appear in a site's data file."""
    return [
        {
            "name": "James Minahan",
            "collection": "people",
            "data": {"birthDate": "1875", "knows": {"name": "Kate Minahan", "collection": "people"}},
        },
        {"name": "Kate Minahan", "collection": "people", "data": {}},
        {"name": "James", "collection": "people", "data": {}},
        {"name": "Melbourne", "collection": "places", "data": {}},
        {"name": "Victoria Police", "collection": "organisations", "data": {}},
    ]


@pytest.fixture
def sample_entities(sample_records: List[Dict]) -> List[Entity]:
    return [Entity(name=r["name"], collection=r["collection"], data=r["data"]) for r in sample_records]


@pytest.fixture
def index(sample_entities: List[Entity]) -> EntityIndex:
    return EntityIndex.build(sample_entities)


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig.from_dict(
        {
            "url": "http://example.org",
            "baseurl": "/ed",
            "page_gen-dirs": True,
            "data_types": {
                "people": {"dir": "people", "template": "person", "type": "Person"},
                "places": {"dir": "places", "template": "place", "type": "Place"},
            },
        }
    )


@pytest.fixture
def filters(site_config: SiteConfig, index: EntityIndex) -> LODFilters:
    return LODFilters(site_config, index)


@pytest.fixture
def bare_filters(index: EntityIndex) -> LODFilters:
    """Filters with no site or base URL configured."""
    return LODFilters(SiteConfig(), index)


@pytest.fixture
def sample_page() -> Page:
    return Page(
        content="<p>James Minahan arrived in Melbourne.</p>",
        data={
            "@type": "Person",
            "name": "Kate Minahan",
            "spouse": {"name": "James Minahan", "collection": "people"},
            "homeLocation": [{"name": "Melbourne", "collection": "places"}, "Fitzroy"],
        },
        url="/people/kate-minahan/",
    )


# ---------------------------------------------------------------------------
# Temporary file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def temp_dataset_json(sample_records: List[Dict]) -> Iterator[str]:
    """Create a temporary JSON dataset file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(sample_records, f)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_html_file() -> Iterator[str]:
    """Create a temporary rendered page."""
    content = (
        "<h1>Arrival</h1>\n"
        "<p>James Minahan arrived in Melbourne.</p>\n"
        "<blockquote><p>Kate Minahan wrote to James.</p></blockquote>\n"
    )
    with tempfile.NamedTemporaryFile(mode="w", suffix=".html", delete=False) as f:
        f.write(content)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_output_dir() -> Iterator[str]:
    """Create a temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def temp_config_file() -> Iterator[str]:
    """Temporary YAML site config for CLI testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
        f.write("url: http://example.org\nbaseurl: /ed\n")
        path = f.name
    yield path
    os.unlink(path)

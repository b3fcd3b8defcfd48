"""
Data page generation.

One output page is generated per dataset record. The record's collection
decides the output directory, the template and the schema.org type given
to the record's data for JSON-LD.
"""
import copy
import logging
from typing import Any, Dict, Iterable, Iterator, Mapping

from lod_pipeline.config import CollectionConfig, SiteConfig
from lod_pipeline.slug import slugify
from lod_pipeline.types import DataPage

logger = logging.getLogger(__name__)


def datapage_url(name: str, dir: str, base_url: str = "", index_files: bool = False) -> str:
    """
    Link to a generated data page.

    Does not know about custom extensions: pages generated with another
    extension need their links written by hand.
    """
    if index_files:
        return f"{base_url or ''}/{dir}/{slugify(name)}/index.html"
    return f"{base_url or ''}/{dir}/{slugify(name)}.html"


def _collection_config(config: SiteConfig, collection: str) -> CollectionConfig:
    found = config.collection(collection)
    if found is None:
        logger.warning(f"No settings for collection '{collection}', using defaults")
        found = CollectionConfig(name=collection)
    return found


def prepare_record(record: Mapping[str, Any], config: SiteConfig, types: CollectionConfig) -> Dict[str, Any]:
    """Copy of `record` carrying the JSON-LD context, type and name."""
    prepared = copy.deepcopy(dict(record))
    data = prepared.get("data")
    if data is None:
        data = prepared["data"] = {}
    elif not isinstance(data, dict):
        raise TypeError(f"Record '{record.get('name')}' has non-mapping data: {data!r}")
    prepared["@context"] = config.context
    data["@type"] = types.type
    data["name"] = prepared["name"]
    return prepared


def build_data_page(
    record: Mapping[str, Any],
    config: SiteConfig,
    name_key: str = "name",
    extension: str = "html",
) -> DataPage:
    collection = record.get("collection")
    if not collection:
        raise ValueError(f"Record without collection: {record!r}")
    if not record.get(name_key):
        raise ValueError(f"Record without '{name_key}': {record!r}")

    types = _collection_config(config, collection)
    prepared = prepare_record(record, config, types)
    prepared["title"] = prepared[name_key]
    filename = slugify(prepared[name_key])

    if config.page_gen_dirs:
        out_dir = f"{types.output_dir}/{filename}"
        out_name = f"index.{extension}"
        url = f"/{out_dir}/"
    else:
        out_dir = types.output_dir
        out_name = f"{filename}.{extension}"
        url = f"/{out_dir}/{out_name}"

    return DataPage(dir=out_dir, name=out_name, url=url, template=types.layout, record=prepared)


def generate_pages(
    records: Iterable[Mapping[str, Any]],
    config: SiteConfig,
    name_key: str = "name",
    extension: str = "html",
) -> Iterator[DataPage]:
    for record in records:
        yield build_data_page(record, config, name_key=name_key, extension=extension)

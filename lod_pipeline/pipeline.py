import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from lod_pipeline.config import SiteConfig
from lod_pipeline.filters import LODFilters
from lod_pipeline.index import EntityIndex
from lod_pipeline.loaders import DatasetLoader, load_entities, loader_for_path
from lod_pipeline.registry import loaders
from lod_pipeline.types import Page

logger = logging.getLogger(__name__)


class LODPipeline:
    """Runs entity annotation over rendered pages, one page at a time."""

    def __init__(self, config: SiteConfig, index: EntityIndex) -> None:
        self.config = config
        self.index = index
        self.filters = LODFilters(config, index)

    @classmethod
    def from_dataset(
        cls,
        config: SiteConfig,
        dataset_path: str,
        loader: Optional[str] = None,
        loader_params: Optional[Dict[str, Any]] = None,
    ) -> "LODPipeline":
        loader_factory = loaders.get(loader or loader_for_path(dataset_path))
        dataset_loader: DatasetLoader = loader_factory(**(loader_params or {}))
        records = list(dataset_loader.load(dataset_path))
        index = EntityIndex.build(load_entities(records), policy=config.conflict_policy)
        logger.info(f"Indexed {len(index)} entities from {dataset_path}")
        return cls(config, index)

    def process_document(self, content: str, url: str = "") -> Dict[str, Any]:
        annotated = self.filters.annotate_and_assign_ids(content)
        page = Page(content=annotated, url=url, context=self.config.context)
        return {
            "url": url,
            "content": annotated,
            "references": self.filters.paragraph_references(annotated),
            "mentions": self.filters.mentions_graph(page),
        }

    def run(
        self,
        paths: Iterable[str],
        output_dir: str,
        write_references: bool = False,
        write_mentions: bool = False,
    ) -> List[Dict[str, Any]]:
        paths = list(paths)
        # Outputs are named after the input file, so names must not repeat
        clashes = sorted(name for name, count in Counter(Path(p).name for p in paths).items() if count > 1)
        if clashes:
            raise ValueError(f"Input files share output names: {', '.join(clashes)}")

        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        results: List[Dict[str, Any]] = []

        for path in paths:
            source = Path(path)
            result = self.process_document(
                source.read_text(encoding="utf-8"), url=f"/{source.stem}/"
            )
            content = result["content"]
            if write_mentions:
                content = f"{content}\n{result['mentions']}\n"
            (out / source.name).write_text(content, encoding="utf-8")
            if write_references:
                refs_path = out / f"{source.stem}.references.json"
                refs_path.write_text(result["references"], encoding="utf-8")
            logger.info(f"Annotated {path} -> {out / source.name}")
            results.append(result)

        return results


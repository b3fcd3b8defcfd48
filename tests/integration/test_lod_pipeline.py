"""Integration tests for the LOD pipeline."""

import json
from pathlib import Path

import pytest

from lod_pipeline.config import SiteConfig
from lod_pipeline.pipeline import LODPipeline


@pytest.mark.integration
class TestPipelineIntegration:
    """End-to-end pipeline tests over dataset and HTML files."""

    @pytest.fixture
    def pipeline(self, site_config: SiteConfig, temp_dataset_json: str) -> LODPipeline:
        return LODPipeline.from_dataset(site_config, temp_dataset_json)

    def test_index_built_from_dataset(self, pipeline: LODPipeline):
        assert len(pipeline.index) == 5
        assert pipeline.index.resolve("Melbourne") == "places"

    def test_process_document(self, pipeline: LODPipeline):
        result = pipeline.process_document("<p>Kate Minahan left Melbourne.</p>", url="/stories/a/")
        assert 'id="para-0"' in result["content"]
        refs = json.loads(result["references"])
        assert [r["name"] for r in refs["para-0"]] == ["Kate Minahan", "Melbourne"]
        assert "http://example.org/ed/stories/a/" in result["mentions"]

    def test_run_writes_outputs(self, pipeline: LODPipeline, temp_html_file: str, temp_output_dir: str):
        results = pipeline.run(
            [temp_html_file], temp_output_dir, write_references=True, write_mentions=True
        )
        assert len(results) == 1
        name = Path(temp_html_file).name
        output = (Path(temp_output_dir) / name).read_text(encoding="utf-8")
        assert 'data-name="James Minahan"' in output
        assert 'id="quote-0"' in output
        assert "application/ld+json" in output

        refs_path = Path(temp_output_dir) / f"{Path(temp_html_file).stem}.references.json"
        refs = json.loads(refs_path.read_text(encoding="utf-8"))
        assert list(refs) == ["para-0", "para-1"]
        assert [r["name"] for r in refs["para-1"]] == ["Kate Minahan", "James"]

    def test_strict_policy_rejects_duplicates(self, temp_dataset_json: str, sample_records):
        records = sample_records + [{"name": "Melbourne", "collection": "people"}]
        Path(temp_dataset_json).write_text(json.dumps(records), encoding="utf-8")
        with pytest.raises(ValueError):
            LODPipeline.from_dataset(SiteConfig(conflict_policy="error"), temp_dataset_json)

    def test_run_rejects_repeated_file_names(self, pipeline: LODPipeline, temp_output_dir: str, tmp_path: Path):
        first = tmp_path / "a" / "index.html"
        second = tmp_path / "b" / "index.html"
        for path in (first, second):
            path.parent.mkdir()
            path.write_text("<p>Melbourne</p>", encoding="utf-8")
        with pytest.raises(ValueError, match="index.html"):
            pipeline.run([str(first), str(second)], temp_output_dir)
        assert list(Path(temp_output_dir).iterdir()) == []

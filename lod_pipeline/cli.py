import argparse
import json
import logging

from lod_pipeline.config import SiteConfig
from lod_pipeline.pipeline import LODPipeline


def main():
    parser = argparse.ArgumentParser(description="Link entity mentions in rendered HTML pages.")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to site config (JSON or YAML).",
    )
    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Path to the entity dataset (JSON, JSONL or YAML).",
    )
    parser.add_argument(
        "--loader",
        type=str,
        help="Dataset loader name; chosen from the file extension by default.",
    )
    parser.add_argument(
        "--loader-params",
        type=json.loads,
        default=None,
        help='JSON object of loader parameters, e.g. \'{"key": "data"}\'.',
    )
    parser.add_argument(
        "--input",
        type=str,
        nargs="+",
        required=True,
        help="HTML files to annotate.",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        required=True,
        help="Directory for annotated files.",
    )
    parser.add_argument(
        "--references",
        action="store_true",
        help="Also write <name>.references.json per input file.",
    )
    parser.add_argument(
        "--mentions",
        action="store_true",
        help="Append a JSON-LD mentions script to each output file.",
    )
    parser.add_argument(
        "--log",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log, format="%(asctime)s - %(levelname)s - %(message)s")

    config = SiteConfig.from_file(args.config) if args.config else SiteConfig()
    pipeline = LODPipeline.from_dataset(
        config, args.data, loader=args.loader, loader_params=args.loader_params
    )
    pipeline.run(
        args.input,
        args.output_dir,
        write_references=args.references,
        write_mentions=args.mentions,
    )


if __name__ == "__main__":
    main()

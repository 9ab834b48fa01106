"""
Synthetic metric table generator.

Writes the synthetic metric table for the configured area catalog to a file
that METRICS_PATH accepts, so a fixed table can be shipped or edited by hand.

Usage:
    python scripts/generate_metrics.py --output data/processed/metrics.json
    python scripts/generate_metrics.py --format csv --seed 7
"""
import argparse
import json
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.services.area_catalog import load_area_catalog
from app.services.metric_repository import generate_synthetic_metrics

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a synthetic metric table")
    parser.add_argument("--geojson", default=settings.GEOJSON_PATH, help="Area catalog GeoJSON")
    parser.add_argument("--output", default=None, help="Output path (default data/processed/metrics.<format>)")
    parser.add_argument("--format", choices=["json", "csv"], default="json")
    parser.add_argument("--seed", type=int, default=settings.SYNTHETIC_SEED, help="Base seed")
    parser.add_argument("--random", action="store_true", default=settings.SYNTHETIC_RANDOM,
                        help="Ignore the seed (non-reproducible)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    output = args.output or os.path.join("data", "processed", f"metrics.{args.format}")

    catalog = load_area_catalog(
        settings.resolve_path(args.geojson),
        id_property=settings.AREA_ID_PROPERTY,
        name_property=settings.AREA_NAME_PROPERTY,
    )
    seed = None if args.random else args.seed
    repository = generate_synthetic_metrics(catalog.areas, seed=seed)

    os.makedirs(os.path.dirname(output) or ".", exist_ok=True)
    if args.format == "csv":
        repository.to_dataframe().to_csv(output, index=False)
    else:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(repository.to_dict(), f)

    logger.info(f"✅ Wrote metrics for {len(repository)} areas to {output}")
    return output


if __name__ == "__main__":
    main()

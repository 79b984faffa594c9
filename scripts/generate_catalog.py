#!/usr/bin/env python3
"""Generate catalog script.

Generates a synthetic product catalog, prints its facet counts and
optionally writes the catalog to a JSON file.

Usage:
    python scripts/generate_catalog.py --count 1000
    python scripts/generate_catalog.py --count 500 --seed 42 --mode small
    python scripts/generate_catalog.py --count 100 --output catalog.json
"""

import argparse
import json
from pathlib import Path

from storefront.catalog.facets import build_facets
from storefront.catalog.generator import GeneratorConfig, ProductGenerator
from storefront.infrastructure.logging import configure_logging


def print_buckets(title: str, buckets: list) -> None:
    """Print one facet dimension.

    Args:
        title: Section title.
        buckets: Facet buckets to print.
    """
    print(f"{title}:")
    for bucket in buckets:
        print(f"  {bucket.label:<20} {bucket.count:>8}")
    print()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic product catalog",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1000,
        help="Number of products to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible content",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Product size: small (few nested records) or full",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the catalog as JSON to this file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.mode == "full":
        config = GeneratorConfig.full(seed=args.seed)
    else:
        config = GeneratorConfig.small(seed=args.seed)

    print("=" * 60)
    print("Storefront Catalog Generator")
    print("=" * 60)
    print(f"Count: {args.count}")
    print(f"Mode: {args.mode}")
    print(f"Seed: {args.seed}")
    print()

    products = ProductGenerator(config).generate(args.count)
    facets = build_facets(products)

    print_buckets("Categories", facets.categories)
    print_buckets("Brands", facets.brands)
    print_buckets("Price ranges", facets.price_ranges)
    print_buckets("Ratings", facets.ratings)

    if args.output is not None:
        args.output.write_text(
            json.dumps([p.to_dict() for p in products], indent=2),
            encoding="utf-8",
        )
        print(f"Wrote {len(products)} products to {args.output}")

    print("=" * 60)
    print("Generation complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

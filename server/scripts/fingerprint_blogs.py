#!/usr/bin/env python3
"""
Blog Fingerprint Backfill

Computes keyword fingerprints for every blog in a JSON file so the server can
load them without recomputing at startup. Blogs that already carry a
fingerprint are left alone unless --force is given.

Usage:
    # Fill in missing fingerprints in place
    python -m server.scripts.fingerprint_blogs data/blogs.json

    # Recompute all fingerprints into a new file
    python -m server.scripts.fingerprint_blogs data/blogs.json --force -o data/blogs.fp.json

    # Show what would change
    python -m server.scripts.fingerprint_blogs data/blogs.json --dry-run
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from recommender import DEFAULT_CONFIG, STRATEGY_VERSION, RankingConfig, build_fingerprint

logger = logging.getLogger(__name__)


def fingerprint_blogs(
    blogs: List[Dict],
    force: bool = False,
    config: RankingConfig = DEFAULT_CONFIG,
) -> int:
    """
    Set blog["fingerprint"] on each blog dict in place.

    Returns the number of blogs (re)fingerprinted. A blog whose fingerprint
    cannot be built is logged and skipped.
    """
    updated = 0
    for blog in blogs:
        if blog.get("fingerprint") and not force:
            continue
        try:
            blog["fingerprint"] = build_fingerprint(
                blog.get("content") or "", blog.get("tags") or [], config
            )
        except Exception:
            logger.warning("[fingerprint] BACKFILL_FAILED blog_id=%s", blog.get("id"), exc_info=True)
            continue
        updated += 1
    return updated


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compute blog fingerprints in a JSON file")
    parser.add_argument("input", type=Path, help="Blogs JSON ({'blogs': [...]} or a list)")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: overwrite input)")
    parser.add_argument("--force", action="store_true", help="Recompute existing fingerprints")
    parser.add_argument("--dry-run", action="store_true", help="Report counts without writing")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.input.is_file():
        logger.error("[fingerprint] INPUT_NOT_FOUND path=%s", args.input)
        return 1
    with open(args.input) as f:
        data = json.load(f)
    blogs = data.get("blogs", []) if isinstance(data, dict) else data

    updated = fingerprint_blogs(blogs, force=args.force)
    logger.info(
        "[fingerprint] BACKFILL_DONE blogs=%s updated=%s strategy=%s",
        len(blogs),
        updated,
        STRATEGY_VERSION,
    )
    if args.dry_run:
        return 0

    output = args.output or args.input
    with open(output, "w") as f:
        json.dump(data, f, indent=2)
    return 0


if __name__ == "__main__":
    sys.exit(main())

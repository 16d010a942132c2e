#!/usr/bin/env python3
"""
Dictionary Downloader for cedict-lite.

This script fetches the latest CC-CEDICT export from MDBG, validates it
by parsing it, and saves it under its canonical name, e.g.
cedict_1_0_ts_utf-8_mdbg.txt.gz

Usage:
    python scripts/download_dictionary.py [--output DIR] [--url URL]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cedict_lite.codec import describe
from cedict_lite.constants import DOWNLOAD_TIMEOUT, URL
from cedict_lite.dictionary import Dictionary
from cedict_lite.errors import CedictError

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_OUTPUT_DIR = Path(__file__).parent.parent / "data"


# ============================================================================
# Main
# ============================================================================

def download_dictionary(output_dir: Path, url: str, timeout: float) -> Path:
    """Download, parse and save the dictionary. Returns the saved path."""
    d = Dictionary.download(url, timeout)
    logger.info(f"Parsed {describe(d.metadata())}")

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / d.default_filename()
    d.save(output_path)

    file_size = output_path.stat().st_size / (1024 * 1024)
    logger.info(f"Saved dictionary to {output_path} ({file_size:.1f} MB)")
    return output_path


def main():
    parser = argparse.ArgumentParser(description="Download the CC-CEDICT dictionary")
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory to save into",
    )
    parser.add_argument(
        "--url",
        default=URL,
        help="Archive URL",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DOWNLOAD_TIMEOUT,
        help="Download timeout in seconds",
    )
    args = parser.parse_args()

    start = time.time()
    try:
        download_dictionary(args.output, args.url, args.timeout)
    except CedictError as e:
        logger.error(f"Download failed: {e}")
        sys.exit(1)

    elapsed = time.time() - start
    logger.info(f"Download completed in {elapsed:.1f} seconds")


if __name__ == "__main__":
    main()

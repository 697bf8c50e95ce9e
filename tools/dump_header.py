#!/usr/bin/env python3
"""
Data file header dump tool.

Prints the decoded header of one or more LiteCoreDB data files.
"""

import argparse
import sys

from litecore.header import HEADER_SIZE, HeaderError, parse_header


def main() -> int:
    """Main entry point for litecore-header tool."""
    parser = argparse.ArgumentParser(description="Dump LiteCoreDB data file headers")
    parser.add_argument("files", nargs="+", help="Data files to inspect")
    parser.add_argument("--hex", action="store_true", help="Also print raw header bytes")

    args = parser.parse_args()

    status = 0
    for path in args.files:
        try:
            with open(path, "rb") as f:
                data = f.read(HEADER_SIZE)
        except OSError as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            status = 1
            continue

        try:
            hdr = parse_header(data)
        except HeaderError as e:
            print(f"{path}: {e} ({len(data)} bytes)")
            status = 1
            continue

        state = "valid" if hdr.is_valid else "INVALID"
        print(f"{path}: magic={hdr.magic!r} page_size={hdr.page_size} [{state}]")
        if args.hex:
            print(f"  {data.hex()}")
        if not hdr.is_valid:
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Print the access profiles of a sector and the access bytes they produce.

Usage:
    python -m mifare_access.demo
    python -m mifare_access.demo --block0 KEYAB_KEYB_KEYB_KEYAB --trailer NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB
"""

import argparse
import sys

from mifare_access.rfid.conditions import (
    DataBlockProfile, TrailerProfile,
    DEFAULT_DATA_BLOCK_PROFILE, DEFAULT_TRAILER_PROFILE,
)
from mifare_access.rfid.access_bits import SectorAccessConfig
from mifare_access.rfid.descriptions import describe_data_block, describe_trailer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mifare-access",
        description="Compute the access bits of a MIFARE Classic sector.",
    )
    block_choices = [p.value for p in DataBlockProfile]
    for name in ("block0", "block1", "block2"):
        parser.add_argument(f"--{name}", choices=block_choices,
                            default=DEFAULT_DATA_BLOCK_PROFILE.value)
    parser.add_argument("--trailer", choices=[p.value for p in TrailerProfile],
                        default=DEFAULT_TRAILER_PROFILE.value)
    return parser


def render(config: SectorAccessConfig) -> str:
    lines = [
        f"Block 0.: {describe_data_block(config.block0)}",
        f"Block 1.: {describe_data_block(config.block1)}",
        f"Block 2.: {describe_data_block(config.block2)}",
        f"Trailer.: {describe_trailer(config.trailer)}",
    ]
    lines.extend(f"{b:02x}" for b in config.value())
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = SectorAccessConfig(args.block0, args.block1, args.block2, args.trailer)
    print(render(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())

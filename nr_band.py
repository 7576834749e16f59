#!/usr/bin/env -S uv run
# -*- mode: python; -*-
# vim: set ft=python:
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pyyaml",
# ]
# ///
"""nr_band.py - Identify 5G NR band from NR-ARFCN

Modems report the downlink NR-ARFCN of the serving cell, not the band. Many
NR bands overlap, so the same ARFCN can belong to several bands:

  ARFCN 630000 -> n77 (3700) and n78 (3500), n78 wins on priority
  ARFCN 500000 -> n41 and n90 (2600), n90 wins on channel raster
  ARFCN 285401 -> n51/n76/n91/n93, only "1500" is certain

Frequency (3GPP 38.101-1 5.4.2.1):
  ARFCN <= 600000: 5 kHz * ARFCN
  ARFCN >  600000: 3000000 kHz + 15 kHz * (ARFCN - 600000)

Config file: ~/.config/nr-band/config.yaml
  band_hints: [78, 28]    # bands your operator deploys
  output: text            # or json

Usage:
  nr_band.py 630000                    # resolve one ARFCN
  nr_band.py 160000 -b 20              # only consider n20
  nr_band.py 500000 520000 --json      # JSON, one object per line
  nr_band.py 630000 --candidates       # also list all overlapping bands
  nr_band.py --list                    # print band table
  nr_band.py --dump-config             # emit default config to stdout
  nr_band.py -b 78 --save-config       # store hints in config file

Dependencies: pyyaml
"""

import argparse
import json
import sys
import yaml
from pathlib import Path

from nrband.band_table import BANDS_NR, bands_for_arfcn, find_band
from nrband.config import DEFAULT_CONFIG, default_config_path, load_config, save_config
from nrband.resolver import ResolvedBand, resolve


def format_band(band) -> str:
    low, high = band.channel_range
    number = f"n{band.number}" if band.number is not None else "n?"
    return f"{number:<5} {band.name:>5}  {low:>6}-{high:<6}  prio {band.priority}"


def format_result(result: ResolvedBand) -> str:
    """One line of text output for a resolved ARFCN."""
    freq_mhz = result.frequency_khz / 1000
    head = f"{result.channel_number}: {freq_mhz:.3f} MHz"
    if result.number is not None:
        return f"{head}  n{result.number} ({result.name})"
    if result.name is not None:
        return f"{head}  {result.name} (band ambiguous)"
    return f"{head}  unknown band"


def print_table():
    print(f"{'band':<5} {'name':>5}  {'ARFCN range':<13}  priority")
    print("-" * 40)
    for band in sorted(BANDS_NR, key=lambda b: (b.low, b.number)):
        print(format_band(band))


def check_hints(hints):
    """Warn about hint numbers that are not in the band table."""
    for hint in hints:
        if find_band(hint) is None:
            print(f"Warning: n{hint} is not a known NR band with downlink", file=sys.stderr)


def main(argv=None):
    p = argparse.ArgumentParser(description="Identify 5G NR band from NR-ARFCN")
    p.add_argument("arfcn", nargs="*", type=int, help="NR-ARFCN(s) to resolve")
    p.add_argument("-b", "--band", type=int, action="append", dest="bands",
                   help="Band number hint (repeatable)")
    p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    p.add_argument("--candidates", action="store_true", help="Also list every band containing the ARFCN")
    p.add_argument("--list", action="store_true", help="Print the NR band table")
    p.add_argument("--config", type=Path, default=default_config_path())
    p.add_argument("--dump-config", action="store_true", help="Emit default config to stdout")
    p.add_argument("--save-config", action="store_true", help="Save band hints and output format to config")
    args = p.parse_args(argv)

    if args.dump_config:
        print(yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
        return 0

    if args.list:
        print_table()
        return 0

    cfg = load_config(args.config)
    hints = args.bands if args.bands else cfg["band_hints"]
    output = "json" if args.json else cfg["output"]

    check_hints(hints)

    if args.save_config:
        save_config({"band_hints": list(hints), "output": output}, args.config)
        print(f"Saved config to {args.config}")
        if not args.arfcn:
            return 0

    if not args.arfcn:
        p.error("arfcn is required unless --list, --dump-config or --save-config")

    for arfcn in args.arfcn:
        try:
            result = resolve(arfcn, hints)
        except ValueError as e:
            sys.exit(f"Error: {e}")

        if output == "json":
            print(json.dumps(result.to_dict()))
        else:
            print(format_result(result))

        if args.candidates:
            for band in bands_for_arfcn(arfcn):
                print(f"    {format_band(band)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
termbar CLI demos

- `iterate` wraps a list with `tqdm` and sleeps per element.
- `bar` animates the glyph bar from empty to full.

Single-letter flags exist for all options. `-P/--plain` skips the live line
and prints only the final state to stdout (handy for logs and tests).
"""
from __future__ import annotations

import argparse
import io
import sys
import time
from typing import List

from . import ui
from .adapters import tqdm
from .progress import ASCII_PATTERNS, DEFAULT_PATTERNS, ProgressBar
from .utils import fit_bar_width, get_terminal_width


def _sleep(sec: float) -> None:
    if sec > 0:
        time.sleep(sec)


def _last_line(captured: str) -> str:
    return captured.rstrip("\n").split("\r")[-1]


# ---------------------------------------------------------------------------
# ITERATE

def demo_iterate(args: argparse.Namespace) -> int:
    if args.count < 0:
        ui.log_warning(f"--count {args.count} is negative; iterating 0 items")
    items = [None] * max(0, args.count)
    width = args.width if args.width > 0 else fit_bar_width(get_terminal_width(), args.title)
    ui.log_info(f"iterate: {len(items)} items, width={width}, interval={args.interval}ms")

    if args.plain:
        sink = io.StringIO()
        for _ in tqdm(items, title=args.title, file=sink, mininterval=args.interval, width=width):
            _sleep(args.delay)
        print(_last_line(sink.getvalue()))
        return 0

    with ui.section(f"iterate {args.title}"):
        bar = tqdm(items, title=args.title, file=sys.stderr, mininterval=args.interval, width=width)
        for _ in bar:
            _sleep(args.delay)
    ui.log_success(f"Processed {len(bar)} items ({bar.renders} renders)")
    return 0


# ---------------------------------------------------------------------------
# BAR

def demo_bar(args: argparse.Namespace) -> int:
    if args.steps < 1:
        ui.log_warning(f"--steps {args.steps} is below 1; using 1")
    steps = max(1, args.steps)
    width = args.width if args.width > 0 else fit_bar_width(get_terminal_width())
    pb = ProgressBar(width, ASCII_PATTERNS if args.ascii else DEFAULT_PATTERNS)

    for i in range(steps + 1):
        pb.percentage = i / steps
        if not args.plain:
            sys.stderr.write(f"\r|{pb}| {100 * i // steps:3d}%")
            sys.stderr.flush()
            _sleep(args.delay)

    if args.plain:
        print(f"|{pb}|")
    else:
        sys.stderr.write("\n")
    return 0


# ---------------------------------------------------------------------------
# ARGPARSE

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="termbar", description="termbar CLI demos")
    p.add_argument("-v", "--verbose", action="store_true", help="Print extra info messages.")
    p.add_argument("-l", "--log-file", default=None, help="Write library debug logs to this file.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("iterate", help="Wrap a list with tqdm() and sleep per element.")
    sp.add_argument("-n", "--count", type=int, default=200)
    sp.add_argument("-d", "--delay", type=float, default=0.01, help="Seconds of work per element.")
    sp.add_argument("-t", "--title", default="demo")
    sp.add_argument("-i", "--interval", type=int, default=100, help="Minimum ms between renders.")
    sp.add_argument("-w", "--width", type=int, default=10, help="Bar cells; 0 fits the terminal.")
    sp.add_argument("-P", "--plain", action="store_true", help="Print only the final line to stdout.")
    sp.set_defaults(func=demo_iterate)

    sp = sub.add_parser("bar", help="Animate the glyph bar from 0% to 100%.")
    sp.add_argument("-s", "--steps", type=int, default=80)
    sp.add_argument("-d", "--delay", type=float, default=0.02)
    sp.add_argument("-w", "--width", type=int, default=20, help="Glyph cells; 0 fits the terminal.")
    sp.add_argument("-a", "--ascii", action="store_true", help="Use '#' instead of block glyphs.")
    sp.add_argument("-P", "--plain", action="store_true", help="Print only the final bar to stdout.")
    sp.set_defaults(func=demo_bar)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    ui.set_verbose(args.verbose)
    ui.configure_logging(args.log_file, debug=bool(args.log_file))
    try:
        return int(bool(args.func(args)))
    except ValueError as e:
        ui.log_error(f"{args.cmd}: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

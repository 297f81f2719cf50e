"""Command line entry point that plays one mission and reports on it."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable


def _make_sleep(factor: float) -> Callable[[float], None]:
    """Return a sleep function that waits ``factor`` times the requested time."""

    def sleep(seconds: float) -> None:
        time.sleep(max(0.0, seconds * factor))

    return sleep


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rescuesim", description="Simulate a hostage rescue mission."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--log-dir", default="logs", help="directory for mission_log.csv")
    parser.add_argument("--no-delay", action="store_true", help="skip all dramatic pauses")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one mission and print its summary; return the exit status."""
    from rescuesim.mission import Mission

    args = _parse_args(argv)
    sleep = _make_sleep(0.0) if args.no_delay else time.sleep

    print("MISJA W TOKU...\n")
    sleep(1.0)

    mission = Mission(rng=random.Random(args.seed), sleep=sleep, log_dir=args.log_dir)
    try:
        mission.run()
    except Exception as exc:  # noqa: BLE001 - any failure ends the program
        print(f"Błąd: {exc}", file=sys.stderr)
        return 1

    sleep(0.5)
    print("\n=== PODSUMOWANIE MISJI ===\n")
    print(mission.summary(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
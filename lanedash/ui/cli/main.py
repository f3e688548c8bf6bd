from __future__ import annotations

import argparse

from lanedash.ui.cli import commands
from simulator import available_policies


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LANE DASH")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--width", type=float, default=None)
    common_parent.add_argument("--height", type=float, default=None)
    common_parent.add_argument("--road-width", type=float, default=None)
    common_parent.add_argument("--fps", type=int, default=None)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Play the game in a pygame window")
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless autopilot sessions")
    sub.add_argument("--policy", choices=available_policies(), default="autopilot")
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--workers", type=int, default=None)
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import logging

from bstein.app.game_app import GameApp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="bstein", description="Bstein’s Adventure, a tiny platformer.")
    parser.add_argument("--fps", type=int, default=60, help="frame loop rate (default: 60)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    GameApp(fps=args.fps).run()


if __name__ == "__main__":
    main()

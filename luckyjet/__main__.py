"""Entry point for LuckyJet: python -m luckyjet"""

import argparse
import logging
import os
import random
from pathlib import Path

from luckyjet.app import LuckyJetApp, TextualTickDriver
from luckyjet.engine.session import GameEngine
from luckyjet.engine.store import SAVE_DIR, STORE_FILE_NAME, JsonFileStore


def main() -> None:
    parser = argparse.ArgumentParser(description="LuckyJet: jump before the rocket explodes")
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=Path(os.environ.get("LUCKYJET_HOME", SAVE_DIR)),
        help="Directory for saved progress (default: ~/.luckyjet or $LUCKYJET_HOME)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for explosion times")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Write a log file to the save directory at this level",
    )
    args = parser.parse_args()

    if args.log_level:
        args.save_dir.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=args.save_dir / "luckyjet.log",
            level=args.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    store = JsonFileStore(args.save_dir / STORE_FILE_NAME)
    rng = random.Random(args.seed)

    def build_engine(driver: TextualTickDriver) -> GameEngine:
        return GameEngine(store=store, rng=rng, driver=driver)

    LuckyJetApp(build_engine).run()


if __name__ == "__main__":
    main()

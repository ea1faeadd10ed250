"""Validate a controller config file by building the controller it describes."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pidcontrol.config import load_config, make_controller
from pidcontrol.errors import PIDConfigError


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=None, help="Path to config yaml/json")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    try:
        cfg = load_config(args.config)
        controller = make_controller(cfg.controller)
    except (PIDConfigError, TypeError, ValueError, FileNotFoundError) as exc:
        print(f"Invalid controller config: {exc}")
        return 1
    print(controller)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

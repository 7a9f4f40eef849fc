"""Run the stationboard HTTP server."""

from __future__ import annotations

import argparse
from dataclasses import replace

from src.config import configure_logging, load_config
from src.web.server import run_server


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml", help="Path to the YAML config file")
    parser.add_argument("--port", type=int, default=None, help="Override the listening port")
    args = parser.parse_args()

    config = load_config(args.config)
    if args.port is not None:
        config = replace(config, server=replace(config.server, port=args.port))
    configure_logging(config.log)

    try:
        run_server(config)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

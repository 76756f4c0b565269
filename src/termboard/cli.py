from __future__ import annotations

import argparse
import logging
import sys

from .config import LOG_LEVELS, load_config
from .dashboard import collect_all
from .errors import ConfigurationError
from .renderers import RENDERERS, render_with
from .weather.registry import default_registry

logger = logging.getLogger(__name__)

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="termboard")
    ap.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    ap.add_argument("--renderer", choices=RENDERERS, help="Override renderer.kind from config")
    ap.add_argument("--log-level", choices=LOG_LEVELS, help="Override logging.level from config")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
        logging.basicConfig(
            level=args.log_level or cfg.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        registry = default_registry(timeout=cfg.http_timeout)
        dash = collect_all(cfg, registry)
        render_with(args.renderer or cfg.renderer_kind, dash)
    except ConfigurationError as e:
        print(f"termboard: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())

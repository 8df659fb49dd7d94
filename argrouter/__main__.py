"""
Argrouter CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

from argrouter.config import build_app, load_config
from argrouter.console import console
from argrouter.exceptions import ArgRouterError
from argrouter.utils import setup_logging


def find_argrouter_config() -> Path | None:
    candidates = [
        Path.cwd() / "argrouter.yaml",
        Path.cwd() / "argrouter.toml",
        Path.cwd() / ".argrouter.yaml",
        Path.cwd() / ".argrouter.toml",
        Path(os.environ.get("ARGROUTER_CONFIG", "argrouter.yaml")),
        Path.home() / ".config" / "argrouter" / "argrouter.yaml",
        Path.home() / ".config" / "argrouter" / "argrouter.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_argrouter_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: list[str] | None = None) -> Any:
    config_path = bootstrap()
    if not config_path:
        console.print(
            "No argrouter config found. Create argrouter.yaml or set ARGROUTER_CONFIG.",
            style="error",
            markup=False,
        )
        sys.exit(1)
    try:
        config = load_config(config_path)
        setup_logging(
            mode=config.log_mode,
            log_filename=config.log_file,
            console_log_level=(
                logging.DEBUG if os.environ.get("ARGROUTER_DEBUG") else logging.WARNING
            ),
        )
        app = build_app(config)
    except ArgRouterError as error:
        console.print(str(error), style="error", markup=False)
        sys.exit(1)

    app.run(argv)


if __name__ == "__main__":
    main()

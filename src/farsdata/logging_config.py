from __future__ import annotations

import logging.config
import os
from pathlib import Path
from typing import Any

import yaml

from farsdata.settings import project_root

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _default_logging_dict(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "farsdata": {"level": level},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def configure_logging(
    logging_config_path: str | Path | None = None, *, level: str = "INFO"
) -> None:
    """Configure logging from a YAML dictConfig file, or a console default.

    `level` only applies to the built-in default; a YAML file is used verbatim.
    """

    candidate = logging_config_path or os.getenv(
        "FARSDATA_LOGGING_CONFIG", "configs/logging.yaml"
    )
    path = Path(candidate)
    if not path.is_absolute():
        path = project_root() / path
    if not path.exists():
        logging.config.dictConfig(_default_logging_dict(level.upper()))
        return

    config: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    logging.config.dictConfig(config)

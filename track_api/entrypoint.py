from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import uvicorn

from .index import create_app
from .utils.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    handler.setLevel(level)
    root_logger.addHandler(handler)


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_file)

    logger.info(f"Starting track-api on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        # Root logging is configured above; access lines come from our middleware
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()

# worker/main.py

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from hello_workers.common.config import ConfigError, load_config
from hello_workers.common.utils import setup_logging

from .api import router
from .registry import WorkerRegistry

setup_logging()
logger = logging.getLogger("")


def create_app(registry: WorkerRegistry | None = None) -> FastAPI:
    app = FastAPI(title="Worker", redirect_slashes=False)
    app.state.registry = registry if registry is not None else WorkerRegistry()
    app.include_router(router)
    return app


app = create_app()


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    try:
        cfg = load_config(argv)
    except ConfigError as e:
        logger.critical(f"{e}")
        print(f"usage: hello-worker PORT\nerror: {e}", file=sys.stderr)
        sys.exit(2)

    logger.info(f"Worker is running on port {cfg.port}")
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level)


if __name__ == "__main__":
    main()

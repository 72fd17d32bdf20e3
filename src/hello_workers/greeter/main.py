# greeter/main.py

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from hello_workers.common.config import ConfigError, load_config
from hello_workers.common.utils import setup_logging
from hello_workers.worker.models import GREETING

setup_logging()
logger = logging.getLogger("")

app = FastAPI(title="Greeter", redirect_slashes=False)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return GREETING


@app.get("/worker/{worker_id}", response_class=PlainTextResponse)
def worker(worker_id: str) -> str:
    logger.info(f"Greeter received a request {worker_id}")
    return GREETING


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    try:
        cfg = load_config(argv)
    except ConfigError as e:
        logger.critical(f"{e}")
        print(f"usage: hello-greeter PORT\nerror: {e}", file=sys.stderr)
        sys.exit(2)

    logger.info(f"Greeter is running on port {cfg.port}")
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level)


if __name__ == "__main__":
    main()

# worker/client.py

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from hello_workers.common.utils import setup_logging

from .models import decode_seen_ids

setup_logging()
logger = logging.getLogger("")


class WorkerClientError(RuntimeError):
    pass


def identify(base_url: str, worker_id: int, timeout: float = 5.0) -> str:
    url = f"{base_url.rstrip('/')}/worker/{worker_id}"

    logger.info(f"Identifying as worker {worker_id} at {url}")
    r = requests.get(url, timeout=timeout)
    if r.status_code >= 400:
        raise WorkerClientError(f"{url} returned {r.status_code}: {r.text}")
    return r.text


def fetch_seen_ids(base_url: str, timeout: float = 1.0) -> list[int]:
    """
    Worker ids a worker has seen, in the order it received them.
    """
    url = base_url.rstrip("/") + "/health"

    r = requests.get(url, timeout=timeout)
    logger.info(f"Received {r!s}")

    if r.status_code != 200:
        raise WorkerClientError(f"{url} returned {r.status_code}: {r.text}")

    try:
        return decode_seen_ids(r.content)
    except ValidationError as e:
        raise WorkerClientError(f"Invalid health response from {url}: {r.text}") from e

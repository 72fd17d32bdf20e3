from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic_core import PydanticSerializationError

from hello_workers.common.utils import setup_logging

from .models import GREETING, encode_seen_ids, parse_worker_id
from .registry import WorkerRegistry

setup_logging()
logger = logging.getLogger("")

router = APIRouter()


def get_registry(request: Request) -> WorkerRegistry:
    return request.app.state.registry


@router.get("/worker/{worker_id}", response_class=PlainTextResponse)
def identify_worker(
    worker_id: str, registry: WorkerRegistry = Depends(get_registry)
) -> str:
    logger.info(f"Worker received a request {worker_id}")
    registry.add(parse_worker_id(worker_id))
    return GREETING


@router.get("/health")
def health(registry: WorkerRegistry = Depends(get_registry)) -> Response:
    """
    Every worker id seen so far, as a JSON array in arrival order.
    """
    try:
        body = encode_seen_ids(registry.snapshot())
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.exception("Failed to serialize worker ids")
        return PlainTextResponse(str(e), status_code=500)

    return Response(content=body, media_type="application/json")

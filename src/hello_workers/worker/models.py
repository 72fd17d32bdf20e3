import logging
import re
from typing import Final

from pydantic import TypeAdapter

from hello_workers.common.utils import setup_logging

setup_logging()
logger = logging.getLogger("")

GREETING: Final = "Hello, World!"

INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1

_WORKER_ID_RE = re.compile(r"[+-]?[0-9]+")

SeenIds = TypeAdapter(list[int])


def parse_worker_id(raw: str) -> int:
    """
    Decimal worker id from a path segment. Anything that is not a signed
    64-bit decimal integer becomes 0.
    """
    if _WORKER_ID_RE.fullmatch(raw) is None:
        logger.warning(f"Malformed worker id {raw!r}, using 0")
        return 0

    worker_id = int(raw)
    if not INT64_MIN <= worker_id <= INT64_MAX:
        logger.warning(f"Worker id {raw!r} out of range, using 0")
        return 0
    return worker_id


def encode_seen_ids(ids: list[int]) -> bytes:
    return SeenIds.dump_json(ids)


def decode_seen_ids(raw: bytes | str) -> list[int]:
    return SeenIds.validate_json(raw, strict=True)

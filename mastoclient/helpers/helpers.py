"""Helper functions for mastoclient."""
import json
import logging
import sys
from collections.abc import Iterable
from typing import Any

import colorlog
from pydantic import BaseModel


def setup_logging(log_level: int = logging.INFO) -> None:
    """Set logging."""
    logger = logging.getLogger()
    stdout = colorlog.StreamHandler(stream=sys.stderr)
    fmt = colorlog.ColoredFormatter(
    "%(white)s%(asctime)s%(reset)s | %(log_color)s%(levelname)s%(reset)s | \
%(name)s | %(blue)s%(filename)s:%(lineno)s%(reset)s | %(funcName)s >>> \
%(log_color)s%(message)s%(reset)s")
    stdout.setFormatter(fmt)
    logger.addHandler(stdout)
    logger.setLevel(log_level)


def to_json(data: BaseModel | Iterable[BaseModel] | bool) -> str:
    """Render an endpoint result as indented JSON, using the server's key names."""
    payload: Any
    if isinstance(data, BaseModel):
        payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif isinstance(data, bool):
        payload = data
    else:
        payload = [
            item.model_dump(mode="json", by_alias=True, exclude_none=True)
            for item in data
        ]
    return json.dumps(payload, indent=2, ensure_ascii=False)

# structview/api/dependencies.py
"""
FastAPI dependencies.

Provides:
- ``get_parameters``: the request's query string and JSON object body as an
  unpermitted ``Parameters`` set. Handlers whitelist it with ``permit``
  before destructuring.
"""
from __future__ import annotations

import json
import logging

from fastapi import HTTPException, Request

from structview.core.parameters import Parameters

logger = logging.getLogger(__name__)


async def get_parameters(request: Request) -> Parameters:
    body = None
    raw = await request.body()
    content_type = request.headers.get("content-type", "")
    if raw and content_type.startswith("application/json"):
        try:
            body = json.loads(raw)
        except ValueError as exc:
            logger.warning("Invalid JSON body: %s", exc)
            raise HTTPException(status_code=400, detail=f"Invalid JSON body: {exc}")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="JSON body must be an object")

    return Parameters.from_request_data(request.query_params.multi_items(), body)

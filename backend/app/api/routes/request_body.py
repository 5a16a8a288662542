"""Request Body Reader — accepts JSON or HTML form bodies as a flat dict.

Invariants:
    - Never raises on a malformed body: it reads as {} and missing fields surface
      as InvalidInputError downstream
    - Form bodies (urlencoded or multipart) are what views/index.html submits
"""

import json
import logging

from fastapi import Request

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict:
    """FastAPI dependency: request body as a dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}

    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        logger.warning(
            "Unreadable request body",
            extra={"path": request.url.path, "method": request.method},
        )
        return {}
    return data if isinstance(data, dict) else {}

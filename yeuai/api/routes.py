from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
import uuid

from yeuai.client.errors import MalformedResponseError
from yeuai.client.tagger import YeuAIClient
from yeuai.nlu.parser import parse
from yeuai.nlu.schema import ParseResponse
from yeuai.observability.logs import log_event
from yeuai.observability.metrics import record_error

router = APIRouter(tags=["api"])


class ParseIn(BaseModel):
    text: str


async def get_tagger() -> AsyncIterator[YeuAIClient]:
    """One upstream client per request; overridden in tests."""
    async with YeuAIClient() as client:
        yield client


@router.post("/parse", response_model=ParseResponse)
async def parse_text(payload: ParseIn, tagger: YeuAIClient = Depends(get_tagger)):
    request_id = str(uuid.uuid4())
    log_event("parse_request", request_id=request_id, text_len=len(payload.text))
    try:
        result = await parse(payload.text, tagger)
    except (httpx.HTTPError, MalformedResponseError) as e:
        # already counted by the client or the parser
        log_event("parse_error", request_id=request_id, error_type=type(e).__name__)
        raise HTTPException(status_code=502, detail=f"tagger failed: {type(e).__name__}")
    except Exception as e:
        record_error(type(e).__name__)
        log_event("parse_error", request_id=request_id, error_type=type(e).__name__)
        raise
    return ParseResponse(data=result)

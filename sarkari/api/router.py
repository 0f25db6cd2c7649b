import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from sarkari.config import get_settings
from sarkari.parser.normalize import html_to_text
from sarkari.parser.parse import parse_job_notification


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

TOO_SHORT_MESSAGE = "Please provide job notification text (at least {n} characters)"
PARSE_FAILED_MESSAGE = "Failed to parse job notification. Please try again."


class ParseRequest(BaseModel):
    rawText: Optional[str] = None


@router.get("/health")
async def health():
    return {"status": "ok"}


# plain def: parsing is CPU bound, FastAPI runs it in the threadpool
@router.post("/parse-job-rules")
def parse_job_rules(req: ParseRequest):
    min_length = get_settings().min_text_length
    text = html_to_text(req.rawText or "")
    if len(text.strip()) < min_length:
        raise HTTPException(status_code=400, detail=TOO_SHORT_MESSAGE.format(n=min_length))

    try:
        parsed = parse_job_notification(text)
    except Exception:
        logger.exception("Error parsing job with rules")
        raise HTTPException(status_code=500, detail=PARSE_FAILED_MESSAGE)
    return {"parsedData": parsed.to_wire()}

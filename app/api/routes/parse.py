import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.schemas import ParseOutcome, ParseRequest
from app.core.settings import Settings, get_settings
from app.core.text_parser import parse_contact_text

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


@router.post(
    "/parse",
    response_model=ParseOutcome,
    summary="Parse Contact Blurb",
    description="Extract a performer's stage name, legal name, phone, email and Instagram handle from pasted text. Returns per-field confidence scores and cleaned lines for manual assignment.",
    responses={
        200: {
            "description": "Parsed contact blurb (check `success` and `requires_manual_assignment`)",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            "stage_name": "SAUL",
                            "legal_name": "Jonathan Weinstein",
                            "phone": "858-692-1601",
                            "email": "anotefromsaul@gmail.com",
                            "instagram_handle": "@anotefromsaul",
                            "confidence": {
                                "stage_name": 0.7,
                                "legal_name": 0.8,
                                "phone": 0.9,
                                "email": 0.95,
                                "instagram_handle": 0.9
                            },
                            "raw_input": "SAUL\nJonathan Weinstein\n(858) 692-1601\nanotefromsaul@gmail.com\n@anotefromsaul"
                        },
                        "errors": [],
                        "warnings": [],
                        "cleaned_lines": [
                            "SAUL",
                            "Jonathan Weinstein",
                            "(858) 692-1601",
                            "anotefromsaul@gmail.com",
                            "@anotefromsaul"
                        ],
                        "requires_manual_assignment": False,
                        "strategy": "line_by_line"
                    }
                }
            }
        },
        413: {"description": "Text too large to be a contact blurb"},
        422: {"description": "Malformed request body"}
    }
)
def parse_contact(request: ParseRequest, settings: Settings = Depends(get_settings)):
    """
    Parse a pasted contact blurb.

    **Accepted layouts:**
    - Numbered list (one per line, or run together in one paragraph)
    - Labeled lines, e.g. `FIA (DJ Name)`
    - Bare lines in any order
    - Fixed order (legal name, stage name, phone, email, Instagram) when `prefer_structured` is set

    **Returns:**
    - **data**: Extracted fields with per-field confidence
    - **errors**: Empty input or no name found (`success` is false)
    - **warnings**: Fields that look malformed
    - **cleaned_lines**: Input lines without list decoration
    - **requires_manual_assignment**: Whether a person should assign the lines by hand
    """
    if len(request.text) > settings.max_text_length:
        logger.warning(f"Rejected contact blurb of {len(request.text)} characters (limit {settings.max_text_length})")
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {settings.max_text_length} characters; paste a single contact blurb.",
        )

    return parse_contact_text(request.text, prefer_structured=request.prefer_structured)

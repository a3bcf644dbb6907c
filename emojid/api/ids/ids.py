from fastapi import APIRouter, HTTPException, Query, Request, status
from typing import Any, Dict, List, Optional
import logging
from emojid.core.config import settings
from emojid.core.errors import (
    AlphabetTooSmall,
    EmojiIDError,
    EntropyFailure,
    InvalidFormat,
    InvalidToken,
)
from emojid.models.alphabet import DEFAULT_ALPHABET
from emojid.schemas.identifier import (
    ErrorDetail,
    GenerateRequest,
    GenerateResponse,
    NewIDResponse,
    ParseRequest,
    ParseResponse,
    ValidateResponse,
)
from emojid.utils import id_utils
from emojid.middleware.rate_limit import limiter
from emojid.utils.audit_logger import audit_logger

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_TYPES = {
    InvalidFormat: "invalid_format",
    InvalidToken: "invalid_token",
    AlphabetTooSmall: "alphabet_too_small",
    EntropyFailure: "entropy_failure",
}


def _error_detail(exc: Exception) -> Dict[str, Any]:
    detail = ErrorDetail(
        error_type=ERROR_TYPES.get(type(exc), "invalid_alphabet"),
        message=str(exc),
        token=exc.token if isinstance(exc, InvalidToken) else None,
    )
    return detail.model_dump(exclude_none=True)


def _resolve_alphabet(alphabet: Optional[List[str]]) -> List[str]:
    if alphabet is None:
        return list(DEFAULT_ALPHABET)
    if len(alphabet) > settings.MAX_CUSTOM_ALPHABET_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_type": "alphabet_too_large",
                "message": f"Alphabet may contain at most {settings.MAX_CUSTOM_ALPHABET_SIZE} entries",
            }
        )
    return alphabet


@router.post("", response_model=GenerateResponse)
@limiter.limit(settings.GENERATE_RATE_LIMIT)
async def generate_ids(generate_request: GenerateRequest, request: Request):
    if generate_request.count > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error_type": "batch_too_large",
                "message": f"At most {settings.MAX_BATCH_SIZE} identifiers per request",
            }
        )

    alphabet = _resolve_alphabet(generate_request.alphabet)
    try:
        ids = id_utils.new_batch(generate_request.count, alphabet)
    except EntropyFailure as e:
        logger.error("Secure random source failed: %s", e)
        audit_logger.log_entropy_failure(request.url.path, str(e))
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=_error_detail(e))
    except (AlphabetTooSmall, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=_error_detail(e))

    audit_logger.log_ids_generated(
        count=len(ids),
        alphabet_size=len(alphabet),
        custom_alphabet=generate_request.alphabet is not None,
    )
    return GenerateResponse(ids=[str(emoji_id) for emoji_id in ids], alphabet_size=len(alphabet))


@router.get("/new", response_model=NewIDResponse)
@limiter.limit(settings.GENERATE_RATE_LIMIT)
async def new_id(request: Request):
    try:
        emoji_id = id_utils.new_string()
    except EntropyFailure as e:
        logger.error("Secure random source failed: %s", e)
        audit_logger.log_entropy_failure(request.url.path, str(e))
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=_error_detail(e))
    return NewIDResponse(id=emoji_id)


@router.post("/parse", response_model=ParseResponse)
@limiter.limit(settings.PARSE_RATE_LIMIT)
async def parse_id(parse_request: ParseRequest, request: Request):
    alphabet = _resolve_alphabet(parse_request.alphabet)
    try:
        emoji_id = id_utils.parse_with_alphabet(parse_request.id, alphabet)
    except (EmojiIDError, ValueError) as e:
        audit_logger.log_parse_rejected(_error_detail(e)["error_type"], str(e), request.url.path)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=_error_detail(e))
    return ParseResponse(id=str(emoji_id), tokens=emoji_id.tokens())


@router.get("/validate", response_model=ValidateResponse)
@limiter.limit(settings.PARSE_RATE_LIMIT)
async def validate_id(request: Request, id: str = Query(..., description="Identifier to check")):
    return ValidateResponse(id=id, valid=id_utils.validate(id))

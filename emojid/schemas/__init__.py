from .identifier import (
    GenerateRequest, GenerateResponse, NewIDResponse,
    ParseRequest, ParseResponse, ValidateResponse, ErrorDetail,
)

__all__ = [
    "GenerateRequest", "GenerateResponse", "NewIDResponse",
    "ParseRequest", "ParseResponse", "ValidateResponse", "ErrorDetail",
]

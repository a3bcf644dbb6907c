from pydantic import BaseModel, Field
from typing import Optional, List


class GenerateRequest(BaseModel):
    count: int = Field(1, ge=1, description="Number of identifiers to generate")
    alphabet: Optional[List[str]] = Field(
        None, description="Custom single-codepoint alphabet; the default alphabet when omitted"
    )


class GenerateResponse(BaseModel):
    ids: List[str]
    alphabet_size: int


class NewIDResponse(BaseModel):
    id: str


class ParseRequest(BaseModel):
    id: str = Field(..., description="Identifier in 8-4-4-4-12 layout")
    alphabet: Optional[List[str]] = None


class ParseResponse(BaseModel):
    id: str
    tokens: List[str]


class ValidateResponse(BaseModel):
    id: str
    valid: bool


class ErrorDetail(BaseModel):
    error_type: str
    message: str
    token: Optional[str] = None

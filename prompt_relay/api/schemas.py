from typing import Optional

from pydantic import BaseModel, Field


class RelayRequest(BaseModel):
    prompt: Optional[str] = Field(
        None, json_schema_extra={"example": "allocate 16 bytes"}
    )


class RelayResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    model: str

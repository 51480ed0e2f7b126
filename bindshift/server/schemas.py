"""Pydantic response schemas."""

from pydantic import BaseModel, Field


class ErrorRecordOut(BaseModel):
    code: str
    field: str | None = None
    message: str


class ValidationResponse(BaseModel):
    valid: bool
    object_name: str
    errors: list[ErrorRecordOut] = Field(default_factory=list)


class KindsResponse(BaseModel):
    kinds: list[str] = Field(default_factory=list, examples=[["signupform"]])

"""Pydantic models for the input resolution API."""

from typing import Any, Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"


class ValidationErrorResponse(BaseModel):
    field: str
    value: Any = None
    detail: str

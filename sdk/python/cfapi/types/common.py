"""Response envelope shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class ResponseInfo(BaseModel):
    code: int = 0
    message: str = ""


class Envelope(BaseModel, Generic[T]):
    success: bool = False
    errors: list[Union[str, ResponseInfo]] = []
    messages: list[Union[str, ResponseInfo]] = []
    result: T

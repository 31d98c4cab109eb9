from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class SearchResult(BaseModel):
    title: Any
    prompt: Any = None
    user: Any = None
    imageUrl: Any = None


class ErrorResponse(BaseModel):
    error: str

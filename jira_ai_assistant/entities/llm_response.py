from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class LLMResponse(BaseModel):
    """Text returned by a generation call plus provider token counts when reported."""

    text: str = ""
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None

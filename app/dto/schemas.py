from pydantic import BaseModel, Field
from typing import Optional, List, Literal

from app.prompts.humanizer import HumanizationMode


# ===== Humanizer Schemas =====

class HumanizeRequest(BaseModel):
    """Request schema for text humanization (documentation only, the route validates the raw body)"""
    text: str = Field(..., description="Text to humanize", min_length=1)
    mode: HumanizationMode = Field(
        default=HumanizationMode.BALANCED,
        description="Humanization mode: 'subtle', 'balanced', 'strong' or 'stealth' (two-stage rewrite)"
    )


class TextStats(BaseModel):
    """Word and character counts of a text"""
    words: int = Field(..., description="Number of whitespace separated words")
    characters: int = Field(..., description="Number of characters")


class HumanizeStats(BaseModel):
    """Counts for the original and the humanized text"""
    original: TextStats
    humanized: TextStats


class HumanizeResponse(BaseModel):
    """Response schema for text humanization"""
    humanizedText: str = Field(..., description="The humanized text")
    mode: HumanizationMode = Field(..., description="Mode used for humanization")
    stats: Optional[HumanizeStats] = Field(None, description="Word and character counts")


class HumanizeErrorResponse(BaseModel):
    """Error response schema for the humanizer"""
    success: bool = Field(False, description="Success status")
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")


class ModeInfo(BaseModel):
    """Description of a humanization mode"""
    id: HumanizationMode = Field(..., description="Mode identifier")
    name: str = Field(..., description="Display name")
    stages: int = Field(..., description="Number of generation calls the mode makes")


class HumanizeModesResponse(BaseModel):
    """Response schema for available humanization modes"""
    modes: List[ModeInfo] = Field(..., description="Available modes")
    default_mode: HumanizationMode = Field(..., description="Mode used when none is given")


class DiffRequest(BaseModel):
    """Request schema for diffing the original and the humanized text"""
    original: str = Field(..., description="Original text")
    result: str = Field(..., description="Humanized text")


class DiffSpanSchema(BaseModel):
    """A tagged span of a text diff"""
    op: Literal["equal", "insert", "delete"] = Field(..., description="Span operation")
    text: str = Field(..., description="Span text")


class DiffResponse(BaseModel):
    """Response schema for a text diff"""
    spans: List[DiffSpanSchema] = Field(..., description="Diff spans covering both texts")
    html: str = Field(..., description="HTML rendering of the spans")
    stats: HumanizeStats = Field(..., description="Word and character counts")

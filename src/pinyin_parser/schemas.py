from __future__ import annotations

from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ParserConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strict: bool = False
    preserve_spaces: bool = False
    preserve_capitalization: bool = Field(
        default=False,
        validation_alias=AliasChoices("preserve_capitalization", "preserve_capitalisation"),
    )
    preserve_punctuations: bool = False


class TokenRecord(BaseModel):
    kind: Literal["alphabetic", "punctuation", "space"]
    text: str
    letter: Optional[str] = None
    diacritics: list[str] = Field(default_factory=list)
    uppercase: bool = False


class SegmentationResult(BaseModel):
    input: str
    options: ParserConfig
    units: list[str] = Field(default_factory=list)
    completed: bool = True
    error: Optional[str] = None
    error_position: Optional[int] = None

# csvview/config/schema.py
"""Configuration schema for parsing and serializing."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from csvview.delimiter import DEFAULT_SAMPLE_SIZE, validate_delimiter


class ViewKind(str, Enum):
    """Which table view the facade builds."""

    ENUMERATED = "enumerated"
    NAMED = "named"


class CSVConfig(BaseModel):
    """
    Settings for loading a document.

    Every field has a default, so CSVConfig() equals the package defaults in
    default.yaml.
    """

    model_config = ConfigDict(extra="forbid")

    delimiter: Optional[str] = Field(
        default=None,
        description="Field separator or its name (comma, semicolon, tab). None = guess",
    )

    load_columns: bool = Field(
        default=True,
        description="Build the columns projection",
    )

    row_limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of data rows to parse. None = all",
    )

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading files",
    )

    guess_sample_size: int = Field(
        default=DEFAULT_SAMPLE_SIZE,
        ge=1,
        description="Characters inspected when guessing the delimiter",
    )

    view: ViewKind = Field(
        default=ViewKind.ENUMERATED,
        description="Table view: 'enumerated' (positional) or 'named' (by header)",
    )

    line_terminator: str = Field(
        default="\n",
        description="Line ending used when serializing",
    )

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return validate_delimiter(value)

    @field_validator("line_terminator")
    @classmethod
    def _check_line_terminator(cls, value: str) -> str:
        if value not in ("\n", "\r\n", "\r"):
            raise ValueError("line_terminator must be one of \\n, \\r\\n, \\r")
        return value


__all__ = ["CSVConfig", "ViewKind"]

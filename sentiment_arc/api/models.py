"""
Pydantic models for API request/response schemas.

Analysis payloads are the scorers' own ``to_dict()`` output, so their
keys match the documented camelCase wire format.
"""

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request model for the analysis endpoints."""

    text: str | None = Field(
        default=None,
        description="Passage to analyze",
        examples=["Ce produit est vraiment excellent, je le recommande !"],
    )


class AnalyzeResponse(BaseModel):
    """Response model wrapping one analysis result."""

    result: dict[str, Any] = Field(
        ...,
        description="Analysis result (lexical, contextual, or comparison)",
    )


class SampleAnalysis(BaseModel):
    """One built-in sample text and its analysis."""

    text: str
    analysis: dict[str, Any]


class SamplesResponse(BaseModel):
    """Both scorers run over the built-in sample texts."""

    standard: list[SampleAnalysis]
    contextual: list[SampleAnalysis]


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(
        ...,
        description="Service health status (healthy or degraded)",
    )
    version: str = Field(
        ...,
        description="Package version",
    )
    lexicon: dict[str, int] = Field(
        default_factory=dict,
        description="Entry count per lexicon table",
    )


class ErrorResponse(BaseModel):
    """Response model for errors."""

    detail: str = Field(
        ...,
        description="Error message",
    )
    error_type: str = Field(
        default="error",
        description="Error category",
    )

# asset_sentiment/models/sentiment_schema.py
from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator


class Sentiment(BaseModel):
    label: str = Field(..., description="positive, neutral or negative; any casing, other labels allowed.")
    score: float = Field(..., description="Model confidence for the label. No range is enforced.")

    model_config = {"extra": "ignore"}


class Article(BaseModel):
    title: Optional[str] = Field("", description="Headline of the article.")
    description: Optional[str] = Field("", description="Short summary from the news source.")
    date: Optional[str] = Field("", description="Publication date as sent by the backend, usually ISO 8601.")
    sentiment: Sentiment
    link: Optional[str] = Field("", description="URL of the full article.")

    @field_validator("title", "description", "date", "link", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        # News sources routinely send null for missing fields
        return "" if v is None else v

    model_config = {"extra": "ignore"}


class AnalysisRequest(BaseModel):
    # Sent verbatim, the empty string included.
    asset: str


class AnalysisResponse(BaseModel):
    articles: List[Article]

    model_config = {"extra": "ignore"}


class ChartDatum(BaseModel):
    name: str = Field(..., description="Capitalized sentiment label.")
    value: int = Field(..., description="Number of articles carrying the label.")

    model_config = {"frozen": True}

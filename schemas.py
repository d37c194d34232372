"""Pydantic models and enumerations for data validation and structure."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from config import DEFAULT_LANGUAGE
from constants import RISK_RATINGS


class AnalysisKind(str, Enum):
    """The fixed set of analyses that can be run against a document."""
    SUMMARIZE = "summarize"
    JARGON = "jargon"
    QUESTION = "question"
    HIDDEN_TERMS = "hidden_terms"
    HIDDEN_FEES = "hidden_fees"
    RISK_SCORE = "risk_score"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    AnalysisKind.SUMMARIZE: "Summarize",
    AnalysisKind.JARGON: "Explain Jargon",
    AnalysisKind.QUESTION: "Ask a Question",
    AnalysisKind.HIDDEN_TERMS: "Find Hidden Terms",
    AnalysisKind.HIDDEN_FEES: "Find Hidden Fees",
    AnalysisKind.RISK_SCORE: "Calculate Risk Score",
}


class RiskTier(str, Enum):
    """Presentation band derived from a risk score."""
    CALM = "calm"
    CAUTION = "caution"
    ALARM = "alarm"

    @classmethod
    def from_score(cls, score: int) -> "RiskTier":
        if score <= 33:
            return cls.CALM
        if score <= 66:
            return cls.CAUTION
        return cls.ALARM


class RiskAssessment(BaseModel):
    """Structured risk score returned by the AI."""
    score: int = Field(ge=0, le=100, description="A risk score from 0 (no risk) to 100 (extreme risk).")
    rating: str = Field(
        description='A textual rating of the risk level: one of "Low Risk", "Moderate Risk", "High Risk", "Very High Risk".'
    )
    justification: List[str] = Field(
        description="A list of the top 3-4 short reasons that influenced the score."
    )

    @field_validator("rating")
    @classmethod
    def _canonical_rating(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("rating must not be empty")
        # Spelling variants of a known label map to it; other wording is kept as given
        for rating in RISK_RATINGS:
            if value.lower() == rating.lower():
                return rating
        return value

    @property
    def tier(self) -> RiskTier:
        return RiskTier.from_score(self.score)


class AnalyzeRequest(BaseModel):
    """Body of a POST /analyze request."""
    kind: AnalysisKind
    document_text: str = ""
    query: Optional[str] = None
    target_language: Optional[str] = DEFAULT_LANGUAGE

    @field_validator("target_language")
    @classmethod
    def _default_language(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            return DEFAULT_LANGUAGE
        return value


class ImagePayload(BaseModel):
    """JSON body of a POST /extract request (camera capture)."""
    image: str = Field(description="Base64 image data, optionally as a data URL.")
    mime_type: Optional[str] = None


class AnalysisResult(BaseModel):
    """Display-ready output of an analysis."""
    kind: AnalysisKind
    html: str
    target_language: str
    risk: Optional[RiskAssessment] = None

"""Pydantic schemas for the export readiness check."""

from pydantic import BaseModel, Field

from app.readiness_engine.classifier import ProductCategory
from app.readiness_engine.packs import Confidence, RiskLevel
from app.readiness_engine.query import Experience


class ExportCheckRequest(BaseModel):
    # Optional at the schema level so the engine can report every missing field at once.
    product: str | None = Field(None, description="Free-text product description")
    country: str | None = Field(None, description="Destination country name or alias")
    experience: str | None = Field(None, description="beginner, intermediate or expert")


class HSSuggestion(BaseModel):
    code: str
    description: str
    confidence: Confidence


class HSExplanation(BaseModel):
    code: str
    why: str


class CountryRuleItem(BaseModel):
    title: str
    detail: str


class OfficialLinkItem(BaseModel):
    label: str
    url: str


class ExportReadinessResponse(BaseModel):
    """Complete engine output for one (product, country, experience) query."""

    product: str
    country: str
    experience: Experience
    allowed: bool = True

    product_category: ProductCategory
    risk_level: RiskLevel
    risk_reason: str
    journey_stage: str
    recommended_incoterm: str
    destination_pack: str | None = None

    hs_code_suggestions: list[HSSuggestion]
    hs_explanations: list[HSExplanation]
    hs_note: str

    documents: list[str]
    warnings: list[str]
    next_steps: list[str]

    compliance_checklist: list[str]
    country_rules: list[CountryRuleItem]
    official_links: list[OfficialLinkItem]

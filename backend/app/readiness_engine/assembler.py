"""
Response assembler: an ordered pipeline of pure overlay functions.

Each overlay takes a frozen ReadinessDraft and returns a new one:

1. baseline      - inputs, category pack, generic country rules/checklist/links
2. incoterm      - DAP for beginners, FOB otherwise
3. beginner      - forwarder and CIF warnings ahead of everything else
4. hs codes      - t-shirt special case, dedup, UNKNOWN entry, padding, rationale
5. hs note       - guidance note, extra next step for UNKNOWN
6. destination   - UK replaces rules/checklist/links, other packs append
7. category      - electronics/chemicals/medical warnings
8. finalize      - universal next steps last, warning dedup and fallback

No DB, network or shared mutable state.
"""

from dataclasses import dataclass, replace
from typing import Callable

from app.readiness_engine.classifier import ProductCategory
from app.readiness_engine.country_packs import (
    BASELINE_COMPLIANCE_CHECKLIST,
    BASELINE_COUNTRY_RULES,
    BASELINE_OFFICIAL_LINKS,
    CountryRule,
    CountryRulePack,
    OfficialLink,
    OverlayMode,
    resolve_country_pack,
)
from app.readiness_engine.normalizer import normalize_product
from app.readiness_engine.packs import (
    GENERIC_HS_FALLBACKS,
    TSHIRT_HS_CANDIDATE,
    UNKNOWN_HS_CANDIDATE,
    CategoryPack,
    HSCandidate,
    RiskLevel,
)
from app.readiness_engine.query import ExportQuery
from app.schemas.export_check import (
    CountryRuleItem,
    ExportReadinessResponse,
    HSExplanation,
    HSSuggestion,
    OfficialLinkItem,
)

HS_SUGGESTION_COUNT = 3

TSHIRT_KEYWORDS = ("t-shirt", "tshirt", "tee")

BEGINNER_INCOTERM = "DAP"
DEFAULT_INCOTERM = "FOB"

BEGINNER_WARNINGS = ("Hire a freight forwarder", "Avoid CIF pricing initially")

DETAILS_NEEDED_NEXT_STEP = "Add more product details for better HS classification"

UNIVERSAL_NEXT_STEPS = (
    "Confirm HS code",
    "Talk to logistics partner",
    "Confirm importer/buyer details",
)

HS_NOTE_UNKNOWN = (
    "No direct HS match found. Add details (material, composition, use, processing) "
    "for better suggestion."
)
HS_NOTE_GUIDANCE = (
    "HS code suggestions are guidance only. Confirm final HS code with a customs broker "
    "or official tariff tool."
)

FALLBACK_WARNING = "Regulations vary by destination—verify local import rules before shipment."

HS_RATIONALE: dict[ProductCategory, str] = {
    ProductCategory.SPICES: "Matched spice-related keywords; confirm if single spice vs blend.",
    ProductCategory.FOOD: "Matched food-related keywords; confirm processing and ingredients.",
    ProductCategory.TEXTILE: "Matched textile keywords; confirm fabric composition and knit/non-knit.",
    ProductCategory.MACHINERY: "Matched machinery keywords; confirm technical specs and end-use.",
    ProductCategory.CHEMICALS: "Matched chemical keywords; confirm SDS and hazard classification.",
    ProductCategory.ELECTRONICS: "Matched electronics keywords; confirm radio/Bluetooth and battery details.",
    ProductCategory.MEDICAL: "Matched medical keywords; confirm conformity and intended use.",
}
GENERIC_HS_RATIONALE = "Provide more product details for confident HS classification."

CATEGORY_WARNINGS: dict[ProductCategory, str] = {
    ProductCategory.ELECTRONICS: "If the product uses Bluetooth/radio, check destination conformity approvals.",
    ProductCategory.CHEMICALS: "If hazardous, confirm dangerous goods (DG) transport rules with your forwarder.",
    ProductCategory.MEDICAL: "Confirm conformity markings/certificates required in the destination market.",
}


@dataclass(frozen=True)
class ReadinessDraft:
    """Immutable working value threaded through the overlay pipeline."""

    query: ExportQuery
    category: ProductCategory
    risk_level: RiskLevel
    risk_reason: str
    journey_stage: str
    pack_hs_candidates: tuple[HSCandidate, ...] = ()
    recommended_incoterm: str = DEFAULT_INCOTERM
    hs_candidates: tuple[HSCandidate, ...] = ()
    hs_explanations: tuple[tuple[str, str], ...] = ()
    hs_note: str = ""
    documents: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    next_steps: tuple[str, ...] = ()
    compliance_checklist: tuple[str, ...] = ()
    country_rules: tuple[CountryRule, ...] = ()
    official_links: tuple[OfficialLink, ...] = ()
    destination_pack: str | None = None


Overlay = Callable[[ReadinessDraft], ReadinessDraft]


def _unique(items) -> tuple:
    """Order-preserving exact-match dedup."""
    return tuple(dict.fromkeys(items))


def _unique_by_code(candidates) -> tuple[HSCandidate, ...]:
    seen: set[str] = set()
    out: list[HSCandidate] = []
    for candidate in candidates:
        if not candidate.code or candidate.code in seen:
            continue
        seen.add(candidate.code)
        out.append(candidate)
    return tuple(out)


# ── Overlays ──


def seed_baseline(query: ExportQuery, category: ProductCategory, pack: CategoryPack) -> ReadinessDraft:
    return ReadinessDraft(
        query=query,
        category=category,
        risk_level=pack.risk_level,
        risk_reason=pack.risk_reason,
        journey_stage=pack.journey_stage,
        pack_hs_candidates=pack.hs_candidates,
        documents=_unique(pack.documents),
        warnings=pack.warnings,
        compliance_checklist=BASELINE_COMPLIANCE_CHECKLIST,
        country_rules=BASELINE_COUNTRY_RULES,
        official_links=BASELINE_OFFICIAL_LINKS,
    )


def apply_incoterm(draft: ReadinessDraft) -> ReadinessDraft:
    incoterm = BEGINNER_INCOTERM if draft.query.is_beginner else DEFAULT_INCOTERM
    return replace(draft, recommended_incoterm=incoterm)


def apply_beginner_overlay(draft: ReadinessDraft) -> ReadinessDraft:
    if not draft.query.is_beginner:
        return draft
    return replace(draft, warnings=BEGINNER_WARNINGS + draft.warnings)


def finalize_hs_candidates(
    candidates: tuple[HSCandidate, ...], category: ProductCategory
) -> tuple[HSCandidate, ...]:
    """Dedup by code, add the UNKNOWN entry if needed, pad with generic codes, cap at three."""
    merged = list(_unique_by_code(candidates))
    if category == ProductCategory.UNKNOWN:
        merged.append(UNKNOWN_HS_CANDIDATE)
    # Three distinct fallbacks always fill the list.
    merged = list(_unique_by_code(merged + list(GENERIC_HS_FALLBACKS)))
    return tuple(merged[:HS_SUGGESTION_COUNT])


def apply_hs_candidates(draft: ReadinessDraft) -> ReadinessDraft:
    text = normalize_product(draft.query.product)
    special: tuple[HSCandidate, ...] = ()
    if any(keyword in text for keyword in TSHIRT_KEYWORDS):
        special = (TSHIRT_HS_CANDIDATE,)

    candidates = finalize_hs_candidates(special + draft.pack_hs_candidates, draft.category)
    why = HS_RATIONALE.get(draft.category, GENERIC_HS_RATIONALE)
    return replace(
        draft,
        hs_candidates=candidates,
        hs_explanations=tuple((c.code, why) for c in candidates),
    )


def apply_hs_note(draft: ReadinessDraft) -> ReadinessDraft:
    if draft.category == ProductCategory.UNKNOWN:
        return replace(
            draft,
            hs_note=HS_NOTE_UNKNOWN,
            next_steps=draft.next_steps + (DETAILS_NEEDED_NEXT_STEP,),
        )
    return replace(draft, hs_note=HS_NOTE_GUIDANCE)


def layer_country_pack(draft: ReadinessDraft, pack: CountryRulePack) -> ReadinessDraft:
    """Apply one destination pack (and its category sub-pack, if any)."""
    if pack.mode == OverlayMode.REPLACE:
        rules = pack.country_rules
        checklist = pack.compliance_checklist
        links = pack.official_links
    else:
        rules = draft.country_rules + pack.country_rules
        checklist = draft.compliance_checklist + pack.compliance_checklist
        links = draft.official_links + pack.official_links

    draft = replace(
        draft,
        journey_stage=pack.journey_stage_override or draft.journey_stage,
        documents=_unique(draft.documents + pack.extra_documents),
        warnings=draft.warnings + pack.extra_warnings,
        next_steps=draft.next_steps + pack.extra_next_steps,
        country_rules=rules,
        compliance_checklist=checklist,
        official_links=links,
    )

    sub_pack = pack.overlay_for(draft.category)
    if sub_pack is not None:
        draft = layer_country_pack(draft, sub_pack)
    return draft


def apply_destination_overlay(draft: ReadinessDraft) -> ReadinessDraft:
    pack = resolve_country_pack(draft.query.country)
    if pack is None:
        return draft
    draft = layer_country_pack(draft, pack)
    return replace(draft, destination_pack=pack.key)


def apply_category_warnings(draft: ReadinessDraft) -> ReadinessDraft:
    warning = CATEGORY_WARNINGS.get(draft.category)
    if warning is None:
        return draft
    return replace(draft, warnings=draft.warnings + (warning,))


def finalize(draft: ReadinessDraft) -> ReadinessDraft:
    warnings = _unique(draft.warnings) or (FALLBACK_WARNING,)
    return replace(
        draft,
        warnings=warnings,
        next_steps=_unique(draft.next_steps + UNIVERSAL_NEXT_STEPS),
        compliance_checklist=_unique(draft.compliance_checklist),
    )


OVERLAY_PIPELINE: tuple[Overlay, ...] = (
    apply_incoterm,
    apply_beginner_overlay,
    apply_hs_candidates,
    apply_hs_note,
    apply_destination_overlay,
    apply_category_warnings,
    finalize,
)


def to_response(draft: ReadinessDraft) -> ExportReadinessResponse:
    query = draft.query
    return ExportReadinessResponse(
        product=query.product,
        country=query.country,
        experience=query.experience,
        allowed=True,
        product_category=draft.category,
        risk_level=draft.risk_level,
        risk_reason=draft.risk_reason,
        journey_stage=draft.journey_stage,
        recommended_incoterm=draft.recommended_incoterm,
        destination_pack=draft.destination_pack,
        hs_code_suggestions=[
            HSSuggestion(code=c.code, description=c.description, confidence=c.confidence)
            for c in draft.hs_candidates
        ],
        hs_explanations=[HSExplanation(code=code, why=why) for code, why in draft.hs_explanations],
        hs_note=draft.hs_note,
        documents=list(draft.documents),
        warnings=list(draft.warnings),
        next_steps=list(draft.next_steps),
        compliance_checklist=list(draft.compliance_checklist),
        country_rules=[CountryRuleItem(title=r.title, detail=r.detail) for r in draft.country_rules],
        official_links=[OfficialLinkItem(label=link.label, url=link.url) for link in draft.official_links],
    )


def assemble(
    query: ExportQuery,
    category: ProductCategory,
    pack: CategoryPack,
) -> ExportReadinessResponse:
    """Run the full overlay pipeline and build the final response."""
    draft = seed_baseline(query, category, pack)
    for overlay in OVERLAY_PIPELINE:
        draft = overlay(draft)
    return to_response(draft)

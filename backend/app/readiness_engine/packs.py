"""Static category packs: baseline risk, journey stage, documents, warnings and HS candidates.

Tables are built once at import and never mutated. Every ProductCategory,
UNKNOWN included, resolves to exactly one pack.
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType

from app.readiness_engine.classifier import ProductCategory


class RiskLevel(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Confidence(str, enum.Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class HSCandidate:
    """A single HS code suggestion."""

    code: str
    description: str
    confidence: Confidence


@dataclass(frozen=True)
class CategoryPack:
    """Default guidance bundle for one product category."""

    risk_level: RiskLevel
    risk_reason: str
    journey_stage: str
    documents: tuple[str, ...]
    warnings: tuple[str, ...] = ()
    hs_candidates: tuple[HSCandidate, ...] = ()


BASELINE_DOCUMENTS: tuple[str, ...] = (
    "Commercial Invoice",
    "Packing List",
    "Certificate of Origin",
    "Product Specification Sheet (materials, composition, use)",
)

UNKNOWN_HS_CODE = "UNKNOWN"

UNKNOWN_HS_CANDIDATE = HSCandidate(
    UNKNOWN_HS_CODE,
    "Needs classification — provide composition/use/processing",
    Confidence.LOW,
)

# Padding order when fewer than three candidates were matched.
GENERIC_HS_FALLBACKS: tuple[HSCandidate, ...] = (
    HSCandidate("8479", "Machines and mechanical appliances (generic)", Confidence.LOW),
    HSCandidate("3926", "Other articles of plastics (generic)", Confidence.LOW),
    HSCandidate("7326", "Other articles of iron or steel (generic)", Confidence.LOW),
)

TSHIRT_HS_CANDIDATE = HSCandidate(
    "6109", "T-shirts, singlets and other vests (knitted or crocheted)", Confidence.HIGH
)


def _pack(
    risk_level: RiskLevel,
    risk_reason: str,
    journey_stage: str,
    extra_documents: tuple[str, ...] = (),
    warnings: tuple[str, ...] = (),
    hs_candidates: tuple[HSCandidate, ...] = (),
) -> CategoryPack:
    """Build a pack whose documents start with the universal baseline."""
    return CategoryPack(
        risk_level=risk_level,
        risk_reason=risk_reason,
        journey_stage=journey_stage,
        documents=BASELINE_DOCUMENTS + extra_documents,
        warnings=warnings,
        hs_candidates=hs_candidates,
    )


_FOOD_DOCUMENTS = (
    "Ingredients / Product Specification Sheet",
    "Label Artwork / Label Text (if available)",
)

CATEGORY_PACKS: MappingProxyType[ProductCategory, CategoryPack] = MappingProxyType({
    ProductCategory.TEXTILE: _pack(
        RiskLevel.LOW,
        "Textile exports are usually straightforward if composition and labeling are correct.",
        "DOCS",
        ("Fabric Composition Certificate (if available)",),
        ("Confirm fabric composition (e.g., 100% cotton vs blends) for correct HS code.",),
        (
            HSCandidate("6205", "Men’s or boys’ shirts (not knitted)", Confidence.MEDIUM),
            HSCandidate("6110", "Sweaters, pullovers and similar articles (knitted)", Confidence.LOW),
        ),
    ),
    ProductCategory.SPICES: _pack(
        RiskLevel.MEDIUM,
        "Spices require correct HS chapter + labeling/ingredient details; may trigger food compliance checks.",
        "FOOD_COMPLIANCE",
        _FOOD_DOCUMENTS,
        ("Spices/blends may require labeling + allergen statements (if blended/processed).",),
        (
            HSCandidate("0904", "Pepper (capsicum/pimenta), dried or crushed", Confidence.MEDIUM),
            HSCandidate(
                "0910",
                "Ginger, saffron, turmeric, thyme, bay leaves, curry and other spices",
                Confidence.HIGH,
            ),
            HSCandidate(
                "0909",
                "Seeds of anise, badian, fennel, coriander, cumin, caraway, juniper",
                Confidence.MEDIUM,
            ),
        ),
    ),
    ProductCategory.FOOD: _pack(
        RiskLevel.MEDIUM,
        "Food exports often require labeling, allergen, shelf-life and destination compliance checks.",
        "FOOD_COMPLIANCE",
        _FOOD_DOCUMENTS,
        ("Food exports may require labeling/allergen/shelf-life checks depending on destination rules.",),
        (
            HSCandidate(
                "2008",
                "Fruits, nuts and other edible parts of plants, otherwise prepared or preserved",
                Confidence.MEDIUM,
            ),
            HSCandidate("2106", "Food preparations not elsewhere specified", Confidence.LOW),
            HSCandidate("1905", "Bread, pastry, cakes, biscuits and other baked goods", Confidence.LOW),
        ),
    ),
    ProductCategory.MACHINERY: _pack(
        RiskLevel.MEDIUM,
        "Machinery/parts need precise technical specs and end-use for classification.",
        "TECH_DOCS",
        ("Technical Datasheet / Manual", "End-use / Function Description"),
        ("Machines/parts often need clear technical specs and end-use to classify correctly.",),
        (
            HSCandidate("8466", "Parts and accessories for machine-tools", Confidence.MEDIUM),
            HSCandidate("8483", "Transmission shafts, gears and gearing; parts", Confidence.LOW),
            HSCandidate("8479", "Machines and mechanical appliances (other)", Confidence.LOW),
        ),
    ),
    ProductCategory.CHEMICALS: _pack(
        RiskLevel.HIGH,
        "Chemicals may be regulated and require SDS + dangerous goods compliance.",
        "HAZMAT",
        ("Safety Data Sheet (SDS/MSDS)", "Hazard Classification / UN number (if applicable)"),
        ("Chemicals may be regulated as dangerous goods; SDS and transport compliance are critical.",),
        (
            HSCandidate(
                "3814",
                "Organic composite solvents and thinners; prepared paint/varnish removers",
                Confidence.LOW,
            ),
            HSCandidate("3402", "Organic surface-active agents; washing preparations", Confidence.LOW),
            HSCandidate("2905", "Acyclic alcohols and their derivatives", Confidence.LOW),
        ),
    ),
    ProductCategory.ELECTRONICS: _pack(
        RiskLevel.MEDIUM,
        "Electronics can require conformity approvals and battery transport documentation.",
        "REGULATORY",
        ("Technical Specs Sheet", "Battery Transport Declaration (if applicable)"),
        (
            "Electronics may require destination approvals "
            "(e.g., radio/Bluetooth conformity, battery transport rules).",
        ),
        (
            HSCandidate(
                "8518",
                "Microphones and loudspeakers; audio-frequency amplifiers; parts",
                Confidence.MEDIUM,
            ),
            HSCandidate("8517", "Telephone/radio communication apparatus; parts", Confidence.LOW),
            HSCandidate("8504", "Electrical transformers, converters, power supplies", Confidence.LOW),
        ),
    ),
    ProductCategory.FURNITURE: _pack(
        RiskLevel.LOW,
        "Furniture is typically low risk but wood/packaging can require ISPM-15 compliance.",
        "DOCS",
        (
            "Material Composition Declaration (wood type/finish)",
            "Packaging/ISPM-15 statement (if wood packaging)",
        ),
        ("Wood/packaging may need ISPM-15 compliance depending on destination and packaging type.",),
        (
            HSCandidate("9403", "Other furniture and parts thereof", Confidence.MEDIUM),
            HSCandidate("9401", "Seats and parts thereof", Confidence.LOW),
            HSCandidate("4419", "Tableware and kitchenware, of wood", Confidence.LOW),
        ),
    ),
    ProductCategory.COSMETICS: _pack(
        RiskLevel.MEDIUM,
        "Cosmetics often require strict labeling/claims compliance in destination markets.",
        "LABEL_REVIEW",
        ("Ingredients (INCI) List", "Labeling & Claims Documentation"),
        ("Cosmetics often require strict labeling/claims compliance; verify destination cosmetic rules.",),
        (
            HSCandidate(
                "3304",
                "Beauty or make-up preparations and preparations for skin care",
                Confidence.MEDIUM,
            ),
            HSCandidate("3401", "Soap; organic surface-active products and preparations", Confidence.LOW),
            HSCandidate("3305", "Preparations for use on the hair", Confidence.LOW),
        ),
    ),
    ProductCategory.MEDICAL: _pack(
        RiskLevel.HIGH,
        "Medical/PPE often requires conformity documentation and quality certificates.",
        "MEDICAL_COMPLIANCE",
        ("Quality Certificates (ISO, CE/UKCA, etc.)", "Product Technical File (if applicable)"),
        (
            "Medical/PPE may require conformity markings and additional documentation "
            "depending on destination.",
        ),
        (
            HSCandidate("6307", "Other made up textile articles (includes many masks)", Confidence.MEDIUM),
            HSCandidate(
                "9018", "Instruments and appliances used in medical/surgical sciences", Confidence.LOW
            ),
            HSCandidate(
                "9020",
                "Breathing appliances and gas masks (excluding protective masks without mechanical parts)",
                Confidence.LOW,
            ),
        ),
    ),
    ProductCategory.UNKNOWN: _pack(
        RiskLevel.MEDIUM,
        "Not enough details to classify confidently. Provide composition/material/use.",
        "DETAILS_NEEDED",
        ("Detailed Product Description (use, composition, processing)",),
        ("More product details needed to classify correctly (composition, use, processing, materials).",),
    ),
})


def resolve_pack(category: ProductCategory) -> CategoryPack:
    """Look up the static pack for a category. Never returns None."""
    return CATEGORY_PACKS.get(category, CATEGORY_PACKS[ProductCategory.UNKNOWN])

"""Destination rule packs layered on top of the category pack.

The UK pack REPLACES the generic country rules, compliance checklist and
official links; every other pack APPENDS to them. Packs may carry per-category
sub-packs (e.g. UK food compliance) which always append on top of their parent.
"""

import enum
from dataclasses import dataclass, field
from types import MappingProxyType

from app.readiness_engine.classifier import FOOD_LIKE_CATEGORIES, ProductCategory
from app.readiness_engine.normalizer import normalize_country


class OverlayMode(str, enum.Enum):
    REPLACE = "replace"
    APPEND = "append"


@dataclass(frozen=True)
class CountryRule:
    title: str
    detail: str


@dataclass(frozen=True)
class OfficialLink:
    label: str
    url: str


@dataclass(frozen=True)
class CountryRulePack:
    """Destination-specific guidance overlay."""

    key: str
    mode: OverlayMode = OverlayMode.APPEND
    aliases: tuple[str, ...] = ()
    extra_documents: tuple[str, ...] = ()
    extra_warnings: tuple[str, ...] = ()
    extra_next_steps: tuple[str, ...] = ()
    country_rules: tuple[CountryRule, ...] = ()
    compliance_checklist: tuple[str, ...] = ()
    official_links: tuple[OfficialLink, ...] = ()
    journey_stage_override: str | None = None
    category_overlays: MappingProxyType = field(
        default_factory=lambda: MappingProxyType({})
    )

    def overlay_for(self, category: ProductCategory) -> "CountryRulePack | None":
        return self.category_overlays.get(category)


# ── Generic baseline shown for every destination ──

BASELINE_COUNTRY_RULES: tuple[CountryRule, ...] = (
    CountryRule("Importer of Record", "Confirm who is the Importer of Record for the shipment."),
    CountryRule(
        "Tariff & Duties",
        "Duties/VAT depend on HS code and origin. Confirm using official tariff tools.",
    ),
    CountryRule(
        "Invoice accuracy",
        "Invoice must match packing list and include HS, incoterm, values, origin, and currency.",
    ),
)

BASELINE_COMPLIANCE_CHECKLIST: tuple[str, ...] = (
    "Confirm Importer of Record (buyer or broker).",
    "Confirm final HS code using a tariff tool or broker.",
    "Prepare Commercial Invoice (HS, incoterm, values, origin, currency).",
    "Prepare Packing List (weights, cartons, dimensions).",
)

BASELINE_OFFICIAL_LINKS: tuple[OfficialLink, ...] = (
    OfficialLink("WCO HS information", "https://www.wcoomd.org/en/topics/nomenclature.aspx"),
    OfficialLink("UN/CEFACT trade facilitation", "https://unece.org/trade/cefact"),
)


# ── United Kingdom ──

UK_FOOD_PACK = CountryRulePack(
    key="uk_food",
    journey_stage_override="UK_FOOD_COMPLIANCE",
    extra_documents=("Ingredients / Product Specification Sheet",),
    country_rules=(
        CountryRule(
            "Food labeling",
            "UK food imports must comply with labeling rules (ingredients, allergens, net weight, "
            "expiry/best-before, importer details).",
        ),
        CountryRule(
            "Ingredients & allergens",
            "Maintain a clear ingredient list and allergen statement. Keep a product spec sheet ready.",
        ),
    ),
    compliance_checklist=(
        "Prepare Ingredients / Product Specification Sheet.",
        "Prepare label info: ingredients, allergens, net weight, dates, importer details.",
        "Confirm if any food certificates are needed (depends on product/category).",
    ),
    official_links=(
        OfficialLink("UK food labeling guidance", "https://www.gov.uk/food-labelling-and-packaging"),
        OfficialLink("Food Standards Agency (UK)", "https://www.food.gov.uk/"),
    ),
)

UK_PACK = CountryRulePack(
    key="uk",
    mode=OverlayMode.REPLACE,
    aliases=(
        "uk", "united kingdom", "great britain", "britain", "gb",
        "england", "scotland", "wales", "northern ireland",
    ),
    extra_documents=("EORI Number",),
    country_rules=(
        CountryRule(
            "Importer of Record",
            "Confirm who is the Importer of Record in the UK (buyer, agent, or broker).",
        ),
        CountryRule(
            "Tariff & Duties",
            "Duties/VAT depend on HS code and origin. Confirm with the UK Trade Tariff.",
        ),
        CountryRule(
            "Invoice accuracy",
            "Invoice must match packing list and include HS, incoterm, values, origin, and currency.",
        ),
    ),
    compliance_checklist=(
        "Confirm Importer of Record (buyer or broker).",
        "Confirm final HS code using the UK Trade Tariff or a broker.",
        "Prepare Commercial Invoice (HS, incoterm, values, origin, currency).",
        "Prepare Packing List (weights, cartons, dimensions).",
        "Confirm EORI details (usually importer).",
    ),
    official_links=(
        OfficialLink("UK Trade Tariff (duty lookup)", "https://www.trade-tariff.service.gov.uk/"),
        OfficialLink("Import goods into the UK (GOV.UK)", "https://www.gov.uk/import-goods-into-uk"),
    ),
    category_overlays=MappingProxyType(dict.fromkeys(FOOD_LIKE_CATEGORIES, UK_FOOD_PACK)),
)


# ── European Union ──

EU_MEMBER_STATES: tuple[str, ...] = (
    "austria", "belgium", "bulgaria", "croatia", "cyprus", "czech republic", "czechia",
    "denmark", "estonia", "finland", "france", "germany", "greece", "hungary", "ireland",
    "italy", "latvia", "lithuania", "luxembourg", "malta", "netherlands", "the netherlands",
    "holland", "poland", "portugal", "romania", "slovakia", "slovenia", "spain", "sweden",
)

EU_CONFORMITY_PACK = CountryRulePack(
    key="eu_conformity",
    extra_documents=("EU Declaration of Conformity (CE marking)",),
    extra_warnings=(
        "CE marking is mandatory for this product type before it is placed on the EU market.",
    ),
    compliance_checklist=(
        "Confirm applicable CE directives and prepare the EU Declaration of Conformity.",
    ),
)

EU_PACK = CountryRulePack(
    key="eu",
    aliases=("eu", "european union", "europe") + EU_MEMBER_STATES,
    extra_documents=("EORI Number",),
    extra_warnings=(
        "EU import VAT and customs duty are charged at the first point of entry; "
        "confirm who pays under your incoterm.",
    ),
    extra_next_steps=("Confirm the EU importer's EORI number",),
    country_rules=(
        CountryRule(
            "EU Customs Union",
            "Goods are cleared once at the first EU point of entry and then circulate "
            "within the single market.",
        ),
    ),
    compliance_checklist=(
        "Confirm the EU importer's EORI number.",
        "Check TARIC measures for your HS code.",
    ),
    official_links=(
        OfficialLink("Access2Markets (EU)", "https://trade.ec.europa.eu/access-to-markets/en/home"),
    ),
    category_overlays=MappingProxyType({
        ProductCategory.ELECTRONICS: EU_CONFORMITY_PACK,
        ProductCategory.MACHINERY: EU_CONFORMITY_PACK,
        ProductCategory.MEDICAL: EU_CONFORMITY_PACK,
    }),
)


# ── United Arab Emirates ──

UAE_FOOD_PACK = CountryRulePack(
    key="uae_food",
    extra_documents=("Health Certificate (food imports)",),
    extra_warnings=(
        "Food imports into the UAE need product registration with the local food "
        "authority before shipment.",
    ),
)

UAE_PACK = CountryRulePack(
    key="uae",
    aliases=("uae", "united arab emirates", "emirates", "dubai", "abu dhabi", "sharjah"),
    extra_documents=("Chamber of Commerce attestation (invoice and Certificate of Origin)",),
    extra_warnings=(
        "UAE customs requires the importer to hold a customs client code; confirm with your buyer.",
    ),
    extra_next_steps=("Confirm the UAE importer's customs registration",),
    country_rules=(
        CountryRule(
            "GCC Common Customs Law",
            "Most goods attract 5% customs duty on CIF value; confirm exemptions for your HS code.",
        ),
    ),
    compliance_checklist=("Confirm the importer's UAE customs client code.",),
    category_overlays=MappingProxyType(dict.fromkeys(FOOD_LIKE_CATEGORIES, UAE_FOOD_PACK)),
)


# ── India ──

INDIA_FOOD_PACK = CountryRulePack(
    key="india_food",
    extra_documents=("FSSAI Import Clearance (food)",),
    country_rules=(
        CountryRule(
            "FSSAI clearance",
            "Food imports are cleared by FSSAI at the port; labels must meet FSSAI labeling rules.",
        ),
    ),
    compliance_checklist=("Confirm FSSAI labeling and import clearance requirements.",),
)

INDIA_PACK = CountryRulePack(
    key="india",
    aliases=("india", "bharat", "republic of india"),
    extra_documents=("Importer's IEC (Importer-Exporter Code)",),
    extra_warnings=(
        "Indian import duty combines basic customs duty and IGST; confirm landed cost "
        "with the importer's customs broker.",
    ),
    extra_next_steps=("Confirm the Indian importer's IEC registration",),
    country_rules=(
        CountryRule(
            "Bill of Entry",
            "The importer files a Bill of Entry on ICEGATE for customs clearance.",
        ),
    ),
    compliance_checklist=("Confirm the importer's IEC and customs broker.",),
    official_links=(OfficialLink("ICEGATE (Indian Customs)", "https://www.icegate.gov.in/"),),
    category_overlays=MappingProxyType(dict.fromkeys(FOOD_LIKE_CATEGORIES, INDIA_FOOD_PACK)),
)


COUNTRY_PACKS: MappingProxyType = MappingProxyType({
    pack.key: pack for pack in (UK_PACK, EU_PACK, UAE_PACK, INDIA_PACK)
})

_ALIAS_INDEX: MappingProxyType = MappingProxyType({
    alias: pack for pack in COUNTRY_PACKS.values() for alias in pack.aliases
})


def resolve_country_pack(country: str | None) -> CountryRulePack | None:
    """Find the destination pack for a raw country name, or None."""
    return _ALIAS_INDEX.get(normalize_country(country))

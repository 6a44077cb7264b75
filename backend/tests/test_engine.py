"""End-to-end tests for classify_export_readiness: scenarios and invariants."""

import itertools

import pytest

from app.errors import InvalidQuery
from app.readiness_engine.assembler import UNIVERSAL_NEXT_STEPS
from app.readiness_engine.country_packs import UK_PACK
from app.readiness_engine.service import classify_export_readiness

PRODUCTS = [
    "cotton t-shirt",
    "Men's Shirt",
    "turmeric powder",
    "roasted makhana snack",
    "industrial gearbox",
    "paint thinner solvent",
    "bluetooth speaker",
    "oak dining table",
    "herbal face cream",
    "surgical mask",
    "xyz unclassifiable widget 123",
    "stainless steel pump",
]
COUNTRIES = ["UK", "U.K.", "Germany", "France", "UAE", "India", "Brazil", "Japan"]
EXPERIENCES = ["beginner", "intermediate", "expert"]
GRID = list(itertools.product(PRODUCTS, COUNTRIES, EXPERIENCES))


class TestScenarios:
    def test_cotton_tshirt_uk_beginner(self):
        r = classify_export_readiness("cotton t-shirt", "UK", "beginner")
        assert r.product_category.value == "textile"
        assert r.hs_code_suggestions[0].code == "6109"
        assert r.hs_code_suggestions[0].confidence.value == "HIGH"
        assert "EORI Number" in r.documents
        assert "Fabric Composition Certificate (if available)" in r.documents
        assert r.warnings[:2] == ["Hire a freight forwarder", "Avoid CIF pricing initially"]
        assert any("fabric composition" in w for w in r.warnings)
        assert r.recommended_incoterm == "DAP"
        assert r.destination_pack == "uk"

    def test_mens_shirt_uk_expert(self):
        r = classify_export_readiness("Men's Shirt", "UK", "expert")
        assert r.product_category.value == "textile"
        codes = [s.code for s in r.hs_code_suggestions]
        assert codes[0] == "6205"
        assert r.hs_code_suggestions[0].confidence.value == "MEDIUM"
        assert "6109" not in codes

    @pytest.mark.parametrize("product", ["grey hoodie", "knitted sweater"])
    def test_other_garments_skip_tshirt_code(self, product):
        r = classify_export_readiness(product, "India", "intermediate")
        codes = [s.code for s in r.hs_code_suggestions]
        assert codes[0] == "6205"
        assert "6109" not in codes

    def test_turmeric_germany_expert(self):
        r = classify_export_readiness("turmeric powder", "Germany", "expert")
        assert r.product_category.value == "spices"
        assert r.risk_level.value == "MEDIUM"
        assert r.journey_stage == "FOOD_COMPLIANCE"
        hs = {s.code: s.confidence.value for s in r.hs_code_suggestions}
        assert hs["0910"] == "HIGH"
        assert r.recommended_incoterm == "FOB"
        assert "Hire a freight forwarder" not in r.warnings
        assert "Avoid CIF pricing initially" not in r.warnings
        assert r.destination_pack == "eu"

    def test_gearbox_india_intermediate(self):
        r = classify_export_readiness("industrial gearbox", "India", "intermediate")
        assert r.product_category.value == "machinery"
        assert r.journey_stage == "TECH_DOCS"
        assert "Technical Datasheet / Manual" in r.documents
        assert r.hs_code_suggestions[0].code == "8466"
        assert "Importer's IEC (Importer-Exporter Code)" in r.documents
        assert r.next_steps == ["Confirm the Indian importer's IEC registration", *UNIVERSAL_NEXT_STEPS]

    def test_unknown_france_beginner(self):
        r = classify_export_readiness("xyz unclassifiable widget 123", "France", "beginner")
        assert r.product_category.value == "UNKNOWN"
        codes = [s.code for s in r.hs_code_suggestions]
        assert codes == ["UNKNOWN", "8479", "3926"]
        assert r.hs_note.startswith("No direct HS match found")
        assert r.next_steps[0] == "Add more product details for better HS classification"
        assert r.journey_stage == "DETAILS_NEEDED"

    @pytest.mark.parametrize("field", ["product", "country", "experience"])
    def test_missing_field_rejected(self, field):
        args = {"product": "cotton t-shirt", "country": "UK", "experience": "beginner"}
        args[field] = ""
        with pytest.raises(InvalidQuery) as exc_info:
            classify_export_readiness(**args)
        assert exc_info.value.missing_fields == [field]
        assert field in str(exc_info.value)

    def test_all_missing_fields_named(self):
        with pytest.raises(InvalidQuery) as exc_info:
            classify_export_readiness(None, "  ", None)
        assert exc_info.value.missing_fields == ["product", "country", "experience"]

    def test_unrecognised_experience(self):
        with pytest.raises(InvalidQuery, match="experience must be one of"):
            classify_export_readiness("cotton t-shirt", "UK", "guru")

    def test_experience_case_insensitive(self):
        r = classify_export_readiness("cotton t-shirt", "UK", " Beginner ")
        assert r.experience.value == "beginner"
        assert r.recommended_incoterm == "DAP"

    def test_uk_food(self):
        r = classify_export_readiness("turmeric powder", "United Kingdom", "expert")
        assert r.journey_stage == "UK_FOOD_COMPLIANCE"
        assert any(rule.title == "Food labeling" for rule in r.country_rules)

    def test_eu_electronics_conformity(self):
        r = classify_export_readiness("bluetooth speaker", "France", "expert")
        assert "EU Declaration of Conformity (CE marking)" in r.documents
        assert r.warnings[-1] == "If the product uses Bluetooth/radio, check destination conformity approvals."

    def test_unrecognised_destination_keeps_baseline(self):
        r = classify_export_readiness("oak dining table", "Brazil", "expert")
        assert r.destination_pack is None
        assert [rule.title for rule in r.country_rules] == [
            "Importer of Record", "Tariff & Duties", "Invoice accuracy",
        ]
        assert [link.label for link in r.official_links] == [
            "WCO HS information", "UN/CEFACT trade facilitation",
        ]


class TestInvariants:
    @pytest.mark.parametrize("product, country, experience", GRID)
    def test_response_invariants(self, product, country, experience):
        r = classify_export_readiness(product, country, experience)

        codes = [s.code for s in r.hs_code_suggestions]
        assert len(codes) == 3
        assert len(set(codes)) == 3
        assert [e.code for e in r.hs_explanations] == codes

        assert len(r.documents) == len(set(r.documents))
        for doc in ("Commercial Invoice", "Packing List", "Certificate of Origin"):
            assert doc in r.documents

        assert len(r.warnings) >= 1
        assert len(r.warnings) == len(set(r.warnings))
        assert r.next_steps[-3:] == list(UNIVERSAL_NEXT_STEPS)
        assert r.country_rules and r.compliance_checklist and r.official_links
        assert r.allowed is True

    @pytest.mark.parametrize("product, country, experience", GRID[::7])
    def test_deterministic(self, product, country, experience):
        first = classify_export_readiness(product, country, experience).model_dump_json()
        second = classify_export_readiness(product, country, experience).model_dump_json()
        assert first == second

    @pytest.mark.parametrize("country", ["uk", "UK", "U.K.", "United Kingdom"])
    @pytest.mark.parametrize("product", ["cotton t-shirt", "industrial gearbox", "surgical mask"])
    def test_uk_override_exact(self, country, product):
        r = classify_export_readiness(product, country, "intermediate")
        assert [(x.title, x.detail) for x in r.country_rules] == [
            (x.title, x.detail) for x in UK_PACK.country_rules
        ]
        assert r.compliance_checklist == list(UK_PACK.compliance_checklist)
        assert [(x.label, x.url) for x in r.official_links] == [
            (x.label, x.url) for x in UK_PACK.official_links
        ]
        assert "EORI Number" in r.documents

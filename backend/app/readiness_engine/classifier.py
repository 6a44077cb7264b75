"""Keyword classifier mapping free-text product descriptions to a category.

Pure function, no DB or network dependency. Keyword groups are tested in
order and the first group with a substring hit wins. Spices and textiles are
tested before the broader food bucket so terms like "turmeric" never fall
through to generic food.
"""

import enum

from app.readiness_engine.normalizer import normalize_product


class ProductCategory(str, enum.Enum):
    TEXTILE = "textile"
    SPICES = "spices"
    FOOD = "food"
    MACHINERY = "machinery"
    CHEMICALS = "chemicals"
    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    COSMETICS = "cosmetics"
    MEDICAL = "medical"
    UNKNOWN = "UNKNOWN"


# Order matters: first match wins.
CATEGORY_KEYWORDS: tuple[tuple[ProductCategory, tuple[str, ...]], ...] = (
    (
        ProductCategory.SPICES,
        (
            "spice", "spices", "masala", "turmeric", "haldi", "chilli", "chili",
            "pepper", "cumin", "jeera", "coriander", "dhania",
        ),
    ),
    (
        ProductCategory.TEXTILE,
        (
            "t-shirt", "tshirt", "tee", "shirt", "hoodie", "sweater", "cotton",
            "garment", "clothing", "apparel", "textile", "fabric",
        ),
    ),
    (
        ProductCategory.FOOD,
        ("food", "snack", "makhana", "fox nut", "nuts", "dry fruit"),
    ),
    (
        ProductCategory.MACHINERY,
        (
            "machine", "machinery", "cnc", "gear", "bearing", "spare", "part",
            "valve", "pump", "motor", "compressor",
        ),
    ),
    (
        ProductCategory.CHEMICALS,
        (
            "solvent", "chemical", "cleaner", "acid", "alkali", "detergent",
            "paint", "adhesive", "resin", "flammable", "hazard",
        ),
    ),
    (
        ProductCategory.ELECTRONICS,
        (
            "bluetooth", "speaker", "headphone", "earphone", "charger", "battery",
            "electronics", "pcb", "circuit", "wireless", "radio",
        ),
    ),
    (
        ProductCategory.FURNITURE,
        ("table", "chair", "sofa", "furniture", "wood", "timber", "cabinet", "bed", "dining"),
    ),
    (
        ProductCategory.COSMETICS,
        (
            "cosmetic", "cream", "lotion", "skincare", "skin care", "makeup",
            "shampoo", "soap", "beauty",
        ),
    ),
    (
        ProductCategory.MEDICAL,
        ("mask", "surgical", "medical", "ppe", "glove", "bandage", "thermometer", "diagnostic"),
    ),
)

# Categories that pick up food-compliance overlays at the destination.
FOOD_LIKE_CATEGORIES = frozenset({ProductCategory.FOOD, ProductCategory.SPICES})


def classify(product: str | None) -> ProductCategory:
    """Assign exactly one category to a product description.

    Returns ProductCategory.UNKNOWN when no keyword matches.
    """
    text = normalize_product(product)
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return ProductCategory.UNKNOWN

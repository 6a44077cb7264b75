"""Entry point for the export readiness engine.

Normalizer -> Classifier -> Pack Resolver -> Assembler. Synchronous and
stateless; safe to call concurrently from any number of request handlers.
"""

import logging

from app.readiness_engine.assembler import assemble
from app.readiness_engine.classifier import classify
from app.readiness_engine.packs import resolve_pack
from app.readiness_engine.query import build_query
from app.schemas.export_check import ExportReadinessResponse

logger = logging.getLogger("readiness.engine")


def classify_export_readiness(
    product: str | None,
    country: str | None,
    experience: str | None,
) -> ExportReadinessResponse:
    """Classify one export query into a complete readiness response.

    Args:
        product: Free-text product description.
        country: Destination country name or alias (e.g. "U.K.", "Germany").
        experience: beginner, intermediate or expert.

    Returns:
        ExportReadinessResponse with exactly three HS suggestions.

    Raises:
        InvalidQuery: if any input is missing, or experience is not recognised.
    """
    query = build_query(product, country, experience)
    category = classify(query.product)
    response = assemble(query, category, resolve_pack(category))

    logger.debug(
        "Classified product=%r country=%r -> category=%s risk=%s destination=%s",
        query.product,
        query.country,
        category.value,
        response.risk_level.value,
        response.destination_pack,
    )
    return response

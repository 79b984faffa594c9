"""Related product selection.

Candidates are taken in three tiers: products in the same category, then
products from the same brand, then a random sample of whatever is left.
The source product is never recommended and no id appears twice.
"""

import random
from collections.abc import Iterable

import structlog

from storefront.catalog.models import Product
from storefront.domain.exceptions import InvalidArgumentError

logger = structlog.get_logger()


def _rank_by_similarity(product: Product, candidates: list[Product]) -> list[Product]:
    """Order candidates by the source's precomputed similarity scores.

    An id linked more than once keeps its highest score. Unknown ids
    score 0; the sort is stable so ties keep pool order.
    """
    scores: dict[int, float] = {}
    for related in product.related_products:
        scores[related.id] = max(related.similarity, scores.get(related.id, 0.0))
    return sorted(candidates, key=lambda p: scores.get(p.id, 0.0), reverse=True)


def recommend(
    product: Product,
    pool: Iterable[Product],
    count: int,
    *,
    rng: random.Random | None = None,
    rank_by_similarity: bool = False,
) -> list[Product]:
    """Select up to count products related to product.

    Args:
        product: Source product.
        pool: Candidate products.
        count: Maximum number of recommendations.
        rng: Random source for the fallback tier.
        rank_by_similarity: Order the category and brand tiers by the
            source's precomputed related product similarity.

    Returns:
        Recommended products, at most count, without the source product.

    Raises:
        InvalidArgumentError: If count is negative.
    """
    if count < 0:
        raise InvalidArgumentError("count", count, "cannot be negative")
    if count == 0:
        return []

    same_category: list[Product] = []
    same_brand: list[Product] = []
    others: list[Product] = []
    seen: set[int] = {product.id}

    # One pass: each eligible id lands in the highest tier it qualifies for
    for candidate in pool:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        if candidate.category == product.category:
            same_category.append(candidate)
        elif candidate.brand == product.brand:
            same_brand.append(candidate)
        else:
            others.append(candidate)

    if rank_by_similarity:
        same_category = _rank_by_similarity(product, same_category)
        same_brand = _rank_by_similarity(product, same_brand)

    recommendations = (same_category + same_brand)[:count]

    remaining = count - len(recommendations)
    if remaining > 0 and others:
        rng = rng or random.Random()
        recommendations.extend(rng.sample(others, min(remaining, len(others))))

    logger.debug(
        "Recommendations selected",
        product_id=product.id,
        requested=count,
        returned=len(recommendations),
    )
    return recommendations

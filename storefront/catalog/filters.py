"""Product filtering and sorting.

Predicates in a FilterSpec are combined with AND and evaluated in one
pass over the input. Results are always new lists; the input collection
is never reordered, so one catalog can be shared by concurrent readers.
"""

import locale
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from storefront.catalog.models import Product

logger = structlog.get_logger()


class SortBy(str, Enum):
    """Supported sort orders."""

    NAME = "name"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"


# Query parameter aliases, both the snake_case and camelCase spellings
_FIELD_ALIASES = {
    "category": "category",
    "brand": "brand",
    "min_price": "min_price",
    "minPrice": "min_price",
    "max_price": "max_price",
    "maxPrice": "max_price",
    "min_rating": "min_rating",
    "minRating": "min_rating",
    "max_rating": "max_rating",
    "maxRating": "max_rating",
    "search": "search",
    "sort_by": "sort_by",
    "sortBy": "sort_by",
}

_NUMERIC_FIELDS = {"min_price", "max_price", "min_rating", "max_rating"}


@dataclass(frozen=True)
class FilterSpec:
    """Filter parameters for product queries.

    A field left as None places no constraint on its dimension. Price and
    rating bounds are inclusive and are not checked against each other:
    an inverted range simply matches nothing.

    Attributes:
        category: Exact category name.
        brand: Exact brand name.
        min_price: Minimum price.
        max_price: Maximum price.
        min_rating: Minimum rating.
        max_rating: Maximum rating.
        search: Case-insensitive text matched against name, description and tags.
        sort_by: Result ordering, None keeps input order.
    """

    category: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    search: str | None = None
    sort_by: SortBy | None = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "FilterSpec":
        """Build a FilterSpec from loose query parameters.

        Unrecognized keys are ignored, empty strings count as absent and
        numeric strings are parsed. An unknown sort order is logged and
        dropped.

        Args:
            params: Query parameters.

        Returns:
            FilterSpec instance.

        Raises:
            ValueError: If a numeric field cannot be parsed.
        """
        values: dict[str, Any] = {}
        for key, value in params.items():
            name = _FIELD_ALIASES.get(key)
            if name is None or value is None or value == "":
                continue
            if name in _NUMERIC_FIELDS:
                value = float(value)
            elif name == "sort_by":
                try:
                    value = SortBy(value)
                except ValueError:
                    logger.warning("Ignoring unknown sort order", sort_by=value)
                    continue
            values[name] = value
        return cls(**values)

    def active_fields(self) -> list[str]:
        """Get names of the constraints that are set."""
        return [
            name
            for name in (
                "category", "brand", "min_price", "max_price",
                "min_rating", "max_rating", "search", "sort_by",
            )
            if getattr(self, name) not in (None, "")
        ]


def _build_predicates(spec: FilterSpec) -> list[Callable[[Product], bool]]:
    """Build one predicate per active constraint.

    Args:
        spec: Filter specification.

    Returns:
        List of predicates, all of which must hold.
    """
    predicates: list[Callable[[Product], bool]] = []

    if spec.category:
        predicates.append(lambda p: p.category == spec.category)

    if spec.brand:
        predicates.append(lambda p: p.brand == spec.brand)

    if spec.min_price is not None:
        predicates.append(lambda p: p.price >= spec.min_price)

    if spec.max_price is not None:
        predicates.append(lambda p: p.price <= spec.max_price)

    if spec.min_rating is not None:
        predicates.append(lambda p: p.rating >= spec.min_rating)

    if spec.max_rating is not None:
        predicates.append(lambda p: p.rating <= spec.max_rating)

    if spec.search:
        search_lower = spec.search.lower()
        predicates.append(
            lambda p: search_lower in p.name.lower()
            or search_lower in p.description.lower()
            or any(search_lower in tag.lower() for tag in p.tags)
        )

    return predicates


def _name_key(product: Product) -> tuple[str, str]:
    """Collation key for name order.

    Names are case folded and collated with locale.strxfrm, so the order
    follows the process LC_COLLATE category (see the collation_locale
    setting). Under the default C locale this is code point order of the
    folded name. The raw name breaks ties between names that fold equal.
    """
    return locale.strxfrm(product.name.casefold()), product.name


def sort_products(products: Iterable[Product], sort_by: SortBy | None) -> list[Product]:
    """Sort products into a new list.

    Sorting is stable, so products with equal keys keep their input order.

    Args:
        products: Products to sort.
        sort_by: Sort order, None to keep input order.

    Returns:
        New sorted list.
    """
    if sort_by is None:
        return list(products)
    if sort_by == SortBy.NAME:
        return sorted(products, key=_name_key)
    if sort_by == SortBy.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort_by == SortBy.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by == SortBy.RATING_DESC:
        return sorted(products, key=lambda p: p.rating, reverse=True)
    return list(products)


def filter_products(
    products: Iterable[Product],
    spec: FilterSpec | None = None,
) -> list[Product]:
    """Filter and sort products.

    Args:
        products: Products to filter.
        spec: Filter specification, None for no constraints.

    Returns:
        New list of matching products, sorted if spec.sort_by is set.
    """
    if spec is None:
        return list(products)

    predicates = _build_predicates(spec)
    if predicates:
        filtered = [p for p in products if all(pred(p) for pred in predicates)]
    else:
        filtered = list(products)

    return sort_products(filtered, spec.sort_by)

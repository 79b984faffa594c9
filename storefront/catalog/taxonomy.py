"""Storefront taxonomy.

The catalog draws categories and brands from two closed enumerations of
eight values each. Assignment is a pure function of the product id:

    category = CATEGORIES[id % 8]
    brand    = BRANDS[(id // 8) % 8]

so every category holds an even share of any catalog, and each
(category, brand) pair occurs once in every 64 consecutive ids.
"""

# ============================================================================
# Enumerations
# ============================================================================

CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Clothing",
    "Home & Kitchen",
    "Books",
    "Toys",
    "Beauty",
    "Sports",
    "Automotive",
)

BRANDS: tuple[str, ...] = (
    "TechGiant",
    "FashionHub",
    "HomeEssentials",
    "BookWorld",
    "ToyLand",
    "BeautyGlow",
    "SportsMaster",
    "AutoPro",
)

# ============================================================================
# Vocabularies
# ============================================================================

# Product nouns by category
CATEGORY_NOUNS: dict[str, tuple[str, ...]] = {
    "Electronics": ("Headphones", "Speaker", "Tablet", "Smartwatch", "Charger"),
    "Clothing": ("T-Shirt", "Jacket", "Jeans", "Hoodie", "Sneakers"),
    "Home & Kitchen": ("Blender", "Cookware Set", "Lamp", "Coffee Maker", "Kettle"),
    "Books": ("Novel", "Cookbook", "Guide", "Handbook", "Anthology"),
    "Toys": ("Puzzle", "Board Game", "Playset", "Building Kit", "Plush"),
    "Beauty": ("Serum", "Moisturizer", "Palette", "Shampoo", "Fragrance"),
    "Sports": ("Yoga Mat", "Dumbbells", "Water Bottle", "Racket", "Backpack"),
    "Automotive": ("Dash Cam", "Tire Inflator", "Seat Cover", "Car Vacuum", "Jump Starter"),
}

# Adjectives for product names
ADJECTIVES: tuple[str, ...] = (
    "Premium", "Elite", "Pro", "Ultra", "Max", "Plus",
    "Classic", "Essential", "Advanced", "Smart", "Dynamic",
    "Flex", "Prime", "Apex", "Core", "Nova", "Titan",
)

# Searchable keywords mixed into product tags
TAG_KEYWORDS: tuple[str, ...] = (
    "product", "special", "new", "premium", "limited", "exclusive",
    "best", "top", "quality", "value", "discount", "sale", "offer",
    "deal", "popular", "trending", "featured", "recommended", "hot",
)


# ============================================================================
# Assignment
# ============================================================================


def category_for(product_id: int) -> str:
    """Get the category assigned to a product id.

    Args:
        product_id: Product id (1-based).

    Returns:
        Category name from CATEGORIES.
    """
    return CATEGORIES[product_id % len(CATEGORIES)]


def brand_for(product_id: int) -> str:
    """Get the brand assigned to a product id.

    Args:
        product_id: Product id (1-based).

    Returns:
        Brand name from BRANDS.
    """
    return BRANDS[(product_id // len(CATEGORIES)) % len(BRANDS)]


def nouns_for(category: str) -> tuple[str, ...]:
    """Get product nouns for a category, falling back to a generic noun."""
    return CATEGORY_NOUNS.get(category, ("Product",))

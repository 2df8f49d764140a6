"""Product aggregate.

Products are read-only to the pricing engine: the catalog is managed
elsewhere and only fetched here to resolve names, images and prices.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sweetshop.domain.exceptions import ValidationError
from sweetshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class SizeVariant:
    """One purchasable size of a product, e.g. ``("500g", ₹280)``."""

    label: str
    price: Money


@dataclass
class Product:
    """A sweet in the catalog.

    Use ``Product.create()`` wherever records enter the domain — it
    enforces the size invariants.  The ``__init__`` does not validate.
    """

    id: str
    name: str
    sizes: list[SizeVariant]
    description: str = ""
    image: str = ""
    tags: list[str] = field(default_factory=list)
    featured: bool = False

    @staticmethod
    def create(
        id: str,
        name: str,
        sizes: list[SizeVariant],
        description: str = "",
        image: str = "",
        tags: list[str] | None = None,
        featured: bool = False,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not sizes:
            raise ValidationError(f"Product '{name}' must have at least one size")

        labels = [s.label for s in sizes]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValidationError(
                f"Duplicate size labels for '{name}': {', '.join(duplicates)}"
            )

        return Product(
            id=id,
            name=name.strip(),
            sizes=list(sizes),
            description=description,
            image=image,
            tags=list(tags or []),
            featured=featured,
        )

    def price_for(self, size_label: str) -> Money:
        for variant in self.sizes:
            if variant.label == size_label:
                return variant.price
        available = ", ".join(s.label for s in self.sizes)
        raise ValidationError(
            f"{self.name} is not sold in size '{size_label}' (available: {available})"
        )

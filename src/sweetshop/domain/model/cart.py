"""Cart aggregate — the shopper's selected line items.

A cart is ephemeral: it lives as long as one shopping session and is
never persisted.  Line items are identified by (product id, size label).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from sweetshop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLineItem:
    """A product/size selection with a price snapshot.

    Immutable: the cart swaps in a new line when the quantity changes.
    ``unit_price``, ``product_name`` and ``image`` are captured when the
    item is added so later catalog edits do not reprice the cart.
    """

    product_id: str
    size: str
    quantity: Quantity
    unit_price: Money  # locked at add time
    product_name: str
    image: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.product_id, self.size)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariant: no two line items share the same ``key``.
    """

    items: list[CartLineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartLineItem) -> None:
        """Append *item*, or merge it into the line with the same key.

        Merging adds the incoming quantity; the existing price snapshot
        is kept.
        """
        index = self._index_of(item.product_id, item.size)
        if index is None:
            self.items.append(item)
        else:
            existing = self.items[index]
            self.items[index] = replace(
                existing, quantity=existing.quantity + item.quantity
            )

    def update_quantity(self, product_id: str, size: str, quantity: int) -> None:
        """Replace the quantity of a line.  No-op if the line is absent."""
        new_quantity = Quantity(quantity)
        index = self._index_of(product_id, size)
        if index is not None:
            self.items[index] = replace(self.items[index], quantity=new_quantity)

    def remove_item(self, product_id: str, size: str) -> None:
        """Drop the line if present.  Removing an absent line is a no-op."""
        self.items = [
            item for item in self.items if item.key != (product_id, size)
        ]

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        """Total units in the cart, shown on the cart badge."""
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def product_ids(self) -> set[str]:
        return {item.product_id for item in self.items}

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str, size: str) -> int | None:
        for index, item in enumerate(self.items):
            if item.key == (product_id, size):
                return index
        return None

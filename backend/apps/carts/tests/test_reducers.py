import unittest
from decimal import Decimal

from apps.carts import reducers
from apps.carts.commands import AddItem, ClearCart, LoadCart, RemoveItem, UpdateQuantity
from apps.carts.dtos import CartItemDTO
from apps.catalog.dtos import ProductSnapshot


def make_product(product_id="R1", price="8500"):
    return ProductSnapshot(id=product_id, name=f"Product {product_id}", price=Decimal(price))


class CartReducerTests(unittest.TestCase):
    def setUp(self):
        self.ring = make_product("R1", "8500")
        self.earring = make_product("E1", "3200")

    def test_add_appends_new_product_in_insertion_order(self):
        items = reducers.add_item([], self.ring, 1)
        items = reducers.add_item(items, self.earring, 2)
        self.assertEqual([i.product.id for i in items], ["R1", "E1"])
        self.assertEqual([i.quantity for i in items], [1, 2])

    def test_add_existing_product_accumulates_quantity(self):
        items = reducers.add_item([], self.ring, 2)
        items = reducers.add_item(items, self.ring, 3)
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].quantity, 5)

    def test_add_does_not_mutate_input(self):
        original = [CartItemDTO(product=self.ring, quantity=1)]
        snapshot = list(original)
        reducers.add_item(original, self.ring, 4)
        self.assertEqual(original, snapshot)
        self.assertEqual(original[0].quantity, 1)

    def test_remove_absent_product_leaves_items_unchanged(self):
        items = [CartItemDTO(product=self.ring, quantity=2)]
        self.assertEqual(reducers.remove_item(items, "missing"), items)

    def test_update_quantity_sets_value(self):
        items = [
            CartItemDTO(product=self.ring, quantity=2),
            CartItemDTO(product=self.earring, quantity=1),
        ]
        updated = reducers.update_quantity(items, "E1", 7)
        self.assertEqual([(i.product.id, i.quantity) for i in updated], [("R1", 2), ("E1", 7)])

    def test_update_quantity_zero_or_negative_removes(self):
        items = [CartItemDTO(product=self.ring, quantity=2)]
        self.assertEqual(reducers.update_quantity(items, "R1", 0), [])
        self.assertEqual(reducers.update_quantity(items, "R1", -3), [])

    def test_update_quantity_for_unknown_product_creates_nothing(self):
        items = [CartItemDTO(product=self.ring, quantity=2)]
        self.assertEqual(reducers.update_quantity(items, "E1", 4), items)

    def test_load_collapses_repeated_products(self):
        loaded = [
            CartItemDTO(product=self.ring, quantity=1),
            CartItemDTO(product=self.earring, quantity=1),
            CartItemDTO(product=self.ring, quantity=2),
        ]
        items = reducers.reduce_cart([], LoadCart(items=loaded))
        self.assertEqual([(i.product.id, i.quantity) for i in items], [("R1", 3), ("E1", 1)])

    def test_reduce_cart_dispatches_commands(self):
        items = reducers.reduce_cart([], AddItem(product=self.ring, quantity=2))
        items = reducers.reduce_cart(items, UpdateQuantity(product_id="R1", quantity=5))
        self.assertEqual(items[0].quantity, 5)
        items = reducers.reduce_cart(items, AddItem(product=self.earring))
        items = reducers.reduce_cart(items, RemoveItem(product_id="R1"))
        self.assertEqual([i.product.id for i in items], ["E1"])
        self.assertEqual(reducers.reduce_cart(items, ClearCart()), [])


if __name__ == "__main__":
    unittest.main()

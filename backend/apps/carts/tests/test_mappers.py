import unittest
from decimal import Decimal

from apps.carts.dtos import CartItemDTO
from apps.carts.mappers import CartItemMapper
from apps.catalog.dtos import ProductSnapshot


class CartItemMapperTests(unittest.TestCase):
    def setUp(self):
        self.mapper = CartItemMapper()
        self.item = CartItemDTO(
            product=ProductSnapshot(id="R1", name="Kundan Ring", price=Decimal("8500")),
            quantity=2,
        )

    def test_to_dict_is_json_compatible(self):
        data = self.mapper.to_dict(self.item)
        self.assertEqual(data["quantity"], 2)
        self.assertEqual(data["product"]["id"], "R1")
        self.assertEqual(data["product"]["price"], "8500")

    def test_from_dict_accepts_catalog_document_shape(self):
        item = self.mapper.from_dict(
            {"product": {"_id": "R1", "name": "Kundan Ring", "price": 8500}, "quantity": 2}
        )
        self.assertEqual(item, self.item)

    def test_from_dict_rejects_invalid_quantity(self):
        for quantity in (None, "2", 0, -1, True):
            with self.subTest(quantity=quantity):
                with self.assertRaises(ValueError):
                    self.mapper.from_dict({"product": {"id": "R1"}, "quantity": quantity})

    def test_from_dict_rejects_non_object(self):
        with self.assertRaises(ValueError):
            self.mapper.from_dict(["R1", 2])

    def test_many_to_dict(self):
        self.assertEqual(len(self.mapper.many_to_dict([self.item, self.item])), 2)


if __name__ == "__main__":
    unittest.main()

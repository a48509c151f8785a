from django.conf import settings
from rest_framework import status
from rest_framework.test import APIClient, APITestCase


RING = {"_id": "R1", "name": "Temple Ring", "price": 8500, "category": "rings"}
EARRING = {"_id": "E1", "name": "Jhumka", "price": 3200, "category": "earrings"}


class CartSessionApiTests(APITestCase):
    cart_url = "/api/cart/"
    items_url = "/api/cart/items/"

    def item_url(self, product_id):
        return f"/api/cart/items/{product_id}/"

    def test_cart_survives_across_requests_in_same_session(self):
        res = self.client.post(self.items_url, {"product": RING, "quantity": 1}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.client.post(self.items_url, {"product": EARRING, "quantity": 2}, format="json")

        res = self.client.get(self.cart_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([i["product"]["id"] for i in res.data["items"]], ["R1", "E1"])
        self.assertEqual([i["quantity"] for i in res.data["items"]], [1, 2])
        self.assertEqual(res.data["totalItems"], 3)
        self.assertEqual(res.data["totalPrice"], "14900.00")

    def test_quantity_update_and_removal(self):
        self.client.post(self.items_url, {"product": RING, "quantity": 1}, format="json")
        res = self.client.patch(self.item_url("R1"), {"quantity": 4}, format="json")
        self.assertEqual(res.data["totalItems"], 4)
        res = self.client.patch(self.item_url("R1"), {"quantity": 0}, format="json")
        self.assertEqual(res.data["items"], [])
        self.assertEqual(self.client.get(self.cart_url).data["totalItems"], 0)

    def test_other_visitor_does_not_see_cart(self):
        self.client.post(self.items_url, {"product": RING}, format="json")
        stranger = APIClient()
        res = stranger.get(self.cart_url)
        self.assertEqual(res.data["items"], [])

    def test_corrupt_session_slot_degrades_to_empty_cart(self):
        session = self.client.session
        session[settings.CART_STORAGE_KEY] = "{definitely not json"
        session.save()
        res = self.client.get(self.cart_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["items"], [])
        res = self.client.post(self.items_url, {"product": RING}, format="json")
        self.assertEqual(res.data["totalItems"], 1)

    def test_clear_cart(self):
        self.client.post(self.items_url, {"product": RING, "quantity": 2}, format="json")
        res = self.client.delete(self.cart_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get(self.cart_url).data["items"], [])

    def test_large_cart_totals_render_and_persist(self):
        necklace = {"_id": "N9", "name": "Bridal Set", "price": "9999999999.99"}
        res = self.client.post(
            self.items_url, {"product": necklace, "quantity": 1_000_000}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["totalPrice"], "9999999999990000.00")
        self.assertEqual(res.data["items"][0]["lineTotal"], "9999999999990000.00")
        res = self.client.get(self.cart_url)
        self.assertEqual(res.data["totalItems"], 1_000_000)

    def test_quantity_above_limit_is_rejected_without_touching_cart(self):
        self.client.post(self.items_url, {"product": RING, "quantity": 1}, format="json")
        res = self.client.post(
            self.items_url, {"product": RING, "quantity": 10**11}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "VALIDATION_ERROR")
        self.assertIn("quantity", res.data["error"]["details"])
        res = self.client.patch(self.item_url("R1"), {"quantity": 10**11}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.client.get(self.cart_url).data["totalItems"], 1)

    def test_unsupported_method_uses_error_envelope(self):
        res = self.client.put(self.cart_url, {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(res.data["error"]["code"], "METHOD_NOT_ALLOWED")
        self.assertIn("GET", res["Allow"])

    def test_session_cookie_is_same_site_lax(self):
        res = self.client.post(self.items_url, {"product": RING}, format="json")
        cookie = res.cookies[settings.SESSION_COOKIE_NAME]
        self.assertEqual(cookie["samesite"], "Lax")
        self.assertTrue(cookie["httponly"])

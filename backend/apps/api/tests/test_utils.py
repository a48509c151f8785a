import unittest
from rest_framework import status
from rest_framework.exceptions import ValidationError
from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "missing", {"id": "R1"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "R1"})

    def test_unknown_code_falls_back_to_bad_request(self):
        resp = error_response("cart_locked", "Cart is locked")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["error"]["code"], "CART_LOCKED")

    def test_custom_status_override_and_headers(self):
        resp = error_response(
            "SERVICE_UNAVAILABLE",
            "Session storage offline",
            http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
            headers={"Retry-After": 30},
        )
        self.assertEqual(resp.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(resp["Retry-After"], "30")
        self.assertNotIn("details", resp.data["error"])

    def test_validation_error_details_are_normalized(self):
        resp = error_response(
            "VALIDATION_ERROR", "Invalid", ValidationError({"quantity": ["bad"]})
        )
        self.assertEqual(resp.data["error"]["details"], {"quantity": ["bad"]})

    def test_blank_message_is_rejected(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")

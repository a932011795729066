"""Tests for shared error handling, response headers and the media store."""

from unittest.mock import MagicMock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from google.api_core.exceptions import NotFound as GCSNotFound
from rest_framework import serializers
from rest_framework.exceptions import NotFound

from apps.core.exceptions import BookingConflict, custom_exception_handler
from apps.core.services.storage_service import GCSStorageService


class ExceptionHandlerTests(SimpleTestCase):

    def test_api_exception_body(self) -> None:
        response = custom_exception_handler(BookingConflict(), {})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data, {
            "error": True,
            "message": "Selected date is already booked",
            "status_code": 409,
        })

    def test_field_errors(self) -> None:
        exc = serializers.ValidationError({"phone": ["This field is required."]})

        response = custom_exception_handler(exc, {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "Validation failed")
        self.assertIn("phone", response.data["errors"])

    def test_list_errors_become_message(self) -> None:
        response = custom_exception_handler(serializers.ValidationError("No file uploaded"), {})

        self.assertEqual(response.data["message"], "No file uploaded")

    def test_unexpected_error_is_500(self) -> None:
        response = custom_exception_handler(RuntimeError("boom"), {"view": None})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["message"], "Internal server error")

    def test_not_found_message(self) -> None:
        response = custom_exception_handler(NotFound("Booking not found"), {})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "Booking not found")


class NoCacheHeaderTests(TestCase):

    def test_api_responses_are_not_cacheable(self) -> None:
        response = self.client.get(reverse("booking-list"))

        self.assertIn("no-store", response["Cache-Control"])
        self.assertEqual(response["Pragma"], "no-cache")
        self.assertEqual(response["Expires"], "0")


class GCSStorageServiceTests(SimpleTestCase):

    def setUp(self) -> None:
        self.storage = GCSStorageService(bucket_name="venue-test-bucket", timeout=9)
        self.storage._bucket = MagicMock()
        self.blob = self.storage._bucket.blob.return_value
        self.blob.public_url = "https://storage.googleapis.com/venue-test-bucket/gallery/x.png"

    def test_upload_makes_blob_public(self) -> None:
        image = SimpleUploadedFile("hall.png", b"png-bytes", content_type="image/png")

        result = self.storage.upload_image(image, folder="gallery")

        self.assertEqual(result["url"], self.blob.public_url)
        self.assertTrue(result["public_id"].startswith("gallery/"))
        self.assertTrue(result["public_id"].endswith(".png"))
        self.assertEqual(self.blob.upload_from_file.call_args.kwargs["timeout"], 9)
        self.blob.make_public.assert_called_once_with(timeout=9)

    def test_upload_rejects_non_images(self) -> None:
        document = SimpleUploadedFile("notes.pdf", b"%PDF", content_type="application/pdf")

        self.assertIsNone(self.storage.upload_image(document))
        self.blob.upload_from_file.assert_not_called()

    def test_upload_rejects_large_files(self) -> None:
        image = SimpleUploadedFile("big.png", b"x" * (2 * 1024 * 1024), content_type="image/png")

        self.assertIsNone(self.storage.upload_image(image, max_size_mb=1))

    def test_upload_error_returns_none(self) -> None:
        self.blob.upload_from_file.side_effect = IOError("network")
        image = SimpleUploadedFile("hall.png", b"png-bytes", content_type="image/png")

        self.assertIsNone(self.storage.upload_image(image))

    def test_delete(self) -> None:
        self.assertTrue(self.storage.delete_image("gallery/x.png"))
        self.storage._bucket.blob.assert_called_with("gallery/x.png")
        self.blob.delete.assert_called_once_with(timeout=9)

    def test_delete_missing_blob_counts_as_deleted(self) -> None:
        self.blob.delete.side_effect = GCSNotFound("gone")

        self.assertTrue(self.storage.delete_image("gallery/x.png"))

    def test_delete_error_returns_false(self) -> None:
        self.blob.delete.side_effect = IOError("network")

        self.assertFalse(self.storage.delete_image("gallery/x.png"))

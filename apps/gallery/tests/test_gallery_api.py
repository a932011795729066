"""Tests for gallery upload, listing and deletion with the media bucket mocked."""

import uuid
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import RefreshToken

from apps.authentication.models import User
from apps.gallery.models import GalleryImage


def _image_file(name="hall.png"):
    return SimpleUploadedFile(name, b"\x89PNG\r\n\x1a\n fake image bytes", content_type="image/png")


class GalleryListTests(APITestCase):

    def test_list_is_public(self) -> None:
        GalleryImage.objects.create(url="https://storage.test/a.png", public_id="gallery/a.png")

        response = self.client.get(reverse("gallery-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["publicId"], "gallery/a.png")


@patch("apps.gallery.views.gcs_storage")
class GalleryAdminTests(APITestCase):

    def setUp(self) -> None:
        self.admin = User.objects.create_user(email="admin@venue.test", password="HallPass123")
        token = RefreshToken.for_user(self.admin).access_token
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_upload_records_image(self, storage) -> None:
        storage.upload_image.return_value = {
            "url": "https://storage.googleapis.com/venue-test-bucket/gallery/abc.png",
            "public_id": "gallery/abc.png",
        }

        response = self.client.post(
            reverse("gallery-upload"), {"image": _image_file(), "title": "Main hall"}, format="multipart"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Image uploaded successfully")
        image = GalleryImage.objects.get()
        self.assertEqual(image.public_id, "gallery/abc.png")
        self.assertEqual(image.title, "Main hall")
        self.assertEqual(image.created_by, self.admin)
        self.assertEqual(storage.upload_image.call_args.kwargs["folder"], "gallery")

    def test_upload_without_file(self, storage) -> None:
        response = self.client.post(reverse("gallery-upload"), {"title": "Nothing"}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "No file uploaded")
        storage.upload_image.assert_not_called()

    def test_upload_failure_is_500(self, storage) -> None:
        storage.upload_image.return_value = None

        response = self.client.post(reverse("gallery-upload"), {"image": _image_file()}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["message"], "Upload failed")
        self.assertFalse(GalleryImage.objects.exists())

    def test_upload_requires_token(self, storage) -> None:
        self.client.credentials()

        response = self.client.post(reverse("gallery-upload"), {"image": _image_file()}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        storage.upload_image.assert_not_called()

    def test_delete_removes_blob_then_record(self, storage) -> None:
        storage.delete_image.return_value = True
        image = GalleryImage.objects.create(url="https://storage.test/a.png", public_id="gallery/a.png")

        response = self.client.delete(reverse("gallery-detail", args=[image.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Image deleted successfully")
        storage.delete_image.assert_called_once_with("gallery/a.png")
        self.assertFalse(GalleryImage.objects.exists())

    def test_delete_keeps_record_when_bucket_fails(self, storage) -> None:
        storage.delete_image.return_value = False
        image = GalleryImage.objects.create(url="https://storage.test/a.png", public_id="gallery/a.png")

        response = self.client.delete(reverse("gallery-detail", args=[image.id]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["message"], "Failed to delete image")
        self.assertTrue(GalleryImage.objects.filter(pk=image.id).exists())

    def test_delete_unknown_image(self, storage) -> None:
        response = self.client.delete(reverse("gallery-detail", args=[uuid.uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Image not found")
        storage.delete_image.assert_not_called()

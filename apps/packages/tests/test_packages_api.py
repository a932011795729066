"""Tests for the package catalogue endpoints and seed command."""

import uuid
from datetime import timedelta
from io import StringIO

from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import RefreshToken

from apps.authentication.models import User
from apps.packages.models import Package


def _fixed_payload(**overrides):
    payload = {
        "name": "Engagement Day Program",
        "category": "Engagement",
        "pricingType": "fixed",
        "fixedPrice": 25000,
        "included": ["Stage Hall for Ring Ceremony"],
        "terms": ["25% of the booking amount is non-refundable"],
    }
    payload.update(overrides)
    return payload


class PublicPackageTests(APITestCase):

    def test_list_is_public_and_newest_first(self) -> None:
        older = Package.objects.create(name="Older", category="Shaadi", pricing_type="custom")
        newer = Package.objects.create(name="Newer", category="Shaadi", pricing_type="custom")
        Package.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))

        response = self.client.get(reverse("package-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item["id"] for item in response.data]
        self.assertEqual(ids, [str(newer.id), str(older.id)])

    def test_retrieve_uses_camel_case_fields(self) -> None:
        package = Package.objects.create(
            name="Gold",
            category="Engagement",
            pricing_type="perPerson",
            per_person_pricing=[{"peopleCount": 150, "price": 180000}],
        )

        response = self.client.get(reverse("package-detail", args=[package.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pricingType"], "perPerson")
        self.assertEqual(response.data["perPersonPricing"][0]["peopleCount"], 150)
        self.assertEqual(response.data["menu"]["starters"], [])

    def test_unknown_package_is_404(self) -> None:
        response = self.client.get(reverse("package-detail", args=[uuid.uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Package not found")

    def test_malformed_id_is_404(self) -> None:
        response = self.client.get(reverse("package-detail", args=["not-a-uuid"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class AdminPackageTests(APITestCase):

    def setUp(self) -> None:
        self.admin = User.objects.create_user(email="admin@venue.test", password="HallPass123")
        token = RefreshToken.for_user(self.admin).access_token
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_create_records_creator(self) -> None:
        response = self.client.post(reverse("admin-package-list"), _fixed_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Package created")
        package = Package.objects.get(pk=response.data["package"]["id"])
        self.assertEqual(package.created_by, self.admin)
        self.assertEqual(package.fixed_price, 25000)

    def test_create_requires_token(self) -> None:
        self.client.credentials()

        response = self.client.post(reverse("admin-package-list"), _fixed_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Package.objects.exists())

    def test_fixed_pricing_needs_price(self) -> None:
        payload = _fixed_payload()
        del payload["fixedPrice"]

        response = self.client.post(reverse("admin-package-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("fixedPrice", response.data["errors"])

    def test_per_person_pricing_needs_tiers(self) -> None:
        payload = _fixed_payload(pricingType="perPerson", perPersonPricing=[])

        response = self.client.post(reverse("admin-package-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("perPersonPricing", response.data["errors"])

    def test_missing_name_is_rejected(self) -> None:
        payload = _fixed_payload()
        del payload["name"]

        response = self.client.post(reverse("admin-package-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data["errors"])

    def test_update_merges_fields(self) -> None:
        package = Package.objects.create(
            name="Gold",
            category="Shaadi",
            pricing_type="fixed",
            fixed_price=1000,
            included=["Stage"],
            menu={"welcomeSweets": ["Rasgulla"], "starters": ["Paneer Tikka"], "mainCourse": []},
        )

        response = self.client.put(
            reverse("admin-package-detail", args=[package.id]),
            {"fixedPrice": 2000, "menu": {"starters": ["Spring Roll"]}},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Package updated")
        package.refresh_from_db()
        self.assertEqual(package.fixed_price, 2000)
        self.assertEqual(package.name, "Gold")
        self.assertEqual(package.included, ["Stage"])
        self.assertEqual(package.menu["starters"], ["Spring Roll"])
        self.assertEqual(package.menu["welcomeSweets"], ["Rasgulla"])

    def test_update_unknown_package_is_404(self) -> None:
        response = self.client.put(
            reverse("admin-package-detail", args=[uuid.uuid4()]), {"name": "X"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Package not found")

    def test_delete(self) -> None:
        package = Package.objects.create(name="Gold", category="Shaadi", pricing_type="custom")

        response = self.client.delete(reverse("admin-package-detail", args=[package.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Package deleted")
        self.assertFalse(Package.objects.filter(pk=package.id).exists())


class SeedPackagesCommandTests(APITestCase):

    def test_seed_replaces_catalogue(self) -> None:
        Package.objects.create(name="Stale", category="Old", pricing_type="custom")

        call_command("seed_packages", stdout=StringIO())
        call_command("seed_packages", stdout=StringIO())

        self.assertEqual(Package.objects.count(), 6)
        self.assertFalse(Package.objects.filter(name="Stale").exists())
        gold = Package.objects.get(name="Shaadi Gold Package")
        self.assertEqual(gold.per_person_pricing[-1], {"peopleCount": 400, "price": 350000})

"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "email": "owner@example.com",
            "phone": "+15550001111",
            "full_name": "Cat Owner",
            "password": "StrongPass123",
            "password_confirm": "StrongPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("tokens", response.data)
        self.assertEqual(response.data["user"]["email"], payload["email"])
        self.assertEqual(response.data["user"]["role"], User.RoleChoices.CUSTOMER)

    def test_register_rejects_password_mismatch(self) -> None:
        payload = {
            "email": "owner@example.com",
            "password": "StrongPass123",
            "password_confirm": "OtherPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password_confirm", response.data)
        self.assertFalse(User.objects.filter(email=payload["email"]).exists())

    def test_token_obtain_and_me(self) -> None:
        User.objects.create_user(email="me@example.com", password="CorrectPassword1")

        token_resp = self.client.post(
            reverse("auth:token_obtain_pair"),
            {"email": "me@example.com", "password": "CorrectPassword1"},
            format="json",
        )
        self.assertEqual(token_resp.status_code, status.HTTP_200_OK, token_resp.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token_resp.data['access']}")
        me_resp = self.client.get(reverse("auth:me"))
        self.assertEqual(me_resp.status_code, status.HTTP_200_OK)
        self.assertEqual(me_resp.data["email"], "me@example.com")

    def test_superuser_is_admin(self) -> None:
        admin = User.objects.create_superuser(email="root@example.com", password="RootPassword1")
        self.assertEqual(admin.role, User.RoleChoices.ADMIN)
        self.assertTrue(admin.is_admin())

"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.exceptions import TransientBookingError
from apps.bookings.models import Booking
from apps.catalog.models import Food, Room, Service
from apps.cats.models import Cat
from apps.users.models import User


class BookingAPITests(APITestCase):
    """Covers creation, conflicts, listing and the status lifecycle."""

    def setUp(self) -> None:
        self.customer = User.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
        )
        self.other = User.objects.create_user(
            email="other@example.com",
            password="OtherPass123",
        )
        self.admin = User.objects.create_user(
            email="staff@example.com",
            password="StaffPass123",
            role=User.RoleChoices.ADMIN,
        )
        self.cat = Cat.objects.create(owner=self.customer, name="Mochi", gender=Cat.Gender.FEMALE)
        self.room = Room.objects.create(name="Sunny Suite", price_per_day=Decimal("20.00"))
        self.service = Service.objects.create(name="Brushing", price=Decimal("10.00"))
        self.food = Food.objects.create(name="Salmon pate", price_per_serving=Decimal("5.00"))
        self.check_in = timezone.localdate() + timedelta(days=10)
        self.check_out = self.check_in + timedelta(days=3)
        self.client.force_authenticate(self.customer)
        self.list_url = reverse("booking-list")

    def _payload(self, check_in=None, check_out=None, **extra) -> dict:
        payload = {
            "cat_id": self.cat.id,
            "room_id": self.room.id,
            "check_in_date": str(check_in or self.check_in),
            "check_out_date": str(check_out or self.check_out),
        }
        payload.update(extra)
        return payload

    def _confirm(self, booking_id: int) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("booking-transition", args=[booking_id]),
            {"status": Booking.Status.CONFIRMED},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.client.force_authenticate(self.customer)

    def test_customer_can_create_booking_with_lines(self) -> None:
        payload = self._payload(
            services=[{"service_id": self.service.id, "quantity": 2}],
            foods=[{"food_id": self.food.id, "meal_time": "lunch"}],
        )

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], Booking.Status.PENDING)
        self.assertEqual(Decimal(response.data["total_price"]), Decimal("85.00"))
        self.assertEqual(len(response.data["services"]), 1)
        self.assertEqual(response.data["foods"][0]["meal_time"], "lunch")
        self.assertEqual(response.data["user_id"], self.customer.id)

    def test_overlap_with_confirmed_booking_returns_conflict(self) -> None:
        first = self.client.post(self.list_url, self._payload(), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)
        self._confirm(first.data["id"])

        overlapping = self._payload(
            self.check_in + timedelta(days=2),
            self.check_out + timedelta(days=2),
        )
        response = self.client.post(self.list_url, overlapping, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "booking_conflict")
        self.assertEqual(Booking.objects.count(), 1)

    def test_touching_stay_is_accepted(self) -> None:
        first = self.client.post(self.list_url, self._payload(), format="json")
        self._confirm(first.data["id"])

        response = self.client.post(
            self.list_url,
            self._payload(self.check_out, self.check_out + timedelta(days=2)),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_invalid_dates_return_validation_error(self) -> None:
        response = self.client.post(
            self.list_url,
            self._payload(self.check_in, self.check_in),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")

    def test_unknown_service_lists_offending_items(self) -> None:
        response = self.client.post(
            self.list_url,
            self._payload(services=[{"service_id": 9999}]),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "catalog_item_unavailable")
        self.assertEqual(response.data["items"], [{"type": "service", "id": 9999}])

    def test_booking_someone_elses_cat_is_forbidden(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "forbidden")

    def test_unknown_room_is_not_found(self) -> None:
        response = self.client.post(self.list_url, self._payload(room_id=424242), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["entity"], "room")

    def test_switched_off_room_is_not_found(self) -> None:
        self.room.is_available = False
        self.room.save()

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")
        self.assertEqual(response.data["entity_id"], self.room.id)

    def test_non_numeric_booking_id_is_not_found(self) -> None:
        for action in ("cancel", "transition"):
            with self.subTest(action=action):
                response = self.client.post(f"{self.list_url}abc/{action}/", {"status": "cancelled"}, format="json")

                self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_transient_failure_is_retryable(self) -> None:
        with mock.patch(
            "apps.bookings.views.create_booking",
            side_effect=TransientBookingError("lock timeout"),
        ):
            response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response["Retry-After"], "1")
        self.assertEqual(response.data["code"], "transient_error")

    def test_list_is_scoped_to_own_bookings(self) -> None:
        self.client.post(self.list_url, self._payload(), format="json")
        other_cat = Cat.objects.create(owner=self.other, name="Pixel", gender=Cat.Gender.MALE)
        self.client.force_authenticate(self.other)
        self.client.post(self.list_url, self._payload(cat_id=other_cat.id), format="json")

        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["results"][0]["cat_id"], other_cat.id)

        self.client.force_authenticate(self.admin)
        response = self.client.get(self.list_url, {"user": self.customer.id})
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["results"][0]["user_id"], self.customer.id)

    def test_list_filters_by_status_and_window(self) -> None:
        first = self.client.post(self.list_url, self._payload(), format="json")
        later_in = self.check_out + timedelta(days=20)
        self.client.post(self.list_url, self._payload(later_in, later_in + timedelta(days=1)), format="json")
        self._confirm(first.data["id"])

        confirmed = self.client.get(self.list_url, {"status": "confirmed"})
        self.assertEqual([row["id"] for row in confirmed.data["results"]], [first.data["id"]])

        window = self.client.get(
            self.list_url,
            {"start_date": str(self.check_in), "end_date": str(self.check_out)},
        )
        self.assertEqual([row["id"] for row in window.data["results"]], [first.data["id"]])

    def test_customer_cannot_read_foreign_booking(self) -> None:
        created = self.client.post(self.list_url, self._payload(), format="json")
        self.client.force_authenticate(self.other)

        response = self.client.get(reverse("booking-detail", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_customer_cannot_confirm(self) -> None:
        created = self.client.post(self.list_url, self._payload(), format="json")

        response = self.client.post(
            reverse("booking-transition", args=[created.data["id"]]),
            {"status": Booking.Status.CONFIRMED},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Booking.objects.get().status, Booking.Status.PENDING)

    def test_customer_cancels_own_booking(self) -> None:
        created = self.client.post(self.list_url, self._payload(), format="json")

        response = self.client.post(
            reverse("booking-cancel", args=[created.data["id"]]),
            {"reason": "Staying home"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], Booking.Status.CANCELLED)
        self.assertEqual(response.data["cancellation_reason"], "Staying home")

    def test_illegal_transition_returns_conflict(self) -> None:
        created = self.client.post(self.list_url, self._payload(), format="json")
        self.client.force_authenticate(self.admin)

        response = self.client.post(
            reverse("booking-transition", args=[created.data["id"]]),
            {"status": Booking.Status.CHECKED_OUT},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "invalid_transition")
        self.assertEqual(response.data["current_status"], "pending")
        self.assertEqual(response.data["requested_status"], "checked_out")

    def test_anonymous_requests_are_rejected(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

from django.apps import AppConfig


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"
    label = "bookings"

    def ready(self):
        from apps.bookings import checks  # noqa: F401
        from apps.bookings.application import event_handlers

        event_handlers.register()

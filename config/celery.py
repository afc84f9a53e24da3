import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("cat_hotel")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Cancel pending bookings nobody paid for, every 15 minutes
    "expire-stale-pending-bookings": {
        "task": "bookings.expire_stale_pending_bookings",
        "schedule": crontab(minute="*/15"),
        "options": {"expires": 600},
    },
}

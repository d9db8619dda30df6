"""Celery application configuration."""

from celery import Celery

from giftlist.config import get_settings

settings = get_settings()

app = Celery(
    "giftlist",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["giftlist.tasks.sessions"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
    beat_schedule={
        "sweep-expired-sessions": {
            "task": "giftlist.tasks.sessions.sweep_expired_sessions",
            "schedule": float(settings.session_sweep_interval_seconds),
        },
    },
)

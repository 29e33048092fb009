"""Celery application for document analysis and bulk audits."""

from celery import Celery

from config import Settings, settings

# Queue per task: single analyses stay responsive while audits grind
TASK_QUEUES = {
    "worker.tasks.analyze_document": "analysis",
    "worker.tasks.run_bulk_audit": "audits",
}


def create_celery_app(config: Settings = settings) -> Celery:
    """
    Build the Celery app from Settings.

    Args:
        config: Settings supplying the broker, result backend and limits

    Returns:
        Configured Celery application
    """
    app = Celery(
        config.app_name.lower(),
        broker=config.celery_broker_url,
        backend=config.celery_result_backend,
        include=["worker.tasks"],
    )

    app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        task_routes={name: {"queue": queue} for name, queue in TASK_QUEUES.items()},
        # Report PROGRESS while a bulk audit runs
        task_track_started=True,
        # A soft limit lets a bulk audit return its rows before the hard kill
        task_soft_time_limit=max(1, config.celery_task_time_limit - 30),
        task_time_limit=config.celery_task_time_limit,
        worker_prefetch_multiplier=1,
        result_expires=config.celery_result_expires,
        broker_connection_retry_on_startup=True,
    )

    return app


celery_app = create_celery_app()

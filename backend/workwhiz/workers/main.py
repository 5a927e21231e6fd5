"""ARQ Worker Configuration.

Configures the email worker. Jobs that fail with a RecoverableError are
retried up to EMAIL_QUEUE_MAX_TRIES times.
"""

import logging

from arq import run_worker
from arq.connections import RedisSettings
from arq.worker import func
from prometheus_client import start_http_server

from ..core.config import settings
from ..core.logging import get_logger, setup_logging
from ..core.metrics import set_app_info
from ..infrastructure.email import Mailer
from .tasks import SEND_EMAIL_TASK, send_email

setup_logging()
logger = get_logger(__name__)


async def startup(ctx):
    """Create the shared mailer for this worker process."""
    ctx['mailer'] = Mailer()
    set_app_info(version=settings.APP_VERSION, environment=settings.ENVIRONMENT)
    logger.info(
        "Email worker started",
        extra={'smtp_host': settings.SMTP_HOST, 'max_tries': settings.EMAIL_QUEUE_MAX_TRIES}
    )


async def shutdown(ctx):
    logger.info("Email worker shutting down")


class WorkerSettings:
    """ARQ Worker settings."""

    redis_settings = RedisSettings.from_dsn(settings.REDIS_URL)
    queue_name = settings.EMAIL_QUEUE_NAME

    max_jobs = 10
    job_timeout = settings.EMAIL_JOB_TIMEOUT_SECONDS
    max_tries = settings.EMAIL_QUEUE_MAX_TRIES

    functions = [
        func(send_email, name=SEND_EMAIL_TASK, max_tries=settings.EMAIL_QUEUE_MAX_TRIES),
    ]

    on_startup = startup
    on_shutdown = shutdown

    log_results = True

    worker_name = "email-worker"


if __name__ == "__main__":
    port = settings.WORKER_METRICS_PORT
    start_http_server(port)
    logging.getLogger("prometheus_client").setLevel(logging.WARNING)
    logger.info("Started Prometheus metrics server", extra={'port': port})

    run_worker(WorkerSettings)

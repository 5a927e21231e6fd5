"""Asynchronous Tasks.

Background email jobs processed by ARQ workers, and the helper the API uses
to enqueue them.
"""

import time
from typing import Any

from arq import Retry
from arq.connections import ArqRedis

from ..core.config import settings
from ..core.constants import EmailTemplates, Security
from ..core.exceptions import InvalidEmailJobError, RecoverableError
from ..core.logging import get_logger, set_request_id
from ..core.metrics import emails_total
from ..infrastructure.email import EmailTemplate, render_template
from ..utils import mask_email

logger = get_logger(__name__)

SEND_EMAIL_TASK = "send_email"

# Delay before retry N is N * RETRY_BACKOFF_SECONDS
RETRY_BACKOFF_SECONDS = 5


async def send_email(
    ctx,
    email: str,
    subject: str,
    template: dict[str, Any] | None = None
):
    """Task: render an authentication email and send it.

    Args:
        ctx: ARQ context, holding the shared ``mailer``
        email: Recipient address
        subject: Subject line
        template: Optional ``{"name": ..., "content": {...}}`` reference

    Raises:
        InvalidEmailJobError: If the job has no recipient (not retried)
        Retry: If SMTP delivery fails with a RecoverableError; ARQ retries
            the job until max_tries is reached
    """
    job_id = ctx.get('job_id', 'unknown')
    job_try = ctx.get('job_try', 1)
    set_request_id(
        f"{Security.REQUEST_ID_PREFIX_WORKER}{str(job_id)[:Security.REQUEST_ID_UUID_LENGTH]}"
    )

    template_name = (template or {}).get('name') or 'none'
    start_time = time.time()

    if not email:
        emails_total.labels(template=template_name, outcome='invalid').inc()
        logger.error("Email job has no recipient", extra={'job_id': job_id})
        raise InvalidEmailJobError(f"Email job {job_id} has no recipient")

    logger.info(
        "Sending email",
        extra={
            'job_id': job_id,
            'email': mask_email(email),
            'template': template_name,
            'attempt': job_try
        }
    )

    html = render_template(template)

    try:
        await ctx['mailer'].send(email, subject, html)
    except RecoverableError as e:
        emails_total.labels(template=template_name, outcome='retry').inc()
        logger.warning(
            "Email delivery failed (will retry)",
            extra={
                'job_id': job_id,
                'email': mask_email(email),
                'error': str(e),
                'attempt': job_try,
                'retryable': True
            }
        )
        raise Retry(defer=job_try * RETRY_BACKOFF_SECONDS) from e

    emails_total.labels(template=template_name, outcome='sent').inc()
    logger.info(
        "Email sent successfully",
        extra={
            'job_id': job_id,
            'email': mask_email(email),
            'template': template_name,
            'duration_seconds': time.time() - start_time
        }
    )

    return f"Email sent to {mask_email(email)}"


def build_password_setup_template(username: str | None) -> EmailTemplate:
    return EmailTemplate(
        name=EmailTemplates.PASSWORD_SETUP,
        content={
            'uri': f"{settings.FRONTEND_BASE_URL.rstrip('/')}{EmailTemplates.PASSWORD_SETUP_PATH}",
            'username': username,
        }
    )


async def enqueue_email(
    pool: ArqRedis,
    email: str,
    subject: str | None = None,
    template: EmailTemplate | None = None
):
    """Enqueue an email job.

    This is called from the API to queue work. The subject defaults to the
    template's standard subject.

    Args:
        pool: ARQ pool (see infrastructure.messaging.get_arq_pool)
        email: Recipient address
        subject: Subject line
        template: Optional template reference
    """
    if subject is None:
        subject = EmailTemplates.SUBJECTS.get(template.name, "") if template else ""

    job = await pool.enqueue_job(
        SEND_EMAIL_TASK,
        email,
        subject,
        template.model_dump() if template else None
    )

    logger.info(
        "Email queued for delivery",
        extra={
            'email': mask_email(email),
            'template': template.name if template else None,
            'job_id': job.job_id if job else 'unknown'
        }
    )

    return job

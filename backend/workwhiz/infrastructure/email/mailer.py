"""SMTP delivery with aiosmtplib."""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from ...core.config import Settings, settings as default_settings
from ...core.exceptions import EmailDeliveryError
from ...core.logging import get_logger
from ...utils.strings import mask_email

logger = get_logger(__name__)


class Mailer:
    """Sends single-recipient messages through the configured SMTP server.

    One Mailer is created per worker process and shared by all jobs through
    the ARQ context.
    """

    def __init__(self, config: Settings = default_settings):
        self.config = config

    def build_message(self, email: str, subject: str, html: str | None = None) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.config.EMAIL_FROM
        msg["To"] = email
        if html is not None:
            msg.attach(MIMEText(html, "html", "utf-8"))
        else:
            msg.attach(MIMEText(subject, "plain", "utf-8"))
        return msg

    async def send(self, email: str, subject: str, html: str | None = None):
        """Send one message.

        Raises:
            EmailDeliveryError: If the SMTP exchange fails (retryable)
        """
        message = self.build_message(email, subject, html)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.config.SMTP_HOST,
                port=self.config.SMTP_PORT,
                username=self.config.SMTP_USERNAME,
                password=self.config.SMTP_PASSWORD,
                use_tls=self.config.SMTP_USE_TLS,
                start_tls=self.config.SMTP_START_TLS,
                timeout=self.config.SMTP_TIMEOUT_SECONDS,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.warning(
                "SMTP delivery failed",
                extra={
                    'email': mask_email(email),
                    'smtp_host': self.config.SMTP_HOST,
                    'error': str(e),
                    'error_type': type(e).__name__
                }
            )
            raise EmailDeliveryError(f"Failed to deliver email: {e}") from e

        logger.debug("SMTP delivery succeeded", extra={'email': mask_email(email)})

"""Authentication email templates.

Each template renders an HTML body from the job's template content
(``uri``, ``username``, ``device``). Values are HTML-escaped.
"""

from collections.abc import Callable, Mapping
from html import escape
from typing import Any

from pydantic import BaseModel, Field

from ...core.constants import EmailTemplates
from ...core.logging import get_logger

logger = get_logger(__name__)


class EmailTemplate(BaseModel):
    """Template reference carried in an email job."""
    name: str
    content: dict[str, Any] = Field(default_factory=dict)


_LAYOUT = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body style="font-family:Helvetica,Arial,sans-serif;background:#f5f5f5;margin:0;padding:24px;">
  <div style="max-width:600px;margin:0 auto;background:#fff;border-radius:8px;padding:24px;">
    <h1 style="font-size:20px;color:#1a237e;">{title}</h1>
    {body}
    <p style="margin-top:24px;font-size:12px;color:#888;">
      This is an automated message from Work Whiz. Do not reply to this email.
    </p>
  </div>
</body>
</html>
"""


def _text(content: Mapping[str, Any], key: str, fallback: str = "") -> str:
    value = content.get(key)
    return escape(str(value)) if value is not None else fallback


def password_reset(content: Mapping[str, Any]) -> str:
    username = _text(content, "username", "there")
    uri = _text(content, "uri")
    body = (
        f"<p>Hi {username},</p>"
        "<p>We received a request to reset your password. Use the link below to choose a new one.</p>"
        f'<p><a href="{uri}">Reset password</a></p>'
        "<p>If you did not ask for a reset, you can ignore this email.</p>"
    )
    return _LAYOUT.format(title="Reset your password", body=body)


def password_setup(content: Mapping[str, Any]) -> str:
    username = _text(content, "username", "there")
    uri = _text(content, "uri")
    body = (
        f"<p>Hi {username},</p>"
        "<p>Welcome to Work Whiz! Finish setting up your account by choosing a password.</p>"
        f'<p><a href="{uri}">Set up password</a></p>'
    )
    return _LAYOUT.format(title="Set up your password", body=body)


def password_update(content: Mapping[str, Any]) -> str:
    username = _text(content, "username", "there")
    device = _text(content, "device", "an unknown device")
    body = (
        f"<p>Hi {username},</p>"
        f"<p>Your password was changed from {device}.</p>"
        "<p>If this was not you, reset your password immediately.</p>"
    )
    return _LAYOUT.format(title="Your password was changed", body=body)


TEMPLATE_RENDERERS: dict[str, Callable[[Mapping[str, Any]], str]] = {
    EmailTemplates.PASSWORD_RESET: password_reset,
    EmailTemplates.PASSWORD_SETUP: password_setup,
    EmailTemplates.PASSWORD_UPDATE: password_update,
}


def render_template(template: EmailTemplate | Mapping[str, Any] | None) -> str | None:
    """Render an email template, or None when there is nothing to render.

    Unknown template names are logged and yield None so the message is
    still sent without an HTML body.
    """
    if template is None:
        return None
    if not isinstance(template, EmailTemplate):
        template = EmailTemplate.model_validate(template)

    renderer = TEMPLATE_RENDERERS.get(template.name)
    if renderer is None:
        logger.warning("Unknown email template", extra={'template': template.name})
        return None
    return renderer(template.content)

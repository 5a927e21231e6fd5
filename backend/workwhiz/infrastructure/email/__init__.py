"""Email infrastructure."""

from .mailer import Mailer
from .templates import EmailTemplate, render_template

__all__ = [
    "EmailTemplate",
    "Mailer",
    "render_template",
]

"""Middleware modules for the application."""

from .request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]

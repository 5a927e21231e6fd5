"""Infrastructure layer.

- messaging: ARQ job queue access for the API
- email: SMTP delivery and email templates for the worker
"""

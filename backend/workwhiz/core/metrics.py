"""Prometheus Metrics.

Counters for the validation pipeline, the transformers and the email worker.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Info,
    generate_latest,
)

# ========================================
# Validation Metrics
# ========================================

validations_total = Counter(
    'validations_total',
    'Total number of input validations',
    ['entity_kind', 'result']
)

constraint_violations_total = Counter(
    'constraint_violations_total',
    'Total number of constraint violations reported',
    ['entity_kind', 'constraint']
)

# ========================================
# Transformation Metrics
# ========================================

transformations_total = Counter(
    'transformations_total',
    'Total number of record transformations',
    ['entity_kind', 'mode']
)

# ========================================
# Worker Metrics
# ========================================

emails_total = Counter(
    'emails_total',
    'Total number of email jobs processed',
    ['template', 'outcome']
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': 'work-whiz'
    })


def get_metrics():
    """Get current Prometheus metrics in text format."""
    return generate_latest()


def get_content_type():
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST

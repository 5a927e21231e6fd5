"""Core configuration, constants, errors, logging and metrics."""

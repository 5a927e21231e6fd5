"""Domain layer.

Contains pure business logic without external dependencies:
- validators: constraint engine and field rules
- schemas: per-entity validation schemas and their registry
- pipeline: raw input -> ValidationResult
- transformers: domain records -> internal/response DTOs
"""

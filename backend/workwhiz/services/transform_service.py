"""Transformation Service Layer.

Maps domain records to internal or response DTOs by entity kind.
"""

from typing import Any

from ..core.exceptions import TransformationError
from ..core.logging import get_logger
from ..core.metrics import transformations_total
from ..domain.entities import EntityKind, TransformMode
from ..domain.transformers import get_transformer

logger = get_logger(__name__)


class TransformService:
    """Service for building DTOs from domain records."""

    def transform(
        self,
        entity_kind: EntityKind | str,
        record: Any,
        mode: TransformMode | str = TransformMode.RESPONSE
    ) -> dict[str, Any]:
        """Transform a record into a DTO.

        Args:
            entity_kind: Entity kind with a registered transformer
            record: Domain record (mapping, pydantic model or object)
            mode: "internal" for inter-service DTOs, "response" for API consumers

        Returns:
            The DTO as a new dictionary

        Raises:
            UnknownSchemaError: If the entity kind has no transformer
            TransformationError: If the record lacks a required field
        """
        transformer = get_transformer(entity_kind)
        mode = TransformMode(mode)

        try:
            dto = transformer.transform(record, mode)
        except TransformationError as e:
            logger.error(
                "Record transformation failed",
                extra={
                    'entity_kind': transformer.entity,
                    'mode': mode.value,
                    'field': e.field,
                    'reason': e.reason
                }
            )
            raise

        transformations_total.labels(entity_kind=transformer.entity, mode=mode.value).inc()
        return dto


transform_service = TransformService()

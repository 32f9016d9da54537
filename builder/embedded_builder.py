from typing import TYPE_CHECKING

from ..exceptions import MappingError
from ..log_config import get_logger
from ..metadata.fields import EmbeddedClassMetadata

if TYPE_CHECKING:
    from .class_metadata_builder import ClassMetadataBuilder

logger = get_logger(__name__)


class EmbeddedBuilder:
    """Staged configuration of an embedded value object."""

    def __init__(self, builder: "ClassMetadataBuilder", field_name: str, class_name: str):
        self._builder = builder
        self._field_name = field_name
        self._class_name = class_name
        self._column_prefix: str | None = None
        self._built = False

    def set_column_prefix(self, column_prefix: str | None) -> "EmbeddedBuilder":
        self._column_prefix = column_prefix
        return self

    def build(self) -> "ClassMetadataBuilder":
        cm = self._builder.get_class_metadata()
        if self._built:
            raise MappingError.builder_already_built(cm.class_name, self._field_name)

        cm.add_embedded_class(
            self._field_name,
            EmbeddedClassMetadata(
                class_name=self._class_name,
                column_prefix=self._column_prefix,
                declared_field=None,
                original_field=None,
            ),
        )
        self._built = True
        logger.debug("embedded_mapped", entity=cm.class_name, field=self._field_name, embeddable=self._class_name)
        return self._builder

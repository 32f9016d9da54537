from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError, MappingError
from ..log_config import get_logger
from ..metadata.enums import GeneratorType
from ..metadata.fields import FieldMetadata

if TYPE_CHECKING:
    from .class_metadata_builder import ClassMetadataBuilder

logger = get_logger(__name__)


class FieldBuilder:
    """
    Staged configuration of one mapped property.

    Returned by `ClassMetadataBuilder.create_field`. Setters record state only;
    `build` creates the `FieldMetadata`, registers it on the class metadata and
    hands back the class metadata builder.

    Example:
        >>> (
        ...     builder.create_field("id", "integer")
        ...     .make_primary_key()
        ...     .generated_value()
        ...     .build()
        ... )
    """

    def __init__(self, builder: "ClassMetadataBuilder", name: str, type_name: str):
        self._builder = builder
        self._name = name
        self._mapping: dict[str, Any] = {"name": name, "type_name": type_name}
        self._options: dict[str, Any] = {}
        self._built = False

    def column_name(self, column_name: str) -> "FieldBuilder":
        self._mapping["column_name"] = column_name
        return self

    def length(self, length: int) -> "FieldBuilder":
        self._mapping["length"] = length
        return self

    def nullable(self, flag: bool = True) -> "FieldBuilder":
        self._mapping["nullable"] = bool(flag)
        return self

    def unique(self, flag: bool = True) -> "FieldBuilder":
        self._mapping["unique"] = bool(flag)
        return self

    def column_definition(self, column_definition: str) -> "FieldBuilder":
        self._mapping["column_definition"] = column_definition
        return self

    def precision(self, precision: int) -> "FieldBuilder":
        self._mapping["precision"] = precision
        return self

    def scale(self, scale: int) -> "FieldBuilder":
        self._mapping["scale"] = scale
        return self

    def is_version_field(self) -> "FieldBuilder":
        """Mark as the optimistic-locking version; the column default is filled in on build."""
        self._mapping["versioned"] = True
        return self

    def option(self, key: str, value: Any) -> "FieldBuilder":
        self._options[key] = value
        return self

    def make_primary_key(self) -> "FieldBuilder":
        self._mapping["primary_key"] = True
        return self

    def generated_value(self, strategy: GeneratorType | str = GeneratorType.AUTO) -> "FieldBuilder":
        try:
            self._mapping["value_generator"] = GeneratorType(strategy)
        except ValueError:
            raise ConfigurationError.invalid_enum_value("generated_value", strategy, GeneratorType) from None
        return self

    def set_sequence_generator(
        self, sequence_name: str, allocation_size: int = 50, initial_value: int = 1
    ) -> "FieldBuilder":
        self._mapping["sequence_generator"] = {
            "sequence_name": sequence_name,
            "allocation_size": allocation_size,
            "initial_value": initial_value,
        }
        return self

    def build(self) -> "ClassMetadataBuilder":
        """
        Register the property on the class metadata.

        Returns:
            The owning `ClassMetadataBuilder`

        Raises:
            MappingError: If this builder was already built, the name is taken
                by an association, or a version field has an unsupported type
        """
        cm = self._builder.get_class_metadata()
        if self._built:
            raise MappingError.builder_already_built(cm.class_name, self._name)

        mapping = dict(self._mapping)
        mapping.setdefault("table_name", cm.get_table_name())
        mapping.setdefault("column_name", cm.naming_strategy.property_to_column_name(self._name, cm.class_name))
        prop = FieldMetadata(**mapping, options=dict(self._options))

        cm.add_property(prop)
        self._built = True
        logger.debug(
            "field_mapped",
            entity=cm.class_name,
            field=prop.name,
            column=prop.column_name,
            type=prop.type_name,
            primary_key=prop.primary_key,
        )
        return self._builder

"""
Fluent facade over a `ClassMetadata`.

`ClassMetadataBuilder` wraps one class metadata instance. Its ``set_*`` and
``add_*`` methods change the metadata right away and return the builder itself
for chaining; its ``create_*`` methods return a specialised builder that
collects settings and commits them on ``build()``, which returns control to
this builder.

Example:
    >>> builder = ClassMetadataBuilder.for_class("models.cms.CmsUser")
    >>> (
    ...     builder.set_table("cms_users")
    ...     .create_field("id", "integer").make_primary_key().generated_value().build()
    ...     .add_property("username", "string", {"length": 50, "unique": True})
    ...     .create_many_to_many("groups", "models.cms.CmsGroup").inversed_by("users").build()
    ...     .add_lifecycle_event("touch", "preUpdate")
    ... )
    >>> builder.get_class_metadata().identifier
    ['id']
"""

from typing import Any

from .. import column_types
from ..config import MappingConfig
from ..exceptions import ConfigurationError
from ..metadata.class_metadata import ClassMetadata
from ..metadata.columns import DiscriminatorColumnMetadata
from ..metadata.enums import AssociationType, ChangeTrackingPolicy, GeneratorType, InheritanceType
from .association_builder import AssociationBuilder, ManyToManyAssociationBuilder, OneToManyAssociationBuilder
from .embedded_builder import EmbeddedBuilder
from .field_builder import FieldBuilder

PROPERTY_MAPPING_KEYS = frozenset(
    {
        "column_name",
        "length",
        "nullable",
        "unique",
        "options",
        "column_definition",
        "id",
        "precision",
        "scale",
        "version",
        "generated_value",
    }
)


class ClassMetadataBuilder:
    """Builder for the mapping metadata of one entity class."""

    def __init__(self, class_metadata: ClassMetadata):
        self._cm = class_metadata

    @classmethod
    def for_class(cls, class_name: str, config: MappingConfig | None = None) -> "ClassMetadataBuilder":
        """Start a builder on fresh metadata, named by the configured naming strategy."""
        config = config or MappingConfig()
        return cls(ClassMetadata(class_name, naming_strategy=config.create_naming_strategy()))

    def get_class_metadata(self) -> ClassMetadata:
        return self._cm

    # ========================================================================
    # Class-level settings
    # ========================================================================

    def set_mapped_superclass(self) -> "ClassMetadataBuilder":
        self._cm.set_mapped_superclass()
        return self

    def set_embeddable(self) -> "ClassMetadataBuilder":
        self._cm.set_embeddable()
        return self

    def set_custom_repository_class(self, repository_class_name: str) -> "ClassMetadataBuilder":
        self._cm.custom_repository_class_name = repository_class_name
        return self

    def set_read_only(self) -> "ClassMetadataBuilder":
        self._cm.is_read_only = True
        return self

    def set_table(self, name: str, schema: str | None = None) -> "ClassMetadataBuilder":
        self._cm.table.name = name
        if schema is not None:
            self._cm.table.schema_name = schema
        return self

    def add_index(self, columns: list[str], name: str) -> "ClassMetadataBuilder":
        self._cm.table.add_index(columns, name)
        return self

    def add_unique_constraint(self, columns: list[str], name: str) -> "ClassMetadataBuilder":
        self._cm.table.add_unique_constraint(columns, name)
        return self

    # ========================================================================
    # Inheritance
    # ========================================================================

    def set_joined_table_inheritance(self) -> "ClassMetadataBuilder":
        self._cm.set_inheritance_type(InheritanceType.JOINED)
        return self

    def set_single_table_inheritance(self) -> "ClassMetadataBuilder":
        self._cm.set_inheritance_type(InheritanceType.SINGLE_TABLE)
        return self

    def set_discriminator_column(self, column: DiscriminatorColumnMetadata) -> "ClassMetadataBuilder":
        """
        Raises:
            ConfigurationError: If ``column`` is not a `DiscriminatorColumnMetadata`
                (build it with `DiscriminatorColumnMetadataBuilder`)
        """
        self._cm.set_discriminator_column(column)
        return self

    def add_discriminator_map_class(self, value: str, class_name: str) -> "ClassMetadataBuilder":
        self._cm.add_discriminator_map_class(value, class_name)
        return self

    # ========================================================================
    # Change tracking
    # ========================================================================

    def set_change_tracking_policy_deferred_implicit(self) -> "ClassMetadataBuilder":
        self._cm.set_change_tracking_policy(ChangeTrackingPolicy.DEFERRED_IMPLICIT)
        return self

    def set_change_tracking_policy_deferred_explicit(self) -> "ClassMetadataBuilder":
        self._cm.set_change_tracking_policy(ChangeTrackingPolicy.DEFERRED_EXPLICIT)
        return self

    def set_change_tracking_policy_notify(self) -> "ClassMetadataBuilder":
        self._cm.set_change_tracking_policy(ChangeTrackingPolicy.NOTIFY)
        return self

    # ========================================================================
    # Properties
    # ========================================================================

    def add_property(self, name: str, type_name: str, mapping: dict[str, Any] | None = None) -> "ClassMetadataBuilder":
        """
        Map a property in one call.

        Args:
            name: Field name
            type_name: Registered column type name
            mapping: Optional settings: column_name, length, nullable, unique,
                options, column_definition, id, precision, scale, version,
                generated_value

        Raises:
            ConfigurationError: For an unknown type name or mapping key
        """
        mapping = dict(mapping or {})
        unknown = sorted(set(mapping) - PROPERTY_MAPPING_KEYS)
        if unknown:
            raise ConfigurationError.unknown_mapping_option(name, unknown[0])

        field_builder = self.create_field(name, type_name)
        if "column_name" in mapping:
            field_builder.column_name(mapping["column_name"])
        if "length" in mapping:
            field_builder.length(mapping["length"])
        if "nullable" in mapping:
            field_builder.nullable(mapping["nullable"])
        if "unique" in mapping:
            field_builder.unique(mapping["unique"])
        if "column_definition" in mapping:
            field_builder.column_definition(mapping["column_definition"])
        if "precision" in mapping:
            field_builder.precision(mapping["precision"])
        if "scale" in mapping:
            field_builder.scale(mapping["scale"])
        for key, value in mapping.get("options", {}).items():
            field_builder.option(key, value)
        if mapping.get("id"):
            field_builder.make_primary_key()
        if mapping.get("version"):
            field_builder.is_version_field()
        if mapping.get("generated_value"):
            strategy = mapping["generated_value"]
            field_builder.generated_value(GeneratorType.AUTO if strategy is True else strategy)

        return field_builder.build()

    def create_field(self, name: str, type_name: str) -> FieldBuilder:
        """
        Raises:
            ConfigurationError: For an unknown type name
        """
        column_types.get_type(type_name)
        return FieldBuilder(self, name, type_name)

    # ========================================================================
    # Lifecycle callbacks
    # ========================================================================

    def add_lifecycle_event(self, method_name: str, event_name: str) -> "ClassMetadataBuilder":
        self._cm.add_lifecycle_callback(method_name, event_name)
        return self

    # ========================================================================
    # Embedded value objects
    # ========================================================================

    def add_embedded(self, field_name: str, class_name: str, column_prefix: str | None = None) -> "ClassMetadataBuilder":
        return self.create_embedded(field_name, class_name).set_column_prefix(column_prefix).build()

    def create_embedded(self, field_name: str, class_name: str) -> EmbeddedBuilder:
        return EmbeddedBuilder(self, field_name, class_name)

    # ========================================================================
    # Associations
    # ========================================================================

    def create_many_to_one(self, name: str, target_entity: str) -> AssociationBuilder:
        return AssociationBuilder(self, name, target_entity, AssociationType.MANY_TO_ONE)

    def create_one_to_one(self, name: str, target_entity: str) -> AssociationBuilder:
        return AssociationBuilder(self, name, target_entity, AssociationType.ONE_TO_ONE)

    def create_one_to_many(self, name: str, target_entity: str) -> OneToManyAssociationBuilder:
        return OneToManyAssociationBuilder(self, name, target_entity)

    def create_many_to_many(self, name: str, target_entity: str) -> ManyToManyAssociationBuilder:
        return ManyToManyAssociationBuilder(self, name, target_entity)

    def add_many_to_one(self, name: str, target_entity: str, inversed_by: str | None = None) -> "ClassMetadataBuilder":
        association = self.create_many_to_one(name, target_entity)
        if inversed_by is not None:
            association.inversed_by(inversed_by)
        return association.build()

    def add_owning_one_to_one(
        self, name: str, target_entity: str, inversed_by: str | None = None
    ) -> "ClassMetadataBuilder":
        association = self.create_one_to_one(name, target_entity)
        if inversed_by is not None:
            association.inversed_by(inversed_by)
        return association.build()

    def add_inverse_one_to_one(self, name: str, target_entity: str, mapped_by: str) -> "ClassMetadataBuilder":
        return self.create_one_to_one(name, target_entity).mapped_by(mapped_by).build()

    def add_one_to_many(self, name: str, target_entity: str, mapped_by: str) -> "ClassMetadataBuilder":
        return self.create_one_to_many(name, target_entity).mapped_by(mapped_by).build()

    def add_owning_many_to_many(
        self, name: str, target_entity: str, inversed_by: str | None = None
    ) -> "ClassMetadataBuilder":
        association = self.create_many_to_many(name, target_entity)
        if inversed_by is not None:
            association.inversed_by(inversed_by)
        return association.build()

    def add_inverse_many_to_many(self, name: str, target_entity: str, mapped_by: str) -> "ClassMetadataBuilder":
        return self.create_many_to_many(name, target_entity).mapped_by(mapped_by).build()

"""
The mapping metadata of one entity class.

`ClassMetadata` holds everything the persistence layer needs to know about a
mapped type: its table, identifier, properties, associations, embedded value
objects, inheritance layout and lifecycle callbacks. It is filled in by
`ClassMetadataBuilder` (or a mapping driver using the builder) and treated as
read-only once handed over.

Properties and associations share one namespace: a field name maps either to a
property or to an association, never both. Re-registering a name of the same
kind replaces the previous entry.
"""

from enum import Enum
from typing import Any

from .. import column_types
from ..exceptions import ConfigurationError, MappingError
from ..naming import DefaultNamingStrategy, NamingStrategy, short_class_name
from .associations import AssociationMetadata, ToOneAssociationMetadata
from .columns import DiscriminatorColumnMetadata, TableMetadata
from .enums import ChangeTrackingPolicy, InheritanceType, LifecycleEvent
from .fields import EmbeddedClassMetadata, FieldMetadata


def _event_key(event_name: str | LifecycleEvent) -> str:
    return event_name.value if isinstance(event_name, Enum) else event_name


class ClassMetadata:
    """
    Mapping metadata for a single entity class.

    Attributes:
        class_name: Fully qualified class name
        naming_strategy: Strategy for names not given explicitly
        table: Primary table
        identifier: Field names forming the primary key, in order
        properties: Field name -> FieldMetadata
        association_mappings: Field name -> AssociationMetadata
        embedded_classes: Field name -> EmbeddedClassMetadata
        inheritance_type: Inheritance layout of the hierarchy
        discriminator_column: Discriminator column for SINGLE_TABLE / JOINED
        discriminator_map: Discriminator value -> class name
        discriminator_value: Discriminator value of this class
        change_tracking_policy: Change tracking policy
        is_mapped_superclass: Class is a mapped superclass
        is_embedded_class: Class is an embeddable value object
        custom_repository_class_name: Repository class for this entity
        is_read_only: Entity is never updated
        lifecycle_callbacks: Event name -> method names, in registration order
        version_property: Optimistic-locking version field
        contains_foreign_identifier: Identifier includes an association

    Example:
        >>> cm = ClassMetadata("models.cms.CmsUser")
        >>> cm.get_table_name()
        'CmsUser'
    """

    def __init__(self, class_name: str, naming_strategy: NamingStrategy | None = None):
        self.class_name = class_name
        self.naming_strategy = naming_strategy or DefaultNamingStrategy()
        self.table = TableMetadata(name=self.naming_strategy.class_to_table_name(class_name))

        self.identifier: list[str] = []
        self.properties: dict[str, FieldMetadata] = {}
        self.association_mappings: dict[str, AssociationMetadata] = {}
        self.embedded_classes: dict[str, EmbeddedClassMetadata] = {}

        self.inheritance_type = InheritanceType.NONE
        self.discriminator_column: DiscriminatorColumnMetadata | None = None
        self.discriminator_map: dict[str, str] = {}
        self.discriminator_value: str | None = None

        self.change_tracking_policy = ChangeTrackingPolicy.DEFERRED_IMPLICIT
        self.is_mapped_superclass = False
        self.is_embedded_class = False
        self.custom_repository_class_name: str | None = None
        self.is_read_only = False

        self.lifecycle_callbacks: dict[str, list[str]] = {}
        self.version_property: FieldMetadata | None = None
        self.contains_foreign_identifier = False

    def __repr__(self) -> str:
        return f"ClassMetadata({self.class_name!r})"

    @property
    def short_name(self) -> str:
        return short_class_name(self.class_name)

    def get_table_name(self) -> str:
        return self.table.name

    # ------------------------------------------------------------------
    # Class-level flags
    # ------------------------------------------------------------------

    def set_mapped_superclass(self, value: bool = True) -> None:
        self.is_mapped_superclass = value
        if value:
            self.is_embedded_class = False

    def set_embeddable(self, value: bool = True) -> None:
        self.is_embedded_class = value
        if value:
            self.is_mapped_superclass = False

    def set_inheritance_type(self, inheritance_type: InheritanceType) -> None:
        if not isinstance(inheritance_type, InheritanceType):
            raise ConfigurationError.invalid_enum_value("inheritance_type", inheritance_type, InheritanceType)
        self.inheritance_type = inheritance_type

    def set_change_tracking_policy(self, policy: ChangeTrackingPolicy) -> None:
        if not isinstance(policy, ChangeTrackingPolicy):
            raise ConfigurationError.invalid_enum_value("change_tracking_policy", policy, ChangeTrackingPolicy)
        self.change_tracking_policy = policy

    def set_discriminator_column(self, column: DiscriminatorColumnMetadata) -> None:
        """Assign the discriminator column, defaulting its table to this entity's table."""
        if not isinstance(column, DiscriminatorColumnMetadata):
            raise ConfigurationError.invalid_discriminator_column(self.class_name, column)
        if column.table_name is None:
            column = column.model_copy(update={"table_name": self.get_table_name()})
        self.discriminator_column = column

    def add_discriminator_map_class(self, value: str, class_name: str) -> None:
        self.discriminator_map[value] = class_name
        if class_name == self.class_name:
            self.discriminator_value = value

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def add_property(self, prop: FieldMetadata) -> None:
        """
        Register a property, replacing any property with the same name.

        Raises:
            MappingError: If the name is mapped as an association, or the
                property is a version field of an unsupported type
        """
        if prop.name in self.association_mappings:
            raise MappingError.duplicate_field_mapping(self.class_name, prop.name)
        if prop.versioned:
            prop = self._complete_version_property(prop)

        previous = self.properties.get(prop.name)
        if previous is not None:
            if previous is self.version_property:
                self.version_property = None
            if previous.primary_key and not prop.primary_key:
                self._remove_identifier(prop.name)

        prop.set_declaring_class(self)
        self.properties[prop.name] = prop
        if prop.versioned:
            self.version_property = prop
        if prop.primary_key:
            self._add_identifier(prop.name)

    def _complete_version_property(self, prop: FieldMetadata) -> FieldMetadata:
        if "default" in prop.options:
            return prop
        if column_types.is_integer_type(prop.type_name):
            default: Any = 1
        elif column_types.is_datetime_type(prop.type_name):
            default = "CURRENT_TIMESTAMP"
        else:
            raise MappingError.unsupported_optimistic_locking_type(self.class_name, prop.name, prop.type_name)
        return prop.model_copy(update={"options": {**prop.options, "default": default}})

    def get_property(self, name: str) -> FieldMetadata | None:
        return self.properties.get(name)

    def has_field(self, name: str) -> bool:
        return name in self.properties

    def add_association(self, association: AssociationMetadata) -> None:
        """
        Register an association, replacing any association with the same name.

        Raises:
            MappingError: If the name is mapped as a property
        """
        if association.field_name in self.properties:
            raise MappingError.duplicate_field_mapping(self.class_name, association.field_name)

        is_id = isinstance(association, ToOneAssociationMetadata) and association.id
        previous = self.association_mappings.get(association.field_name)
        if isinstance(previous, ToOneAssociationMetadata) and previous.id and not is_id:
            self._remove_identifier(association.field_name)

        association.set_declaring_class(self)
        self.association_mappings[association.field_name] = association
        if is_id:
            self._add_identifier(association.field_name)
        self.contains_foreign_identifier = any(
            isinstance(mapping, ToOneAssociationMetadata) and mapping.id
            for mapping in self.association_mappings.values()
        )

    def has_association(self, name: str) -> bool:
        return name in self.association_mappings

    def get_association_mapping(self, name: str) -> AssociationMetadata:
        try:
            return self.association_mappings[name]
        except KeyError:
            raise MappingError.unknown_association(self.class_name, name) from None

    def add_embedded_class(self, field_name: str, embedded: EmbeddedClassMetadata) -> None:
        embedded.set_declaring_class(self)
        self.embedded_classes[field_name] = embedded

    # ------------------------------------------------------------------
    # Identifier
    # ------------------------------------------------------------------

    def _add_identifier(self, field_name: str) -> None:
        if field_name not in self.identifier:
            self.identifier.append(field_name)

    def _remove_identifier(self, field_name: str) -> None:
        if field_name in self.identifier:
            self.identifier.remove(field_name)

    def is_identifier(self, field_name: str) -> bool:
        return field_name in self.identifier

    @property
    def is_identifier_composite(self) -> bool:
        return len(self.identifier) > 1

    def get_single_identifier_field_name(self) -> str:
        if not self.identifier:
            raise MappingError.no_identifier(self.class_name)
        if self.is_identifier_composite:
            raise MappingError.composite_identifier(self.class_name)
        return self.identifier[0]

    # ------------------------------------------------------------------
    # Lifecycle callbacks
    # ------------------------------------------------------------------

    def add_lifecycle_callback(self, method_name: str, event_name: str) -> None:
        self.lifecycle_callbacks.setdefault(_event_key(event_name), []).append(method_name)

    def get_lifecycle_callbacks(self, event_name: str) -> list[str]:
        return list(self.lifecycle_callbacks.get(_event_key(event_name), []))

    def has_lifecycle_callbacks(self, event_name: str) -> bool:
        return bool(self.lifecycle_callbacks.get(_event_key(event_name)))

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Dump the mapping with the camelCase keys used by mapping drivers."""
        return {
            "name": self.class_name,
            "table": self.table.model_dump(by_alias=True),
            "identifier": list(self.identifier),
            "inheritanceType": self.inheritance_type.value,
            "discriminatorColumn": (
                self.discriminator_column.model_dump(by_alias=True) if self.discriminator_column else None
            ),
            "discriminatorMap": dict(self.discriminator_map),
            "discriminatorValue": self.discriminator_value,
            "changeTrackingPolicy": self.change_tracking_policy.value,
            "isMappedSuperclass": self.is_mapped_superclass,
            "isEmbeddedClass": self.is_embedded_class,
            "customRepositoryClassName": self.custom_repository_class_name,
            "isReadOnly": self.is_read_only,
            "lifecycleCallbacks": {event: list(methods) for event, methods in self.lifecycle_callbacks.items()},
            "properties": {name: prop.model_dump(by_alias=True) for name, prop in self.properties.items()},
            "associationMappings": {
                name: assoc.model_dump(by_alias=True) for name, assoc in self.association_mappings.items()
            },
            "embeddedClasses": {
                name: embedded.model_dump(by_alias=True) for name, embedded in self.embedded_classes.items()
            },
        }

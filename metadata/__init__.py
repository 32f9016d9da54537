"""
Mapping metadata models.

This package contains the descriptor that the builders fill in and the value
objects it is made of.

Available Modules:

- **class_metadata**: `ClassMetadata`, the per-entity descriptor
- **fields**: mapped properties and embedded value objects
- **associations**: one-to-one, many-to-one, one-to-many and many-to-many mappings
- **columns**: join columns, join tables, discriminator column, primary table
- **enums**: inheritance, change tracking, fetch mode, association kind, ...

Example:

    >>> from orm_mapping_schema.metadata import ClassMetadata
    >>> cm = ClassMetadata("models.cms.CmsUser")
    >>> cm.get_property("name") is None
    True
"""

from .associations import (
    AssociationMetadata,
    ManyToManyAssociationMetadata,
    ManyToOneAssociationMetadata,
    OneToManyAssociationMetadata,
    OneToOneAssociationMetadata,
    ToManyAssociationMetadata,
    ToOneAssociationMetadata,
    create_association,
)
from .class_metadata import ClassMetadata
from .columns import DiscriminatorColumnMetadata, JoinColumnMetadata, JoinTableMetadata, TableMetadata
from .enums import (
    AssociationType,
    CascadeType,
    ChangeTrackingPolicy,
    FetchMode,
    GeneratorType,
    InheritanceType,
    LifecycleEvent,
)
from .fields import EmbeddedClassMetadata, FieldMetadata

__all__ = [
    "AssociationMetadata",
    "AssociationType",
    "CascadeType",
    "ChangeTrackingPolicy",
    "ClassMetadata",
    "DiscriminatorColumnMetadata",
    "EmbeddedClassMetadata",
    "FetchMode",
    "FieldMetadata",
    "GeneratorType",
    "InheritanceType",
    "JoinColumnMetadata",
    "JoinTableMetadata",
    "LifecycleEvent",
    "ManyToManyAssociationMetadata",
    "ManyToOneAssociationMetadata",
    "OneToManyAssociationMetadata",
    "OneToOneAssociationMetadata",
    "TableMetadata",
    "ToManyAssociationMetadata",
    "ToOneAssociationMetadata",
    "create_association",
]

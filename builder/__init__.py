"""
Fluent builders that fill in a `ClassMetadata`.

Available Builders:

- **ClassMetadataBuilder**: entry point wrapping one class metadata instance
- **FieldBuilder**: staged property mapping (`create_field`)
- **EmbeddedBuilder**: staged embedded value object (`create_embedded`)
- **AssociationBuilder**: one-to-one and many-to-one associations
- **OneToManyAssociationBuilder** / **ManyToManyAssociationBuilder**: collections
- **DiscriminatorColumnMetadataBuilder**: discriminator column of a hierarchy
"""

from .association_builder import AssociationBuilder, ManyToManyAssociationBuilder, OneToManyAssociationBuilder
from .class_metadata_builder import ClassMetadataBuilder
from .discriminator_column_builder import DiscriminatorColumnMetadataBuilder
from .embedded_builder import EmbeddedBuilder
from .field_builder import FieldBuilder

__all__ = [
    "AssociationBuilder",
    "ClassMetadataBuilder",
    "DiscriminatorColumnMetadataBuilder",
    "EmbeddedBuilder",
    "FieldBuilder",
    "ManyToManyAssociationBuilder",
    "OneToManyAssociationBuilder",
]

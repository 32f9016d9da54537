from .builder import ClassMetadataBuilder, DiscriminatorColumnMetadataBuilder
from .config import MappingConfig
from .exceptions import ConfigurationError, MappingError
from .metadata import (
    AssociationType,
    ChangeTrackingPolicy,
    ClassMetadata,
    FetchMode,
    InheritanceType,
    JoinColumnMetadata,
    JoinTableMetadata,
)

__all__ = [
    "AssociationType",
    "ChangeTrackingPolicy",
    "ClassMetadata",
    "ClassMetadataBuilder",
    "ConfigurationError",
    "DiscriminatorColumnMetadataBuilder",
    "FetchMode",
    "InheritanceType",
    "JoinColumnMetadata",
    "JoinTableMetadata",
    "MappingConfig",
    "MappingError",
]

"""
Association mappings between entities.

Four association kinds exist, each with its own class:

| Class | `type` | Side-specific data |
|---|---|---|
| `OneToOneAssociationMetadata` | ONE_TO_ONE | join columns, identifier flag |
| `ManyToOneAssociationMetadata` | MANY_TO_ONE | join columns, identifier flag |
| `OneToManyAssociationMetadata` | ONE_TO_MANY | order by, index by |
| `ManyToManyAssociationMetadata` | MANY_TO_MANY | join table, order by, index by |

An association is the owning side unless ``mapped_by`` names the owning field on
the target entity. ``inversed_by`` is set on an owning side to name the inverse
field of a bidirectional association.
"""

from typing import Any, Literal

from pydantic import Field, computed_field

from .columns import JoinColumnMetadata, JoinTableMetadata
from .enums import AssociationType, FetchMode
from .fields import MappedElement

# ============================================================================
# Base Association Classes
# ============================================================================


class AssociationMetadata(MappedElement):
    """
    Fields shared by every association kind.

    Attributes:
        field_name: Field on the source entity holding the association
        target_entity: Class name of the associated entity
        source_entity: Class name of the declaring entity
        type: Association kind
        mapped_by: Owning field on the target (marks this as the inverse side)
        inversed_by: Inverse field on the target (owning side of a bidirectional association)
        cascade: Operations cascaded to the target, ordered and unique
        fetch: Fetch mode
        orphan_removal: Remove targets no longer referenced
    """

    field_name: str
    target_entity: str
    source_entity: str
    type: AssociationType
    mapped_by: str | None = None
    inversed_by: str | None = None
    cascade: list[str] = Field(default_factory=list)
    fetch: FetchMode = FetchMode.LAZY
    orphan_removal: bool = False

    @computed_field(alias="isOwningSide")
    @property
    def is_owning_side(self) -> bool:
        return self.mapped_by is None

    @property
    def is_to_one(self) -> bool:
        return self.type.is_to_one


class ToOneAssociationMetadata(AssociationMetadata):
    """
    Single-valued association.

    Attributes:
        join_columns: Foreign key columns on the owning side (empty on the inverse side)
        id: Association is part of the identifier
    """

    join_columns: list[JoinColumnMetadata] = Field(default_factory=list)
    id: bool = False


class ToManyAssociationMetadata(AssociationMetadata):
    """
    Collection-valued association.

    Attributes:
        order_by: Target fields the collection is ordered by
        index_by: Target field used as collection key
    """

    order_by: list[str] | None = None
    index_by: str | None = None


# ============================================================================
# Concrete Association Kinds
# ============================================================================


class OneToOneAssociationMetadata(ToOneAssociationMetadata):
    type: Literal[AssociationType.ONE_TO_ONE] = AssociationType.ONE_TO_ONE


class ManyToOneAssociationMetadata(ToOneAssociationMetadata):
    type: Literal[AssociationType.MANY_TO_ONE] = AssociationType.MANY_TO_ONE


class OneToManyAssociationMetadata(ToManyAssociationMetadata):
    type: Literal[AssociationType.ONE_TO_MANY] = AssociationType.ONE_TO_MANY


class ManyToManyAssociationMetadata(ToManyAssociationMetadata):
    """
    Many-to-many association. The owning side carries the join table.

    Example:
        >>> ManyToManyAssociationMetadata(
        ...     field_name="groups",
        ...     target_entity="models.cms.CmsGroup",
        ...     source_entity="models.cms.CmsUser",
        ...     join_table=JoinTableMetadata(name="cmsuser_cmsgroup"),
        ... )
    """

    type: Literal[AssociationType.MANY_TO_MANY] = AssociationType.MANY_TO_MANY
    join_table: JoinTableMetadata | None = None


ASSOCIATION_CLASSES: dict[AssociationType, type[AssociationMetadata]] = {
    AssociationType.ONE_TO_ONE: OneToOneAssociationMetadata,
    AssociationType.MANY_TO_ONE: ManyToOneAssociationMetadata,
    AssociationType.ONE_TO_MANY: OneToManyAssociationMetadata,
    AssociationType.MANY_TO_MANY: ManyToManyAssociationMetadata,
}


def create_association(association_type: AssociationType, **kwargs: Any) -> AssociationMetadata:
    """
    Create the association class matching ``association_type``.

    Example:
        >>> assoc = create_association(
        ...     AssociationType.MANY_TO_ONE,
        ...     field_name="group",
        ...     target_entity="models.cms.CmsGroup",
        ...     source_entity="models.cms.CmsUser",
        ... )
        >>> isinstance(assoc, ManyToOneAssociationMetadata)
        True
    """
    association_class = ASSOCIATION_CLASSES[AssociationType(association_type)]
    return association_class(**kwargs)

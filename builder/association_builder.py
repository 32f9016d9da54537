"""
Fluent builders for association mappings.

- `AssociationBuilder` builds one-to-one and many-to-one associations.
- `OneToManyAssociationBuilder` adds ordering and indexing for collections.
- `ManyToManyAssociationBuilder` adds the join table of the owning side.

Builders collect settings and check them all at once in `build()`. A rejected
build raises `MappingError` before the class metadata is touched, so the
builder can be adjusted and built again.

Rules checked on build:

1. ``mapped_by`` and ``inversed_by`` are mutually exclusive.
2. Only owning to-one associations may be part of the identifier.
3. Orphan removal is not available on many-to-one associations.
4. An inverse side declares no join columns or join table.
5. A one-to-many association needs ``mapped_by``.
6. A many-to-one association is always the owning side.
"""

from typing import TYPE_CHECKING, Any

from ..exceptions import MappingError
from ..log_config import get_logger
from ..metadata.associations import AssociationMetadata, create_association
from ..metadata.class_metadata import ClassMetadata
from ..metadata.columns import JoinColumnMetadata, JoinTableMetadata
from ..metadata.enums import ALL_CASCADES, AssociationType, CascadeType, FetchMode

if TYPE_CHECKING:
    from .class_metadata_builder import ClassMetadataBuilder

logger = get_logger(__name__)


def _join_column(
    column_name: str,
    referenced_column_name: str,
    nullable: bool = True,
    unique: bool = False,
    on_delete: str | None = None,
    column_definition: str | None = None,
) -> JoinColumnMetadata:
    return JoinColumnMetadata(
        column_name=column_name,
        referenced_column_name=referenced_column_name,
        nullable=nullable,
        unique=unique,
        on_delete=on_delete or "",
        column_definition=column_definition,
    )


class AssociationBuilder:
    """
    Builder for to-one associations, and base of the to-many builders.

    Example:
        >>> (
        ...     builder.create_many_to_one("group", "models.cms.CmsGroup")
        ...     .add_join_column("group_id", "id", on_delete="CASCADE")
        ...     .cascade_all()
        ...     .build()
        ... )
    """

    def __init__(
        self,
        builder: "ClassMetadataBuilder",
        field_name: str,
        target_entity: str,
        association_type: AssociationType,
    ):
        self._builder = builder
        self._field_name = field_name
        self._target_entity = target_entity
        self._type = AssociationType(association_type)

        self._mapped_by: str | None = None
        self._inversed_by: str | None = None
        self._cascade: list[str] = []
        self._fetch = FetchMode.LAZY
        self._orphan_removal = False
        self._id = False
        self._join_columns: list[JoinColumnMetadata] = []
        self._built = False

    @property
    def association_type(self) -> AssociationType:
        return self._type

    # ------------------------------------------------------------------
    # Sides
    # ------------------------------------------------------------------

    def mapped_by(self, field_name: str) -> "AssociationBuilder":
        self._mapped_by = field_name
        return self

    def inversed_by(self, field_name: str) -> "AssociationBuilder":
        self._inversed_by = field_name
        return self

    # ------------------------------------------------------------------
    # Cascades
    # ------------------------------------------------------------------

    def _add_cascade(self, cascade: CascadeType) -> "AssociationBuilder":
        if cascade.value not in self._cascade:
            self._cascade.append(cascade.value)
        return self

    def cascade_all(self) -> "AssociationBuilder":
        self._cascade = list(ALL_CASCADES)
        return self

    def cascade_persist(self) -> "AssociationBuilder":
        return self._add_cascade(CascadeType.PERSIST)

    def cascade_remove(self) -> "AssociationBuilder":
        return self._add_cascade(CascadeType.REMOVE)

    def cascade_merge(self) -> "AssociationBuilder":
        return self._add_cascade(CascadeType.MERGE)

    def cascade_detach(self) -> "AssociationBuilder":
        return self._add_cascade(CascadeType.DETACH)

    def cascade_refresh(self) -> "AssociationBuilder":
        return self._add_cascade(CascadeType.REFRESH)

    # ------------------------------------------------------------------
    # Fetch modes
    # ------------------------------------------------------------------

    def fetch_extra_lazy(self) -> "AssociationBuilder":
        self._fetch = FetchMode.EXTRA_LAZY
        return self

    def fetch_eager(self) -> "AssociationBuilder":
        self._fetch = FetchMode.EAGER
        return self

    def fetch_lazy(self) -> "AssociationBuilder":
        self._fetch = FetchMode.LAZY
        return self

    # ------------------------------------------------------------------
    # Columns and identity
    # ------------------------------------------------------------------

    def add_join_column(
        self,
        column_name: str,
        referenced_column_name: str,
        nullable: bool = True,
        unique: bool = False,
        on_delete: str | None = None,
        column_definition: str | None = None,
    ) -> "AssociationBuilder":
        self._join_columns.append(
            _join_column(column_name, referenced_column_name, nullable, unique, on_delete, column_definition)
        )
        return self

    def make_primary_key(self) -> "AssociationBuilder":
        self._id = True
        return self

    def orphan_removal(self) -> "AssociationBuilder":
        self._orphan_removal = True
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> "ClassMetadataBuilder":
        """
        Validate the settings and register the association.

        Returns:
            The owning `ClassMetadataBuilder`

        Raises:
            MappingError: If a mapping rule is violated; nothing is registered
        """
        cm = self._builder.get_class_metadata()
        if self._built:
            raise MappingError.builder_already_built(cm.class_name, self._field_name)

        error = self._validate(cm)
        if error is not None:
            logger.warning(
                "mapping_rejected",
                entity=cm.class_name,
                field=self._field_name,
                association_type=self._type.name,
                reason=str(error),
            )
            raise error

        association = self._create_association(cm)
        cm.add_association(association)
        self._built = True
        logger.debug(
            "association_mapped",
            entity=cm.class_name,
            field=self._field_name,
            target=self._target_entity,
            association_type=self._type.name,
            owning_side=association.is_owning_side,
        )
        return self._builder

    def _validate(self, cm: ClassMetadata) -> MappingError | None:
        class_name = cm.class_name
        if self._mapped_by is not None and self._inversed_by is not None:
            return MappingError.mapped_by_and_inversed_by(class_name, self._field_name)
        if self._id and self._type.is_to_many:
            return MappingError.illegal_to_many_identifier_association(class_name, self._field_name)
        if self._id and self._mapped_by is not None:
            return MappingError.illegal_inverse_identifier_association(class_name, self._field_name)
        if self._mapped_by is not None and self._type == AssociationType.MANY_TO_ONE:
            return MappingError.many_to_one_cannot_be_inverse(class_name, self._field_name)
        if self._orphan_removal and self._type == AssociationType.MANY_TO_ONE:
            return MappingError.illegal_orphan_removal(class_name, self._field_name)
        if self._mapped_by is not None and self._join_columns:
            return MappingError.join_columns_on_inverse_side(class_name, self._field_name)
        if cm.has_field(self._field_name):
            return MappingError.duplicate_field_mapping(class_name, self._field_name)
        return None

    def _common_fields(self, cm: ClassMetadata) -> dict[str, Any]:
        return {
            "field_name": self._field_name,
            "target_entity": self._target_entity,
            "source_entity": cm.class_name,
            "mapped_by": self._mapped_by,
            "inversed_by": self._inversed_by,
            "cascade": list(self._cascade),
            "fetch": self._fetch,
            "orphan_removal": self._orphan_removal,
        }

    def _cascade_with_orphan_removal(self) -> list[str]:
        cascade = list(self._cascade)
        if self._orphan_removal and CascadeType.REMOVE.value not in cascade:
            cascade.insert(0, CascadeType.REMOVE.value)
        return cascade

    def _create_association(self, cm: ClassMetadata) -> AssociationMetadata:
        naming = cm.naming_strategy
        join_columns: list[JoinColumnMetadata] = []

        if self._mapped_by is None:
            columns = self._join_columns or [
                _join_column(
                    naming.join_column_name(self._field_name, cm.class_name),
                    naming.reference_column_name(),
                )
            ]
            # A one-to-one foreign key is unique unless it is also the identifier.
            unique = self._type == AssociationType.ONE_TO_ONE and not self._id
            for column in columns:
                update: dict[str, Any] = {"table_name": cm.get_table_name()}
                if unique:
                    update["unique"] = True
                join_columns.append(column.model_copy(update=update))

        fields = self._common_fields(cm)
        fields["cascade"] = self._cascade_with_orphan_removal()
        return create_association(self._type, **fields, join_columns=join_columns, id=self._id)


class OneToManyAssociationBuilder(AssociationBuilder):
    """Builder for one-to-many associations (always the inverse side)."""

    def __init__(
        self,
        builder: "ClassMetadataBuilder",
        field_name: str,
        target_entity: str,
        association_type: AssociationType = AssociationType.ONE_TO_MANY,
    ):
        super().__init__(builder, field_name, target_entity, association_type)
        self._order_by: list[str] | None = None
        self._index_by: str | None = None

    def set_order_by(self, field_names: list[str]) -> "OneToManyAssociationBuilder":
        self._order_by = list(field_names)
        return self

    def set_index_by(self, field_name: str) -> "OneToManyAssociationBuilder":
        self._index_by = field_name
        return self

    def _validate(self, cm: ClassMetadata) -> MappingError | None:
        error = super()._validate(cm)
        if error is None and self._type == AssociationType.ONE_TO_MANY and self._mapped_by is None:
            return MappingError.one_to_many_requires_mapped_by(cm.class_name, self._field_name)
        return error

    def _collection_fields(self, cm: ClassMetadata) -> dict[str, Any]:
        fields = self._common_fields(cm)
        fields["order_by"] = self._order_by
        fields["index_by"] = self._index_by
        return fields

    def _create_association(self, cm: ClassMetadata) -> AssociationMetadata:
        fields = self._collection_fields(cm)
        fields["cascade"] = self._cascade_with_orphan_removal()
        return create_association(self._type, **fields)


class ManyToManyAssociationBuilder(OneToManyAssociationBuilder):
    """
    Builder for many-to-many associations.

    On the owning side, anything left out of the join table is named by the
    class metadata's naming strategy: the table after both entities
    (``cmsuser_cmsgroup``), the join and inverse join columns after the entity
    they point to (``cmsuser_id``, ``cmsgroup_id``) with ``ON DELETE CASCADE``.
    """

    def __init__(self, builder: "ClassMetadataBuilder", field_name: str, target_entity: str):
        super().__init__(builder, field_name, target_entity, AssociationType.MANY_TO_MANY)
        self._join_table_name: str | None = None
        self._inverse_join_columns: list[JoinColumnMetadata] = []

    def set_join_table(self, name: str) -> "ManyToManyAssociationBuilder":
        self._join_table_name = name
        return self

    def add_inverse_join_column(
        self,
        column_name: str,
        referenced_column_name: str,
        nullable: bool = True,
        unique: bool = False,
        on_delete: str | None = None,
        column_definition: str | None = None,
    ) -> "ManyToManyAssociationBuilder":
        self._inverse_join_columns.append(
            _join_column(column_name, referenced_column_name, nullable, unique, on_delete, column_definition)
        )
        return self

    def _validate(self, cm: ClassMetadata) -> MappingError | None:
        error = super()._validate(cm)
        if error is None and self._mapped_by is not None:
            if self._join_table_name is not None or self._inverse_join_columns:
                return MappingError.join_columns_on_inverse_side(cm.class_name, self._field_name)
        return error

    def _create_association(self, cm: ClassMetadata) -> AssociationMetadata:
        fields = self._collection_fields(cm)
        if self._mapped_by is None:
            fields["join_table"] = self._create_join_table(cm)
        return create_association(self._type, **fields)

    def _create_join_table(self, cm: ClassMetadata) -> JoinTableMetadata:
        naming = cm.naming_strategy
        referenced = naming.reference_column_name()
        name = self._join_table_name or naming.join_table_name(cm.class_name, self._target_entity, self._field_name)
        join_columns = self._join_columns or [
            _join_column(naming.join_key_column_name(cm.class_name), referenced, on_delete="CASCADE")
        ]
        inverse_join_columns = self._inverse_join_columns or [
            _join_column(naming.join_key_column_name(self._target_entity), referenced, on_delete="CASCADE")
        ]
        return JoinTableMetadata(
            name=name,
            join_columns=list(join_columns),
            inverse_join_columns=list(inverse_join_columns),
        )

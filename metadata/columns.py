"""
Column-level value objects: join columns, join tables, discriminator columns
and the primary table of an entity.

Join columns, join tables and discriminator columns are frozen pydantic models
and compare by value. Dumping with ``by_alias=True`` yields the camelCase keys
used by mapping drivers (``columnName``, ``referencedColumnName``, ``onDelete``).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

VALUE_OBJECT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class JoinColumnMetadata(BaseModel):
    """
    Foreign key column of an association.

    Attributes:
        table_name: Table holding the column (owning entity table for to-one
            associations, unset inside a join table)
        column_name: Name of the foreign key column
        referenced_column_name: Column on the target table it points to
        nullable: Whether the column accepts NULL
        unique: Whether the column carries a unique constraint
        on_delete: Referential action, e.g. "CASCADE" or "SET NULL" ("" for none)
        column_definition: Raw DDL override

    Example:
        >>> JoinColumnMetadata(
        ...     table_name="CmsUser",
        ...     column_name="group_id",
        ...     referenced_column_name="id",
        ...     on_delete="CASCADE",
        ... )
    """

    model_config = VALUE_OBJECT_CONFIG

    table_name: str | None = None
    column_name: str | None = None
    referenced_column_name: str | None = None
    nullable: bool = True
    unique: bool = False
    on_delete: str = ""
    column_definition: str | None = None


class JoinTableMetadata(BaseModel):
    """
    Junction table of an owning many-to-many association.

    Attributes:
        name: Table name
        schema_name: Optional database schema
        join_columns: Columns pointing at the owning (source) entity
        inverse_join_columns: Columns pointing at the target entity
    """

    model_config = VALUE_OBJECT_CONFIG

    name: str | None = None
    schema_name: str | None = None
    join_columns: list[JoinColumnMetadata] = Field(default_factory=list)
    inverse_join_columns: list[JoinColumnMetadata] = Field(default_factory=list)


class DiscriminatorColumnMetadata(BaseModel):
    """
    Column that tells apart the classes of an inheritance hierarchy.

    Build instances with `DiscriminatorColumnMetadataBuilder`, which rejects
    unsupported types and lengths.
    """

    model_config = VALUE_OBJECT_CONFIG

    table_name: str | None = None
    column_name: str = "dtype"
    type_name: str = "string"
    length: int | None = 255
    column_definition: str | None = None


class TableMetadata(BaseModel):
    """
    Primary table of an entity.

    Attributes:
        name: Table name
        schema_name: Optional database schema
        indexes: Index name -> {"columns": [...]}
        unique_constraints: Constraint name -> {"columns": [...]}
        options: Free-form platform options
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    schema_name: str | None = None
    indexes: dict[str, dict] = Field(default_factory=dict)
    unique_constraints: dict[str, dict] = Field(default_factory=dict)
    options: dict = Field(default_factory=dict)

    def add_index(self, columns: list[str], name: str) -> None:
        self.indexes[name] = {"columns": list(columns)}

    def add_unique_constraint(self, columns: list[str], name: str) -> None:
        self.unique_constraints[name] = {"columns": list(columns)}

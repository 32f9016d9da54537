"""
Tests for the column value objects and the discriminator column builder.

Join columns and join tables compare by value and cannot be mutated once
created. The discriminator column builder rejects malformed columns with
`ConfigurationError` before they reach a class metadata.
"""

import pytest
from pydantic import ValidationError

from orm_mapping_schema.builder import DiscriminatorColumnMetadataBuilder
from orm_mapping_schema.exceptions import ConfigurationError
from orm_mapping_schema.metadata import DiscriminatorColumnMetadata, JoinColumnMetadata, JoinTableMetadata


def test_join_column_defaults():
    column = JoinColumnMetadata()

    assert column.table_name is None
    assert column.column_name is None
    assert column.referenced_column_name is None
    assert column.nullable
    assert not column.unique
    assert column.on_delete == ""


def test_join_columns_compare_by_value():
    first = JoinColumnMetadata(column_name="group_id", referenced_column_name="id", on_delete="CASCADE")
    second = JoinColumnMetadata(column_name="group_id", referenced_column_name="id", on_delete="CASCADE")

    assert first == second
    assert first is not second
    assert first != second.model_copy(update={"unique": True})


def test_join_column_is_frozen():
    column = JoinColumnMetadata(column_name="group_id")

    with pytest.raises(ValidationError):
        column.column_name = "other_id"


def test_join_column_dump_uses_driver_keys():
    column = JoinColumnMetadata(table_name="CmsUser", column_name="group_id", referenced_column_name="id")

    assert column.model_dump(by_alias=True) == {
        "tableName": "CmsUser",
        "columnName": "group_id",
        "referencedColumnName": "id",
        "nullable": True,
        "unique": False,
        "onDelete": "",
        "columnDefinition": None,
    }


def test_join_tables_compare_by_value():
    def make():
        return JoinTableMetadata(
            name="groups_users",
            join_columns=[JoinColumnMetadata(column_name="group_id", referenced_column_name="id")],
            inverse_join_columns=[JoinColumnMetadata(column_name="user_id", referenced_column_name="id")],
        )

    assert make() == make()
    assert make() != JoinTableMetadata(name="groups_users")


def test_discriminator_column_builder_defaults():
    column = DiscriminatorColumnMetadataBuilder().build()

    assert column == DiscriminatorColumnMetadata(column_name="dtype", type_name="string", length=255)
    assert column.table_name is None


def test_discriminator_column_builder_is_fluent():
    column_builder = DiscriminatorColumnMetadataBuilder()

    assert column_builder.with_table_name("users") is column_builder
    assert column_builder.with_column_name("kind") is column_builder
    assert column_builder.with_type("integer") is column_builder
    assert column_builder.with_length(None) is column_builder
    assert column_builder.with_column_definition("SMALLINT") is column_builder

    column = column_builder.build()
    assert column.table_name == "users"
    assert column.column_name == "kind"
    assert column.type_name == "integer"
    assert column.length is None
    assert column.column_definition == "SMALLINT"


def test_discriminator_column_table_name_is_kept(builder, class_metadata):
    builder.set_discriminator_column(DiscriminatorColumnMetadataBuilder().with_table_name("users").build())

    assert class_metadata.discriminator_column.table_name == "users"


@pytest.mark.parametrize(
    "configure",
    [
        lambda b: b.with_type("datetime"),
        lambda b: b.with_column_name(""),
        lambda b: b.with_length(0),
        lambda b: b.with_length(-5),
    ],
)
def test_discriminator_column_builder_rejects_invalid_input(configure):
    with pytest.raises(ConfigurationError):
        configure(DiscriminatorColumnMetadataBuilder()).build()

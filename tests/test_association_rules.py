"""
Tests for the rules association builders enforce on ``build()``.

A rejected build must raise `MappingError` and leave the class metadata
untouched; the same builder may then be corrected and built again. Also covers
cascade handling and the one-shot ``add_*`` association helpers.
"""

import pytest
from structlog.testing import capture_logs

from orm_mapping_schema.exceptions import MappingError
from orm_mapping_schema.metadata import (
    ManyToManyAssociationMetadata,
    ManyToOneAssociationMetadata,
    OneToManyAssociationMetadata,
    OneToOneAssociationMetadata,
)

CMS_GROUP = "models.cms.CmsGroup"
CMS_ADDRESS = "models.cms.CmsAddress"


def test_cascade_all_twice_is_same_as_once(builder, class_metadata):
    association_builder = builder.create_many_to_one("group", CMS_GROUP)
    association_builder.cascade_all().cascade_all().build()

    assert class_metadata.association_mappings["group"].cascade == ["remove", "persist", "refresh", "merge", "detach"]


def test_single_cascades_are_unique_and_ordered(builder, class_metadata):
    (
        builder.create_many_to_one("group", CMS_GROUP)
        .cascade_persist()
        .cascade_merge()
        .cascade_persist()
        .cascade_refresh()
        .build()
    )

    assert class_metadata.association_mappings["group"].cascade == ["persist", "merge", "refresh"]


def test_fetch_mode_setters(builder, class_metadata):
    builder.create_many_to_one("group", CMS_GROUP).fetch_eager().build()
    builder.create_many_to_one("other_group", CMS_GROUP).fetch_extra_lazy().fetch_lazy().build()

    assert class_metadata.association_mappings["group"].fetch == "EAGER"
    assert class_metadata.association_mappings["other_group"].fetch == "LAZY"


def test_association_builder_setters_are_fluent(builder):
    association_builder = builder.create_one_to_one("address", CMS_ADDRESS)

    assert association_builder.inversed_by("user") is association_builder
    assert association_builder.cascade_all() is association_builder
    assert association_builder.cascade_detach() is association_builder
    assert association_builder.fetch_extra_lazy() is association_builder
    assert association_builder.add_join_column("address_id", "id") is association_builder
    assert association_builder.make_primary_key() is association_builder
    assert association_builder.orphan_removal() is association_builder


def test_rejected_build_can_be_retried(builder, class_metadata):
    association_builder = builder.create_one_to_one("address", CMS_ADDRESS).mapped_by("user").make_primary_key()

    with pytest.raises(MappingError):
        association_builder.build()
    assert class_metadata.association_mappings == {}

    association_builder.mapped_by(None)
    assert association_builder.build() is builder
    assert class_metadata.identifier == ["address"]


def test_built_association_builder_cannot_be_built_again(builder):
    association_builder = builder.create_many_to_one("group", CMS_GROUP)
    association_builder.build()

    with pytest.raises(MappingError):
        association_builder.build()


def test_mapped_by_and_inversed_by_are_exclusive(builder, class_metadata):
    with pytest.raises(MappingError):
        builder.create_one_to_one("address", CMS_ADDRESS).mapped_by("user").inversed_by("user").build()
    assert class_metadata.association_mappings == {}


def test_inverse_side_cannot_declare_join_columns(builder, class_metadata):
    with pytest.raises(MappingError):
        builder.create_one_to_one("address", CMS_ADDRESS).mapped_by("user").add_join_column("address_id", "id").build()
    assert class_metadata.association_mappings == {}


def test_inverse_many_to_many_cannot_declare_join_table(builder, class_metadata):
    with pytest.raises(MappingError):
        builder.create_many_to_many("groups", CMS_GROUP).mapped_by("users").set_join_table("groups_users").build()
    assert class_metadata.association_mappings == {}


def test_one_to_many_requires_mapped_by(builder, class_metadata):
    with pytest.raises(MappingError):
        builder.create_one_to_many("phonenumbers", "models.cms.CmsPhonenumber").build()
    assert class_metadata.association_mappings == {}


def test_many_to_one_cannot_be_inverse_side(builder, class_metadata):
    association_builder = builder.create_many_to_one("group", CMS_GROUP).mapped_by("users")

    with pytest.raises(MappingError, match="cannot use 'mapped_by'"):
        association_builder.build()
    assert class_metadata.association_mappings == {}

    builder.create_many_to_one("group", CMS_GROUP).inversed_by("users").build()
    assert class_metadata.get_association_mapping("group").is_owning_side


def test_association_name_cannot_shadow_property(builder, class_metadata):
    builder.add_property("group", "integer")

    with pytest.raises(MappingError):
        builder.create_many_to_one("group", CMS_GROUP).build()
    assert class_metadata.association_mappings == {}


def test_orphan_removal_on_inverse_one_to_one_adds_remove(builder, class_metadata):
    builder.create_one_to_one("address", CMS_ADDRESS).mapped_by("user").cascade_persist().orphan_removal().build()

    association = class_metadata.association_mappings["address"]
    assert association.orphan_removal
    assert association.cascade == ["remove", "persist"]


def test_rejected_build_is_logged(builder):
    with capture_logs() as logs:
        with pytest.raises(MappingError):
            builder.create_many_to_one("group", CMS_GROUP).orphan_removal().build()

    rejected = [entry for entry in logs if entry["event"] == "mapping_rejected"]
    assert len(rejected) == 1
    assert rejected[0]["log_level"] == "warning"
    assert rejected[0]["field"] == "group"


def test_successful_build_is_logged(builder):
    with capture_logs() as logs:
        builder.create_many_to_one("group", CMS_GROUP).build()

    mapped = [entry for entry in logs if entry["event"] == "association_mapped"]
    assert len(mapped) == 1
    assert mapped[0]["association_type"] == "MANY_TO_ONE"
    assert mapped[0]["owning_side"] is True


# ============================================================================
# One-shot helpers
# ============================================================================


def test_add_many_to_one(builder, class_metadata):
    assert builder.add_many_to_one("group", CMS_GROUP, inversed_by="users") is builder

    association = class_metadata.association_mappings["group"]
    assert isinstance(association, ManyToOneAssociationMetadata)
    assert association.inversed_by == "users"
    assert association.join_columns[0].column_name == "group_id"
    assert not association.join_columns[0].unique


def test_add_owning_and_inverse_one_to_one(builder, class_metadata):
    builder.add_owning_one_to_one("address", CMS_ADDRESS, "user").add_inverse_one_to_one(
        "profile", "models.cms.CmsProfile", "user"
    )

    owning = class_metadata.association_mappings["address"]
    inverse = class_metadata.association_mappings["profile"]
    assert isinstance(owning, OneToOneAssociationMetadata)
    assert owning.is_owning_side
    assert owning.join_columns[0].unique
    assert not inverse.is_owning_side
    assert inverse.mapped_by == "user"


def test_add_one_to_many(builder, class_metadata):
    builder.add_one_to_many("phonenumbers", "models.cms.CmsPhonenumber", "user")

    association = class_metadata.association_mappings["phonenumbers"]
    assert isinstance(association, OneToManyAssociationMetadata)
    assert association.mapped_by == "user"


def test_add_owning_and_inverse_many_to_many(builder, class_metadata):
    builder.add_owning_many_to_many("groups", CMS_GROUP, "users")
    builder.add_inverse_many_to_many("tags", "models.cms.CmsTag", "users")

    owning = class_metadata.association_mappings["groups"]
    inverse = class_metadata.association_mappings["tags"]
    assert isinstance(owning, ManyToManyAssociationMetadata)
    assert owning.join_table.name == "cmsuser_cmsgroup"
    assert owning.join_table.join_columns[0].column_name == "cmsuser_id"
    assert inverse.join_table is None
    assert not inverse.is_owning_side

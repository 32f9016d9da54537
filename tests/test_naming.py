"""
Tests for the naming strategies and their effect on builder defaults.
"""

from orm_mapping_schema.builder import ClassMetadataBuilder
from orm_mapping_schema.config import MappingConfig
from orm_mapping_schema.naming import DefaultNamingStrategy, UnderscoreNamingStrategy, short_class_name


def test_short_class_name():
    assert short_class_name("models.cms.CmsUser") == "CmsUser"
    assert short_class_name("Doctrine\\Tests\\Models\\CMS\\CmsUser") == "CmsUser"
    assert short_class_name("CmsUser") == "CmsUser"


def test_default_naming_strategy():
    naming = DefaultNamingStrategy()

    assert naming.class_to_table_name("models.cms.CmsUser") == "CmsUser"
    assert naming.property_to_column_name("userName") == "userName"
    assert naming.reference_column_name() == "id"
    assert naming.join_column_name("group") == "group_id"
    assert naming.join_table_name("models.cms.CmsUser", "models.cms.CmsGroup") == "cmsuser_cmsgroup"
    assert naming.join_key_column_name("models.cms.CmsGroup") == "cmsgroup_id"
    assert naming.join_key_column_name("models.cms.CmsGroup", "uuid") == "cmsgroup_uuid"


def test_underscore_naming_strategy_lower():
    naming = UnderscoreNamingStrategy()

    assert naming.class_to_table_name("models.cms.CmsUser") == "cms_user"
    assert naming.property_to_column_name("userName") == "user_name"
    assert naming.join_column_name("mainGroup") == "main_group_id"
    assert naming.join_table_name("models.cms.CmsUser", "models.cms.CmsGroup") == "cms_user_cms_group"
    assert naming.join_key_column_name("models.cms.CmsGroup") == "cms_group_id"


def test_underscore_naming_strategy_upper():
    naming = UnderscoreNamingStrategy(case="upper")

    assert naming.class_to_table_name("models.cms.CmsUser") == "CMS_USER"
    assert naming.property_to_column_name("userName") == "USER_NAME"
    assert naming.join_column_name("mainGroup") == "MAIN_GROUP_ID"


def test_builder_uses_configured_naming_strategy():
    builder = ClassMetadataBuilder.for_class("models.cms.CmsUser", MappingConfig(naming_strategy="underscore"))
    (
        builder.add_property("userName", "string")
        .create_many_to_one("mainGroup", "models.cms.CmsGroup")
        .build()
        .create_many_to_many("groups", "models.cms.CmsGroup")
        .build()
    )
    cm = builder.get_class_metadata()

    assert cm.get_table_name() == "cms_user"
    assert cm.get_property("userName").column_name == "user_name"
    assert cm.get_property("userName").table_name == "cms_user"
    main_group = cm.get_association_mapping("mainGroup")
    assert main_group.join_columns[0].column_name == "main_group_id"
    assert main_group.join_columns[0].table_name == "cms_user"
    groups = cm.get_association_mapping("groups")
    assert groups.join_table.name == "cms_user_cms_group"
    assert groups.join_table.join_columns[0].column_name == "cms_user_id"
    assert groups.join_table.inverse_join_columns[0].column_name == "cms_group_id"

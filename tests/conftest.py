"""
Global fixtures for the test suite.

Fixtures:
- `class_metadata`: fresh `ClassMetadata` for the ``models.cms.CmsUser``
  entity, whose default table name is ``CmsUser``.
- `builder`: `ClassMetadataBuilder` wrapping that same `class_metadata`.

Run all tests with:
    pytest -v
"""

import pytest

from orm_mapping_schema.builder import ClassMetadataBuilder
from orm_mapping_schema.metadata import ClassMetadata


@pytest.fixture
def class_metadata():
    """Empty metadata for the CmsUser entity."""
    return ClassMetadata("models.cms.CmsUser")


@pytest.fixture
def builder(class_metadata):
    """Builder bound to the `class_metadata` fixture."""
    return ClassMetadataBuilder(class_metadata)

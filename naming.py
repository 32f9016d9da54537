"""
Naming strategies for tables and columns that are not named explicitly.

A naming strategy decides the default table name of an entity, the column name
of a field, and the names used for join columns and join tables when an
association mapping leaves them out.

- `DefaultNamingStrategy` keeps class and field names as they are and lower-cases
  generated join names (``CmsUser`` / ``cmsuser_cmsgroup`` / ``cmsgroup_id``).
- `UnderscoreNamingStrategy` converts CamelCase to snake_case
  (``cms_user`` / ``cms_user_cms_group``), in lower or upper case.
"""

import re
from abc import ABC, abstractmethod
from typing import Literal


def short_class_name(class_name: str) -> str:
    """Strip the module/namespace part from a fully qualified class name."""
    return re.split(r"[.\\]", class_name)[-1]


class NamingStrategy(ABC):
    """Abstract naming strategy."""

    @abstractmethod
    def class_to_table_name(self, class_name: str) -> str:
        """Default table name for an entity class."""
        pass

    @abstractmethod
    def property_to_column_name(self, property_name: str, class_name: str | None = None) -> str:
        """Default column name for a mapped field."""
        pass

    def reference_column_name(self) -> str:
        """Column referenced by generated join columns."""
        return "id"

    @abstractmethod
    def join_column_name(self, property_name: str, class_name: str | None = None) -> str:
        """Join column name of an owning to-one association."""
        pass

    @abstractmethod
    def join_table_name(self, source_entity: str, target_entity: str, property_name: str | None = None) -> str:
        """Join table name of an owning many-to-many association."""
        pass

    @abstractmethod
    def join_key_column_name(self, entity_name: str, referenced_column_name: str | None = None) -> str:
        """Column in a join table that points at ``entity_name``."""
        pass


class DefaultNamingStrategy(NamingStrategy):
    def class_to_table_name(self, class_name: str) -> str:
        return short_class_name(class_name)

    def property_to_column_name(self, property_name: str, class_name: str | None = None) -> str:
        return property_name

    def join_column_name(self, property_name: str, class_name: str | None = None) -> str:
        return f"{property_name}_{self.reference_column_name()}"

    def join_table_name(self, source_entity: str, target_entity: str, property_name: str | None = None) -> str:
        source = self.class_to_table_name(source_entity).lower()
        target = self.class_to_table_name(target_entity).lower()
        return f"{source}_{target}"

    def join_key_column_name(self, entity_name: str, referenced_column_name: str | None = None) -> str:
        table = self.class_to_table_name(entity_name).lower()
        return f"{table}_{referenced_column_name or self.reference_column_name()}"


class UnderscoreNamingStrategy(NamingStrategy):
    """
    CamelCase to snake_case naming.

    Attributes:
        case: "lower" (default) or "upper" for the generated names
    """

    def __init__(self, case: Literal["lower", "upper"] = "lower"):
        self.case = case

    def _underscore(self, name: str) -> str:
        snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name)
        return snake.upper() if self.case == "upper" else snake.lower()

    def class_to_table_name(self, class_name: str) -> str:
        return self._underscore(short_class_name(class_name))

    def property_to_column_name(self, property_name: str, class_name: str | None = None) -> str:
        return self._underscore(property_name)

    def reference_column_name(self) -> str:
        return "ID" if self.case == "upper" else "id"

    def join_column_name(self, property_name: str, class_name: str | None = None) -> str:
        return f"{self._underscore(property_name)}_{self.reference_column_name()}"

    def join_table_name(self, source_entity: str, target_entity: str, property_name: str | None = None) -> str:
        return f"{self.class_to_table_name(source_entity)}_{self.class_to_table_name(target_entity)}"

    def join_key_column_name(self, entity_name: str, referenced_column_name: str | None = None) -> str:
        referenced = referenced_column_name or self.reference_column_name()
        return f"{self.class_to_table_name(entity_name)}_{referenced}"

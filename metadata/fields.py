"""
Field-level metadata: mapped scalar properties and embedded value objects.

Both keep a weak back-reference to the `ClassMetadata` that declares them. The
class metadata owns its fields; a field never keeps its declaring class alive.
"""

import weakref
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel
from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeEngine

from .. import column_types
from .enums import GeneratorType

if TYPE_CHECKING:
    from .class_metadata import ClassMetadata


class MappedElement(BaseModel):
    """Base for metadata owned by a `ClassMetadata`."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    _declaring_class: Optional[weakref.ReferenceType] = PrivateAttr(default=None)

    @property
    def declaring_class(self) -> Optional["ClassMetadata"]:
        if self._declaring_class is None:
            return None
        return self._declaring_class()

    def set_declaring_class(self, class_metadata: "ClassMetadata") -> None:
        self._declaring_class = weakref.ref(class_metadata)

    def to_dict(self) -> dict[str, Any]:
        """Driver-facing dump: camelCase keys plus ``declaringClass``."""
        data = self.model_dump(by_alias=True)
        data["declaringClass"] = self.declaring_class
        return data


class FieldMetadata(MappedElement):
    """
    A mapped scalar property (one column).

    Attributes:
        name: Field name on the entity
        type_name: Registered column type name (see `column_types`)
        table_name: Table holding the column; the entity table when built
        column_name: Column name; the naming strategy's choice when built
        nullable: Column accepts NULL
        unique: Column carries a unique constraint
        primary_key: Field is (part of) the identifier
        column_definition: Raw DDL override
        length: Length for string columns
        precision: Precision for decimal columns
        scale: Scale for decimal columns
        versioned: Field is the optimistic-locking version field
        value_generator: Identifier generation strategy, if generated
        sequence_generator: Sequence definition for SEQUENCE generation
        options: Free-form column options (e.g. {"unsigned": True})

    Example:
        >>> prop = FieldMetadata(name="id", type_name="integer", primary_key=True)
        >>> prop.get_type()
        Integer()
    """

    name: str
    type_name: str
    table_name: str | None = None
    column_name: str | None = None
    nullable: bool = False
    unique: bool = False
    primary_key: bool = False
    column_definition: str | None = None
    length: int | None = None
    precision: int | None = None
    scale: int | None = None
    versioned: bool = False
    value_generator: GeneratorType | None = None
    sequence_generator: dict[str, Any] | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    def get_type(self) -> TypeEngine:
        """SQLAlchemy type instance for this column."""
        type_class = column_types.get_type(self.type_name)
        if issubclass(type_class, String) and self.length is not None:
            return type_class(length=self.length)
        if issubclass(type_class, Numeric) and self.precision is not None:
            return type_class(precision=self.precision, scale=self.scale)
        return type_class()

    @property
    def is_generated(self) -> bool:
        return self.value_generator not in (None, GeneratorType.NONE)


class EmbeddedClassMetadata(MappedElement):
    """
    An embedded value object mapped inline into the owning entity's table.

    Attributes:
        class_name: Value object class (dumped as ``class``)
        column_prefix: Prefix for the embedded columns, None for the default
        declared_field: Field of the enclosing embeddable, for nested embeddables
        original_field: Field name inside that enclosing embeddable
    """

    class_name: str = Field(alias="class")
    column_prefix: str | None = None
    declared_field: str | None = None
    original_field: str | None = None

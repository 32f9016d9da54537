"""
Registry of semantic column type names.

Field mappings refer to column types by short names ("string", "integer",
"datetime", ...). This module resolves those names to SQLAlchemy type classes so
that consumers of the metadata (schema tools, hydrators) get a concrete type,
and so an unknown name is rejected as soon as a field is declared.

Example:
    >>> get_type("string")
    <class 'sqlalchemy.sql.sqltypes.String'>
    >>> is_integer_type("bigint")
    True
"""

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    Numeric,
    SmallInteger,
    String,
    Text,
    Time,
    Uuid,
)
from sqlalchemy.types import TypeEngine

from .exceptions import ConfigurationError

_TYPE_MAP: dict[str, type[TypeEngine]] = {
    "string": String,
    "text": Text,
    "integer": Integer,
    "smallint": SmallInteger,
    "bigint": BigInteger,
    "boolean": Boolean,
    "decimal": Numeric,
    "float": Float,
    "date": Date,
    "time": Time,
    "datetime": DateTime,
    "datetimetz": DateTime,
    "json": JSON,
    "binary": LargeBinary,
    "blob": LargeBinary,
    "guid": Uuid,
}


def get_type(type_name: str) -> type[TypeEngine]:
    """Resolve a type name to its SQLAlchemy type class."""
    try:
        return _TYPE_MAP[type_name]
    except KeyError:
        raise ConfigurationError.unknown_column_type(type_name) from None


def has_type(type_name: str) -> bool:
    return type_name in _TYPE_MAP


def register_type(type_name: str, type_class: type[TypeEngine], override: bool = False) -> None:
    """
    Register a custom column type name.

    Args:
        type_name: Name used in field mappings
        type_class: SQLAlchemy ``TypeEngine`` subclass backing the name
        override: Replace an existing registration instead of failing

    Raises:
        ConfigurationError: If the name is taken and ``override`` is False
    """
    if type_name in _TYPE_MAP and not override:
        raise ConfigurationError.column_type_exists(type_name)
    _TYPE_MAP[type_name] = type_class


def is_integer_type(type_name: str) -> bool:
    return has_type(type_name) and issubclass(_TYPE_MAP[type_name], Integer)


def is_datetime_type(type_name: str) -> bool:
    return has_type(type_name) and issubclass(_TYPE_MAP[type_name], DateTime)


def is_string_type(type_name: str) -> bool:
    return has_type(type_name) and issubclass(_TYPE_MAP[type_name], String)

from ..exceptions import ConfigurationError
from ..metadata.columns import DiscriminatorColumnMetadata

DISCRIMINATOR_COLUMN_TYPES = ("string", "integer")


class DiscriminatorColumnMetadataBuilder:
    """
    Fluent builder for a `DiscriminatorColumnMetadata`.

    Unset values fall back to a ``dtype`` string column of length 255; the table
    name is filled in when the column is assigned to a class.

    Example:
        >>> column = (
        ...     DiscriminatorColumnMetadataBuilder()
        ...     .with_column_name("discr")
        ...     .with_length(124)
        ...     .build()
        ... )
    """

    def __init__(self):
        self._table_name: str | None = None
        self._column_name = "dtype"
        self._type_name = "string"
        self._length: int | None = 255
        self._column_definition: str | None = None

    def with_table_name(self, table_name: str) -> "DiscriminatorColumnMetadataBuilder":
        self._table_name = table_name
        return self

    def with_column_name(self, column_name: str) -> "DiscriminatorColumnMetadataBuilder":
        self._column_name = column_name
        return self

    def with_type(self, type_name: str) -> "DiscriminatorColumnMetadataBuilder":
        self._type_name = type_name
        return self

    def with_length(self, length: int | None) -> "DiscriminatorColumnMetadataBuilder":
        self._length = length
        return self

    def with_column_definition(self, column_definition: str) -> "DiscriminatorColumnMetadataBuilder":
        self._column_definition = column_definition
        return self

    def build(self) -> DiscriminatorColumnMetadata:
        """
        Raises:
            ConfigurationError: For an empty column name, an unsupported type or
                a non-positive length
        """
        if not self._column_name:
            raise ConfigurationError.missing_discriminator_column_name()
        if self._type_name not in DISCRIMINATOR_COLUMN_TYPES:
            raise ConfigurationError.invalid_discriminator_column_type(self._type_name)
        if self._length is not None and (not isinstance(self._length, int) or self._length <= 0):
            raise ConfigurationError.invalid_discriminator_column_length(self._length)

        return DiscriminatorColumnMetadata(
            table_name=self._table_name,
            column_name=self._column_name,
            type_name=self._type_name,
            length=self._length,
            column_definition=self._column_definition,
        )

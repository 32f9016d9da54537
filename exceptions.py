"""
Error types raised while assembling mapping metadata.

Two kinds of failure exist:

- **ConfigurationError** - an input is malformed on its own (an unknown column
  type, a discriminator column with an unsupported type, an unknown mapping key).
  Raised as soon as the input is seen.
- **MappingError** - a combination of builder settings violates a mapping rule
  (an inverse association used as identifier, orphan removal on a many-to-one).
  Raised by a builder's terminal ``build()`` before anything is committed, so the
  class metadata is never left half-updated.
"""


class ConfigurationError(ValueError):
    """Malformed metadata construction input."""

    @classmethod
    def unknown_column_type(cls, type_name: str) -> "ConfigurationError":
        return cls(f"Unknown column type '{type_name}' requested.")

    @classmethod
    def column_type_exists(cls, type_name: str) -> "ConfigurationError":
        return cls(f"Column type '{type_name}' is already registered.")

    @classmethod
    def invalid_discriminator_column_type(cls, type_name: str) -> "ConfigurationError":
        return cls(f"Discriminator column type on entity may only be 'string' or 'integer', '{type_name}' given.")

    @classmethod
    def invalid_discriminator_column(cls, class_name: str, column: object) -> "ConfigurationError":
        return cls(
            f"Discriminator column of '{class_name}' must be a DiscriminatorColumnMetadata, "
            f"{type(column).__name__} given."
        )

    @classmethod
    def missing_discriminator_column_name(cls) -> "ConfigurationError":
        return cls("Discriminator column name must not be empty.")

    @classmethod
    def invalid_discriminator_column_length(cls, length: int) -> "ConfigurationError":
        return cls(f"Discriminator column length must be a positive integer, {length!r} given.")

    @classmethod
    def unknown_mapping_option(cls, field_name: str, option: str) -> "ConfigurationError":
        return cls(f"Unknown mapping option '{option}' for property '{field_name}'.")

    @classmethod
    def invalid_enum_value(cls, attribute: str, value: object, enum_type: type) -> "ConfigurationError":
        return cls(f"Invalid value {value!r} for '{attribute}', expected a {enum_type.__name__} member.")


class MappingError(Exception):
    """Mapping rule violated at a builder's ``build()`` call."""

    @classmethod
    def illegal_to_many_identifier_association(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Many-to-many or one-to-many associations are not allowed to be identifier in "
            f"'{class_name}#{field_name}'."
        )

    @classmethod
    def illegal_inverse_identifier_association(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"An inverse association is not allowed to be identifier in '{class_name}#{field_name}'."
        )

    @classmethod
    def illegal_orphan_removal(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Orphan removal is only allowed on one-to-one, one-to-many or many-to-many "
            f"associations, but '{class_name}#{field_name}' is not."
        )

    @classmethod
    def mapped_by_and_inversed_by(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Association '{class_name}#{field_name}' cannot be both the inverse side (mapped_by) "
            f"and the owning side (inversed_by)."
        )

    @classmethod
    def join_columns_on_inverse_side(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Association '{class_name}#{field_name}' is the inverse side and cannot declare join columns "
            f"or a join table."
        )

    @classmethod
    def many_to_one_cannot_be_inverse(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Many-to-one association '{class_name}#{field_name}' always owns its foreign key "
            f"and cannot use 'mapped_by'."
        )

    @classmethod
    def one_to_many_requires_mapped_by(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(f"One-to-many association '{class_name}#{field_name}' requires the 'mapped_by' attribute.")

    @classmethod
    def duplicate_field_mapping(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(
            f"Field '{field_name}' in '{class_name}' is already mapped as a property or association."
        )

    @classmethod
    def unsupported_optimistic_locking_type(cls, class_name: str, field_name: str, type_name: str) -> "MappingError":
        return cls(
            f"Version field '{class_name}#{field_name}' has type '{type_name}'; "
            f"only integer and datetime types are supported."
        )

    @classmethod
    def unknown_association(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(f"No mapping found for field '{field_name}' on class '{class_name}'.")

    @classmethod
    def no_identifier(cls, class_name: str) -> "MappingError":
        return cls(f"No identifier/primary key specified for entity '{class_name}'.")

    @classmethod
    def composite_identifier(cls, class_name: str) -> "MappingError":
        return cls(f"Entity '{class_name}' has a composite identifier.")

    @classmethod
    def builder_already_built(cls, class_name: str, field_name: str) -> "MappingError":
        return cls(f"Mapping for '{class_name}#{field_name}' was already built by this builder.")

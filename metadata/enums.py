from enum import Enum


class InheritanceType(str, Enum):
    """How an entity hierarchy is laid out in tables."""

    NONE = "NONE"
    SINGLE_TABLE = "SINGLE_TABLE"
    JOINED = "JOINED"


class ChangeTrackingPolicy(str, Enum):
    """How the unit of work detects changes on managed entities."""

    DEFERRED_IMPLICIT = "DEFERRED_IMPLICIT"
    DEFERRED_EXPLICIT = "DEFERRED_EXPLICIT"
    NOTIFY = "NOTIFY"


class FetchMode(str, Enum):
    LAZY = "LAZY"
    EAGER = "EAGER"
    EXTRA_LAZY = "EXTRA_LAZY"


class AssociationType(int, Enum):
    """
    Association kind.

    The integer values are stable discriminants only; compare members, never
    combine them arithmetically.
    """

    ONE_TO_ONE = 1
    MANY_TO_ONE = 2
    ONE_TO_MANY = 4
    MANY_TO_MANY = 8

    @property
    def is_to_one(self) -> bool:
        return self in (AssociationType.ONE_TO_ONE, AssociationType.MANY_TO_ONE)

    @property
    def is_to_many(self) -> bool:
        return not self.is_to_one


class CascadeType(str, Enum):
    REMOVE = "remove"
    PERSIST = "persist"
    REFRESH = "refresh"
    MERGE = "merge"
    DETACH = "detach"


# Order used by cascade_all()
ALL_CASCADES: tuple[str, ...] = tuple(c.value for c in CascadeType)


class GeneratorType(str, Enum):
    """Identifier value generation strategy."""

    AUTO = "AUTO"
    SEQUENCE = "SEQUENCE"
    IDENTITY = "IDENTITY"
    UUID = "UUID"
    CUSTOM = "CUSTOM"
    NONE = "NONE"


class LifecycleEvent(str, Enum):
    """Well-known lifecycle event names. Callbacks may use other names too."""

    PRE_PERSIST = "prePersist"
    POST_PERSIST = "postPersist"
    PRE_UPDATE = "preUpdate"
    POST_UPDATE = "postUpdate"
    PRE_REMOVE = "preRemove"
    POST_REMOVE = "postRemove"
    POST_LOAD = "postLoad"
    PRE_FLUSH = "preFlush"

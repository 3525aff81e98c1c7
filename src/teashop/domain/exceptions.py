"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the menu layer can catch them uniformly and show a message screen.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """Reading from or writing to local storage failed."""


class GameAborted(DomainException):
    """The player typed the exit command in the middle of a run."""

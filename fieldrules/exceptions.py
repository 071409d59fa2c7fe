"""Programmer-error exceptions.

A target that fails its rules is not an error: the validator returns False.
These exceptions signal misuse of the API.
"""


class FieldRulesError(Exception):
    """Base class for all fieldrules errors."""


class InvalidTargetError(FieldRulesError, TypeError):
    """The validation target cannot be introspected for field values."""


class RegistryFrozenError(FieldRulesError, RuntimeError):
    """A rule was attached after the registry left its registration phase."""

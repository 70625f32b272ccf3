"""Exception types raised by the generator."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for generator errors."""


class InvalidOptionError(GeneratorError):
    """Raised when a user-supplied option value is not recognised.

    Args:
        option: The command-line option that carried the value.
        value: The rejected value.
        choices: Accepted values for the option.
    """

    def __init__(self, option: str, value: str, choices: list[str]) -> None:
        self.option = option
        self.value = value
        self.choices = choices
        super().__init__(
            f"invalid value '{value}' for {option} "
            f"(choose from {', '.join(choices)})"
        )


class ContractViolationError(GeneratorError):
    """Raised when an internal component receives a value it cannot handle.

    Signals a defect in the caller, not a user error; it is never caught.
    """

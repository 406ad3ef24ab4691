# gadgetbox/core/errors.py
"""Exception hierarchy shared by the analysis, template and gadget modules."""


class GadgetBoxError(Exception):
    """Base class for all errors raised by gadgetbox."""


class InvalidNameError(GadgetBoxError):
    """Raised when a gadget or variable name fails validation."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class DuplicateNameError(InvalidNameError):
    """Raised when renaming a gadget onto a name another gadget already uses."""


class EmptyCommandError(GadgetBoxError):
    """Raised when a gadget command is blank."""


class NotFoundError(GadgetBoxError):
    """Raised when an operation references a gadget that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Gadget '{name}' not found.")
        self.name = name


class StorageError(GadgetBoxError):
    """Raised when the gadget file cannot be read, parsed or written."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class TokenizeError(GadgetBoxError):
    """Raised when the tokenizer cannot split a command into tokens."""

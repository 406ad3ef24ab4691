# gadgetbox/core/gadgets/operations.py
"""Create, edit and delete gadgets with validation.

Every successful mutation rewrites the whole gadget file. A failed
operation raises before anything is written and leaves the in-memory
collection as it was.
"""

import logging
import re
from collections.abc import Mapping

from gadgetbox.core.errors import (
    DuplicateNameError,
    EmptyCommandError,
    InvalidNameError,
    NotFoundError,
    StorageError,
)
from gadgetbox.core.gadgets.models import Gadget, GadgetUpdate
from gadgetbox.core.gadgets.repository import GadgetStore
from gadgetbox.core.templates import (
    extract_placeholders,
    is_valid_variable_name,
    rename_placeholder,
)

logger = logging.getLogger(__name__)

_GADGET_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

INVALID_NAME_MESSAGE = (
    "Gadget names cannot contain spaces or punctuation. "
    "Use only letters, numbers, dashes, or underscores."
)


def is_valid_gadget_name(name: str) -> bool:
    """Check a gadget name against ``[A-Za-z0-9_-]+``.

    Examples:
        >>> is_valid_gadget_name("tail-log_2")
        True

        >>> is_valid_gadget_name("tail log")
        False
    """
    return _GADGET_NAME_RE.fullmatch(name) is not None


def validate_gadget_name(name: str) -> None:
    """Raise InvalidNameError unless ``name`` is a valid gadget name."""
    if not is_valid_gadget_name(name):
        raise InvalidNameError(INVALID_NAME_MESSAGE, name)


def validate_command(command: str) -> None:
    """Raise EmptyCommandError if ``command`` is blank."""
    if not command.strip():
        raise EmptyCommandError("Command cannot be empty.")


def reconcile_variables(
    command: str, variables: Mapping[str, str], prune: bool = True
) -> dict[str, str]:
    """Align a variables mapping with the placeholders of a command.

    Existing descriptions are kept, placeholders without an entry get an
    empty description, and entries for names no longer in the command are
    dropped unless ``prune`` is False.

    Args:
        command: Command template.
        variables: Current placeholder descriptions.
        prune: Drop entries whose placeholder is gone.

    Returns:
        A new mapping ordered like the command's placeholders, followed by
        any stale entries that were kept.

    Example:
        >>> reconcile_variables("echo {{b}} {{c}}", {"a": "old", "b": "kept"})
        {'b': 'kept', 'c': ''}
    """
    names = extract_placeholders(command)
    result = {name: variables.get(name, "") for name in names}
    if not prune:
        for name, description in variables.items():
            result.setdefault(name, description)
    return result


def create_gadget(
    store: GadgetStore,
    name: str,
    command: str,
    description: str = "",
    variables: Mapping[str, str] | None = None,
) -> Gadget:
    """Create or overwrite a gadget and persist the collection.

    Placeholders in ``command`` without an entry in ``variables`` get an
    empty description.

    Args:
        store: Gadget store to write to.
        name: Gadget name.
        command: Command template.
        description: Gadget description.
        variables: Placeholder name to description.

    Returns:
        The stored Gadget.

    Raises:
        InvalidNameError: If the name has characters outside [A-Za-z0-9_-].
        EmptyCommandError: If the command is blank.
        StorageError: If saving fails.
    """
    validate_gadget_name(name)
    validate_command(command)

    gadget = Gadget(
        name=name,
        description=description,
        command=command,
        variables=reconcile_variables(command, variables or {}, prune=False),
    )

    snapshot = store.snapshot()
    store.put(gadget)
    try:
        store.save()
    except StorageError:
        store.restore(snapshot)
        raise

    logger.info("Saved gadget %s", name, extra={"gadget": name, "operation": "create"})
    return gadget


def _rename_variable(gadget: Gadget, old_name: str, new_name: str) -> None:
    """Rename a placeholder in the command and move its description."""
    if old_name == new_name:
        return
    if not is_valid_variable_name(new_name):
        raise InvalidNameError(
            "Variable names must start with a letter or underscore and contain "
            "only letters, numbers, or underscores.",
            new_name,
        )
    if new_name in gadget.placeholders:
        raise InvalidNameError(
            f"Variable '{new_name}' is already used in this command.", new_name
        )

    gadget.command = rename_placeholder(gadget.command, old_name, new_name)
    if old_name in gadget.variables:
        gadget.variables = {
            (new_name if key == old_name else key): value
            for key, value in gadget.variables.items()
            if key != new_name
        }


def edit_gadget(store: GadgetStore, name: str, updates: GadgetUpdate) -> Gadget:
    """Apply updates to an existing gadget and persist the collection.

    Updates are applied to a copy in this order: gadget name, description,
    command, variables mapping, variable renames, variable descriptions.
    The stored gadget changes only if every step succeeds. An empty update
    writes nothing.

    A new command is not reconciled against ``variables``: descriptions for
    placeholders that were removed stay in place. Use reconcile_variables
    to clean them up.

    Args:
        store: Gadget store holding the gadget.
        name: Current gadget name.
        updates: Changes to apply.

    Returns:
        The updated Gadget.

    Raises:
        NotFoundError: If the gadget does not exist.
        InvalidNameError: If a new gadget or variable name is invalid.
        DuplicateNameError: If the new gadget name is taken.
        EmptyCommandError: If the new command is blank.
        StorageError: If saving fails.
    """
    current = store.get(name)
    if current is None:
        raise NotFoundError(name)

    if updates.is_empty:
        logger.debug("No changes for gadget %s", name, extra={"gadget": name, "operation": "edit"})
        return current

    gadget = current.copy()

    if updates.name is not None and updates.name != name:
        validate_gadget_name(updates.name)
        if updates.name in store:
            raise DuplicateNameError(
                f"A gadget named '{updates.name}' already exists.", updates.name
            )
        gadget.name = updates.name

    if updates.description is not None:
        gadget.description = updates.description

    if updates.command is not None:
        validate_command(updates.command)
        gadget.command = updates.command

    if updates.variables is not None:
        gadget.variables = dict(updates.variables)

    for old_name, new_name in (updates.renamed_variables or {}).items():
        _rename_variable(gadget, old_name, new_name)

    for variable, description in (updates.variable_descriptions or {}).items():
        gadget.variables[variable] = description

    snapshot = store.snapshot()
    if gadget.name != name:
        store.remove(name)
    store.put(gadget)
    try:
        store.save()
    except StorageError:
        store.restore(snapshot)
        raise

    logger.info(
        "Updated gadget %s", gadget.name, extra={"gadget": gadget.name, "operation": "edit"}
    )
    return gadget


def delete_gadget(store: GadgetStore, name: str) -> None:
    """Delete a gadget.

    Raises:
        NotFoundError: If the gadget does not exist.
        StorageError: If saving fails.
    """
    store.delete(name)

# gadgetbox/core/gadgets/executor.py
"""Gadget executor for turning a stored gadget into a runnable command.

This module binds user-supplied values to a gadget's placeholders and
renders the final command text. Running the command in a shell is left to
the caller.
"""

import logging
from collections.abc import Callable, Mapping, Sequence

from gadgetbox.core.errors import NotFoundError
from gadgetbox.core.gadgets.models import Gadget
from gadgetbox.core.gadgets.repository import GadgetStore
from gadgetbox.core.templates import extract_placeholders, substitute

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_DESCRIPTION = "Value for {name}"

# Called as prompt(variable_name, description) for each unbound placeholder.
PromptCallback = Callable[[str, str], str]


def describe_variable(gadget: Gadget, name: str) -> str:
    """Return the description of a placeholder, or a generic default.

    Example:
        >>> gadget = Gadget(name="g", description="", command="echo {{who}}")
        >>> describe_variable(gadget, "who")
        'Value for who'
    """
    return gadget.variables.get(name) or DEFAULT_VARIABLE_DESCRIPTION.format(name=name)


def bind_arguments(
    command: str,
    args: Sequence[str] = (),
    named: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Bind positional and named values to a command's placeholders.

    For each placeholder in order of appearance, a non-empty named value
    wins, otherwise the non-empty positional argument at the same index is
    used. Placeholders left unbound are not in the result.

    Args:
        command: Command template.
        args: Positional values in placeholder order.
        named: Values keyed by placeholder name.

    Returns:
        Placeholder name to value for every bound placeholder.

    Example:
        >>> bind_arguments("copy {{src}} {{dst}}", ["a.txt", "b.txt"], {"dst": "c.txt"})
        {'src': 'a.txt', 'dst': 'c.txt'}
    """
    named = named or {}
    values: dict[str, str] = {}
    for index, name in enumerate(extract_placeholders(command)):
        value = named.get(name, "")
        if not value and index < len(args) and args[index]:
            value = args[index]
        if value:
            values[name] = value
    return values


class GadgetExecutor:
    """Executor for preparing gadgets to run.

    The GadgetExecutor looks up gadgets in the store, fills their
    placeholders and returns the final command text. It never starts a
    process.

    Attributes:
        store: GadgetStore for gadget lookup.
        prompt: Optional callback asked for each placeholder that has no
            value.

    Example:
        >>> store = GadgetStore("gadgets.json")
        >>> executor = GadgetExecutor(store=store)
        >>> command = executor.prepare("ping-host", ["example.com"])
    """

    def __init__(self, store: GadgetStore, prompt: PromptCallback | None = None) -> None:
        """Initialize the GadgetExecutor.

        Args:
            store: GadgetStore for gadget lookup.
            prompt: Callback returning a value for an unbound placeholder.
        """
        self.store = store
        self.prompt = prompt

    def _require(self, name: str) -> Gadget:
        gadget = self.store.get(name)
        if gadget is None:
            raise NotFoundError(name)
        return gadget

    def missing_variables(self, name: str, values: Mapping[str, str]) -> list[str]:
        """List placeholders of a gadget that have no value yet.

        Raises:
            NotFoundError: If the gadget does not exist.
        """
        gadget = self._require(name)
        return [v for v in gadget.placeholders if not values.get(v)]

    def resolve_values(
        self,
        name: str,
        args: Sequence[str] = (),
        named: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Bind values and ask the prompt callback for the rest.

        Raises:
            NotFoundError: If the gadget does not exist.
        """
        gadget = self._require(name)
        values = bind_arguments(gadget.command, args, named)
        if self.prompt is not None:
            for variable in gadget.placeholders:
                if variable not in values:
                    values[variable] = self.prompt(variable, describe_variable(gadget, variable))
        return values

    def prepare(
        self,
        name: str,
        args: Sequence[str] = (),
        named: Mapping[str, str] | None = None,
    ) -> str:
        """Build the final command for a gadget.

        Placeholders that end up without a value stay in the output as
        ``{{name}}``. Escaped braces are decoded to a literal ``{{``.

        Args:
            name: Gadget name.
            args: Positional values in placeholder order.
            named: Values keyed by placeholder name.

        Returns:
            Command text ready to hand to a shell.

        Raises:
            NotFoundError: If the gadget does not exist.
        """
        gadget = self._require(name)
        values = self.resolve_values(name, args, named)
        unfilled = [v for v in gadget.placeholders if v not in values]
        if unfilled:
            logger.warning(
                "Gadget %s has unfilled placeholders: %s",
                name,
                ", ".join(unfilled),
                extra={"gadget": name, "operation": "prepare"},
            )
        return substitute(gadget.command, values, unescape=True)

    def render_script(
        self,
        name: str,
        args: Sequence[str] = (),
        named: Mapping[str, str] | None = None,
    ) -> str:
        """Build a script body: a comment with the description, then the command.

        Raises:
            NotFoundError: If the gadget does not exist.
        """
        gadget = self._require(name)
        command = self.prepare(name, args, named)
        return f"# {gadget.description}\n{command}\n"

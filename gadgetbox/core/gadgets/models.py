# gadgetbox/core/gadgets/models.py
"""Gadget data models.

This module defines the Gadget dataclass, a named command template with
descriptions for its placeholder variables, and GadgetUpdate, the set of
changes accepted by edit_gadget.
"""

from dataclasses import dataclass, field

from gadgetbox.core.templates import extract_placeholders


@dataclass
class Gadget:
    """Represents a saved command template.

    The name is the key of the persisted collection and is not repeated
    inside the stored record.

    Attributes:
        name: Unique gadget name (letters, digits, dashes, underscores).
        description: Free-form description shown to the user.
        command: Command template with {{placeholder}} slots.
        variables: Placeholder name to description. May hold stale names
            that no longer appear in ``command``.

    Example:
        >>> gadget = Gadget(
        ...     name="tail-log",
        ...     description="Show the end of a log file",
        ...     command="Get-Content {{path}} -Tail {{lines}}",
        ...     variables={"path": "Log file", "lines": "Line count"},
        ... )
        >>> gadget.placeholders
        ['path', 'lines']
    """

    name: str
    description: str
    command: str
    variables: dict[str, str] = field(default_factory=dict)

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in the command, in order of first appearance."""
        return extract_placeholders(self.command)

    @property
    def stale_variables(self) -> list[str]:
        """Variable entries whose placeholder is no longer in the command."""
        present = set(self.placeholders)
        return [name for name in self.variables if name not in present]

    def copy(self) -> "Gadget":
        return Gadget(
            name=self.name,
            description=self.description,
            command=self.command,
            variables=dict(self.variables),
        )

    def to_dict(self) -> dict:
        """Convert to the persisted record (without the name).

        Returns:
            Dictionary with description, command and variables.
        """
        return {
            "description": self.description,
            "command": self.command,
            "variables": dict(self.variables),
        }

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "Gadget":
        """Create from a persisted record.

        Args:
            name: Gadget name (the record's key).
            data: Dictionary with gadget data.

        Returns:
            Gadget instance.
        """
        return cls(
            name=name,
            description=data.get("description") or "",
            command=data.get("command") or "",
            variables=dict(data.get("variables") or {}),
        )


@dataclass
class GadgetUpdate:
    """Changes to apply to an existing gadget.

    Fields left as None are not touched. Changes are applied in field order.

    Attributes:
        name: New gadget name.
        description: New description.
        command: New command template. Variables are not reconciled.
        variables: Replacement for the whole variables mapping.
        renamed_variables: Old placeholder name to new placeholder name.
        variable_descriptions: Placeholder name to new description.
    """

    name: str | None = None
    description: str | None = None
    command: str | None = None
    variables: dict[str, str] | None = None
    renamed_variables: dict[str, str] | None = None
    variable_descriptions: dict[str, str] | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.name,
                self.description,
                self.command,
                self.variables,
                self.renamed_variables,
                self.variable_descriptions,
            )
        )

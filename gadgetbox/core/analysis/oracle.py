# gadgetbox/core/analysis/oracle.py
"""Known-identifier oracles.

An oracle answers whether a bare word is a command or keyword the target
shell already knows, so the classifier does not offer it as user data.
Oracles are plain instances passed to the classifier; each owns its cache.
"""

import logging
import subprocess
from collections.abc import Callable, Iterable
from typing import Protocol

logger = logging.getLogger(__name__)

KNOWN_COMMANDS_SCRIPT = "Get-Command | Select-Object -ExpandProperty Name"


class IdentifierOracle(Protocol):
    """Protocol for known-identifier lookups."""

    def is_known(self, text: str) -> bool:
        """Return True if ``text`` is a recognized command or keyword."""
        ...


class StaticIdentifierOracle:
    """Oracle over a fixed set of names (case-insensitive).

    Example:
        >>> oracle = StaticIdentifierOracle(["Get-Content"])
        >>> oracle.is_known("get-content")
        True
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(name.strip().lower() for name in names if name.strip())

    def is_known(self, text: str) -> bool:
        return text.lower() in self._names

    def __len__(self) -> int:
        return len(self._names)


def _list_powershell_commands(shell: str, timeout: float) -> list[str]:
    """Ask PowerShell for every command name it can resolve.

    Args:
        shell: PowerShell executable (e.g. "pwsh").
        timeout: Seconds to wait for the listing.

    Returns:
        Command names, one per output line.

    Raises:
        OSError: If the executable cannot be started.
        subprocess.SubprocessError: If the call fails or times out.
    """
    completed = subprocess.run(
        [shell, "-NoProfile", "-Command", KNOWN_COMMANDS_SCRIPT],
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True,
    )
    return completed.stdout.splitlines()


class PowerShellCommandOracle:
    """Oracle backed by the local PowerShell command table.

    The command list is loaded on the first lookup and reused afterwards.
    When PowerShell is unavailable the oracle knows no names, which only
    makes the classifier more eager to suggest variables.

    Attributes:
        shell: PowerShell executable used for the listing.
        timeout: Seconds to wait for the listing.
    """

    def __init__(
        self,
        shell: str = "pwsh",
        timeout: float = 30.0,
        loader: Callable[[str, float], Iterable[str]] | None = None,
    ) -> None:
        """Initialize the oracle without loading anything.

        Args:
            shell: PowerShell executable used for the listing.
            timeout: Seconds to wait for the listing.
            loader: Optional replacement for the PowerShell call.
        """
        self.shell = shell
        self.timeout = timeout
        self._loader = loader or _list_powershell_commands
        self._known: StaticIdentifierOracle | None = None

    @property
    def loaded(self) -> bool:
        """Whether the command list has been fetched."""
        return self._known is not None

    def _load(self) -> StaticIdentifierOracle:
        try:
            names = list(self._loader(self.shell, self.timeout))
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Could not list PowerShell commands via %s: %s", self.shell, e)
            names = []
        known = StaticIdentifierOracle(names)
        logger.info("Loaded %d known commands from %s", len(known), self.shell)
        return known

    def is_known(self, text: str) -> bool:
        if self._known is None:
            self._known = self._load()
        return self._known.is_known(text)

    def refresh(self) -> None:
        """Drop the cached command list; the next lookup reloads it."""
        self._known = None

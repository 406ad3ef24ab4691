# gadgetbox/core/gadgets/repository.py
"""JSON file repository for Gadget persistence.

The whole collection is loaded into memory when the store is created and
rewritten in full on every save. Saves go through a temporary file in the
same directory followed by an atomic replace, so a failed save leaves the
previous file intact.

There is no locking: when two processes load, modify and save the same
file, the last save wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from gadgetbox.config import settings
from gadgetbox.core.errors import NotFoundError, StorageError
from gadgetbox.core.gadgets.models import Gadget
from gadgetbox.core.gadgets.schemas import GadgetFile

logger = logging.getLogger(__name__)


class GadgetStore:
    """Repository for storing and retrieving gadgets from a JSON file.

    Attributes:
        path: Path to the JSON file.

    Example:
        >>> store = GadgetStore("gadgets.json")
        >>> store.put(Gadget(name="hi", description="", command="echo hi"))
        >>> store.save()
        >>> [g.name for g in store.list_all()]
        ['hi']
    """

    def __init__(
        self, path: str | os.PathLike[str] | None = None, autoload: bool = True
    ) -> None:
        """Initialize the GadgetStore.

        Args:
            path: Path to the JSON file. It does not need to exist yet.
                Defaults to settings.gadgets_file.
            autoload: Load the file immediately.

        Raises:
            StorageError: If ``autoload`` is set and the file is unreadable
                or corrupt.
        """
        self.path = Path(path) if path is not None else settings.gadgets_file
        self._gadgets: dict[str, Gadget] = {}
        if autoload:
            self.load()

    def load(self) -> dict[str, Gadget]:
        """Load the collection from disk, replacing what is in memory.

        A missing file is an empty collection. Corrupt content is never
        silently discarded.

        Returns:
            The loaded gadgets keyed by name.

        Raises:
            StorageError: If the file cannot be read or does not hold a
                valid gadget collection.
        """
        if not self.path.exists():
            logger.debug("Gadget file %s does not exist yet", self.path)
            self._gadgets = {}
            return dict(self._gadgets)

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read gadget file: {e}", str(self.path)) from e

        if not raw.strip():
            self._gadgets = {}
            return dict(self._gadgets)

        try:
            parsed = GadgetFile.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Gadget file %s is corrupt", self.path, extra={"path": self.path})
            raise StorageError(f"Gadget file is corrupt: {e}", str(self.path)) from e

        self._gadgets = {
            name: Gadget.from_dict(name, record.model_dump())
            for name, record in parsed.root.items()
        }
        logger.debug("Loaded %d gadgets from %s", len(self._gadgets), self.path)
        return dict(self._gadgets)

    def save(self) -> None:
        """Write the whole collection to disk atomically.

        Raises:
            StorageError: If the file cannot be written. The previous file
                content is left in place.
        """
        data = {name: gadget.to_dict() for name, gadget in self._gadgets.items()}
        try:
            payload = json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning("Gadgets for %s hold text that is not valid UTF-8: %s", self.path, e)
            raise StorageError(f"Cannot encode gadget file: {e}", str(self.path)) from e

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.warning("Failed to save gadgets to %s: %s", self.path, e)
            raise StorageError(f"Cannot write gadget file: {e}", str(self.path)) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved %d gadgets to %s", len(self._gadgets), self.path)

    def get(self, name: str) -> Gadget | None:
        """Retrieve a gadget by its name.

        Args:
            name: Gadget name (case-sensitive).

        Returns:
            Gadget if found, None otherwise.
        """
        return self._gadgets.get(name)

    def list_all(self) -> list[Gadget]:
        """List all gadgets sorted by name.

        Returns:
            List of Gadget objects, empty list if none exist.
        """
        return [self._gadgets[name] for name in sorted(self._gadgets)]

    def names(self) -> list[str]:
        return sorted(self._gadgets)

    def put(self, gadget: Gadget) -> None:
        """Insert or overwrite a gadget in memory without saving."""
        self._gadgets[gadget.name] = gadget

    def remove(self, name: str) -> Gadget:
        """Remove a gadget from memory without saving.

        Raises:
            NotFoundError: If no gadget has this name.
        """
        if name not in self._gadgets:
            raise NotFoundError(name)
        return self._gadgets.pop(name)

    def delete(self, name: str) -> None:
        """Delete a gadget and persist the collection.

        Args:
            name: Name of the gadget to delete.

        Raises:
            NotFoundError: If no gadget has this name. Nothing is written.
            StorageError: If saving fails. The gadget is restored in memory.
        """
        previous = dict(self._gadgets)
        self.remove(name)
        try:
            self.save()
        except StorageError:
            self._gadgets = previous
            raise
        logger.info("Deleted gadget %s", name, extra={"gadget": name, "operation": "delete"})

    def snapshot(self) -> dict[str, Gadget]:
        """Copy of the in-memory collection, used to roll back failed edits."""
        return {name: gadget.copy() for name, gadget in self._gadgets.items()}

    def restore(self, snapshot: dict[str, Gadget]) -> None:
        self._gadgets = snapshot

    def __contains__(self, name: object) -> bool:
        return name in self._gadgets

    def __len__(self) -> int:
        return len(self._gadgets)

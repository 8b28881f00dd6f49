"""Single-file JSON document holding every table."""

from __future__ import annotations

import asyncio
import contextlib
import os
import threading
from pathlib import Path
from typing import IO

from loguru import logger

from ..core.cancellation import raise_if_cancelled
from ..core.exceptions import StoreUnavailableError, TableConfigurationError
from .locking import lock_exclusive, unlock
from .serialization import decode_document, encode_document

# Serializes exclusive-open attempts across every store in the process
_open_lock = threading.Lock()


class DocumentStore:
    """Owner of the on-disk document and its parsed table mapping.

    The document is a JSON object mapping table names to arrays of records.
    In memory each table is kept as its raw JSON text. The backing file is
    opened once, exclusively, on first load and the same handle serves every
    later read and commit until :meth:`close`.

    Repositories share one store. Sequences that read a table and then commit
    it must run inside :meth:`exclusive`, since every commit rewrites the
    whole document.

    Usage:

        async with DocumentStore(Path("db.json")) as store:
            tables = await store.load()
            ok = await store.commit("customers", "[]")
    """

    def __init__(self, path: Path, create_if_missing: bool = False):
        """Initialize store with the document path.

        Args:
            path: Path to the JSON document.
            create_if_missing: Create the document as ``{}`` if it does not exist.
        """
        self.path = Path(path)
        self.create_if_missing = create_if_missing
        self._file: IO[str] | None = None
        self._tables: dict[str, str] | None = None
        self._closed = False
        # Guards the file handle and the mapping; held by worker threads
        self._io_lock = threading.Lock()
        self._exclusive = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        """Whether the document has been read into memory."""
        return self._tables is not None

    @property
    def closed(self) -> bool:
        """Whether the store has released its file handle for good."""
        return self._closed

    def exclusive(self) -> asyncio.Lock:
        """Store-wide exclusion scope for load and read-modify-write sequences.

        Usage:

            async with store.exclusive():
                ...
        """
        return self._exclusive

    async def load(self, cancel: asyncio.Event | None = None) -> dict[str, str]:
        """Load the document, reading the file only on the first call.

        Args:
            cancel: Optional cancellation event checked before any I/O.

        Returns:
            Copy of the table-name to raw-table-text mapping.

        Raises:
            StoreUnavailableError: If the file cannot be opened exclusively
                or does not hold a JSON object.
            OperationCancelledError: If ``cancel`` is set before loading.
        """
        if self._tables is None:
            raise_if_cancelled(cancel, "Document load")
            await asyncio.to_thread(self._load_sync)
        return self.snapshot()

    def snapshot(self) -> dict[str, str]:
        """Return a point-in-time copy of the loaded table mapping.

        Raises:
            StoreUnavailableError: If the document has not been loaded.
        """
        with self._io_lock:
            if self._tables is None:
                raise StoreUnavailableError(f"Document {self.path} is not loaded")
            return dict(self._tables)

    def tables(self) -> list[str]:
        """Names of the tables in the loaded document, sorted."""
        return sorted(self.snapshot())

    def add_table(self, name: str, raw: str = "[]") -> None:
        """Register a new table in the in-memory mapping.

        The entry is written to disk with the next commit of any table.

        Args:
            name: Table name.
            raw: Raw JSON text of the table, an empty array by default.

        Raises:
            StoreUnavailableError: If the document has not been loaded.
            TableConfigurationError: If a table with this name already exists.
        """
        with self._io_lock:
            if self._tables is None:
                raise StoreUnavailableError(f"Document {self.path} is not loaded")
            if name in self._tables:
                raise TableConfigurationError(f"Table '{name}' already exists in {self.path}")
            self._tables[name] = raw

        logger.debug(f"Table added to document: table={name!r}")

    async def commit(
        self, table: str, raw: str, cancel: asyncio.Event | None = None
    ) -> bool:
        """Replace one table and rewrite the whole document.

        Failures are logged and reported as ``False``; the in-memory mapping
        only changes when the write succeeds. Once the write has started it
        runs to completion even if the awaiting task is cancelled.

        Args:
            table: Name of the table to replace.
            raw: Raw JSON text of the new table contents.
            cancel: Optional cancellation event checked before writing.

        Returns:
            True if the document was rewritten, False otherwise.

        Raises:
            OperationCancelledError: If ``cancel`` is set before writing.
        """
        raise_if_cancelled(cancel, f"Commit of table '{table}'")

        if self._tables is None:
            try:
                await self.load()
            except StoreUnavailableError as e:
                logger.warning(f"Commit of table {table!r} failed: {e}")
                return False

        return await asyncio.to_thread(self._commit_sync, table, raw)

    def close(self) -> None:
        """Release the file handle and its lock. Safe to call repeatedly."""
        with self._io_lock:
            self._closed = True
            self._release()

    def __enter__(self) -> "DocumentStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "DocumentStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _load_sync(self) -> None:
        with self._io_lock:
            if self._tables is not None:
                return
            if self._closed:
                raise StoreUnavailableError(f"Document store for {self.path} is closed")

            if self._file is None:
                self._file = self._open_exclusive()

            try:
                self._file.seek(0)
                tables = decode_document(self._file.read())
            except (OSError, ValueError, RecursionError) as e:
                self._release()
                raise StoreUnavailableError(f"Failed to read document {self.path}: {e}") from e

            self._tables = tables

        logger.debug(f"Document loaded: path={str(self.path)!r}, tables={sorted(tables)!r}")

    def _open_exclusive(self) -> IO[str]:
        with _open_lock:
            try:
                if self.create_if_missing and not self.path.exists():
                    self.path.parent.mkdir(parents=True, exist_ok=True)
                    with contextlib.suppress(FileExistsError):
                        with open(self.path, "x", encoding="utf-8") as f:
                            f.write("{}")
                        logger.info(f"Created empty document: {self.path}")
                handle = open(self.path, "r+", encoding="utf-8", newline="")
            except OSError as e:
                raise StoreUnavailableError(f"Cannot open document {self.path}: {e}") from e

            try:
                lock_exclusive(handle)
            except OSError as e:
                handle.close()
                raise StoreUnavailableError(
                    f"Document {self.path} is locked by another holder"
                ) from e

        return handle

    def _commit_sync(self, table: str, raw: str) -> bool:
        with self._io_lock:
            if self._file is None or self._tables is None:
                logger.warning(f"Commit of table {table!r} failed: document {self.path} is closed")
                return False

            tables = dict(self._tables)
            tables[table] = raw

            try:
                text = encode_document(tables)
                self._file.seek(0)
                self._file.truncate()
                self._file.write(text)
                self._file.flush()
                os.fsync(self._file.fileno())
            except Exception as e:
                logger.warning(f"Commit of table {table!r} failed: {e}")
                return False

            self._tables = tables

        logger.debug(f"Table committed: table={table!r}, size={len(text)}")
        return True

    def _release(self) -> None:
        if self._file is None:
            return
        try:
            unlock(self._file)
        except OSError as e:
            logger.warning(f"Failed to unlock document {self.path}: {e}")
        finally:
            self._file.close()
            self._file = None
            self._tables = None

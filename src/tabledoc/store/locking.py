"""Exclusive advisory locks on open files."""

import sys
from typing import IO

if sys.platform == "win32":
    import msvcrt

    def lock_exclusive(f: IO) -> None:
        """Take a non-blocking exclusive lock on ``f``.

        Raises:
            OSError: If another holder already owns the lock.
        """
        f.seek(0)
        msvcrt.locking(f.fileno(), msvcrt.LK_NBLCK, 1)

    def unlock(f: IO) -> None:
        """Release a lock taken with :func:`lock_exclusive`."""
        f.seek(0)
        msvcrt.locking(f.fileno(), msvcrt.LK_UNLCK, 1)

else:
    import fcntl

    def lock_exclusive(f: IO) -> None:
        """Take a non-blocking exclusive lock on ``f``.

        Raises:
            OSError: If another holder already owns the lock.
        """
        fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)

    def unlock(f: IO) -> None:
        """Release a lock taken with :func:`lock_exclusive`."""
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)

"""Helpers shared by the flat-file repositories.

Files are opened per operation and closed before the call returns. Nothing here
guards against two processes using the same file at once; that is unsupported.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def open_file(path: Path, mode: str, *, encoding: str | None = None) -> Iterator:
    """Open ``path`` and translate OS failures into StorageError.

    Parent directories are created for write/append modes.
    """
    try:
        if any(flag in mode for flag in ("w", "a", "x", "+")):
            path.parent.mkdir(parents=True, exist_ok=True)
        fh = open(path, mode, encoding=encoding)
    except OSError as e:
        raise StorageError(f"Cannot open {path}: {e.strerror or e}") from e

    try:
        yield fh
    except OSError as e:
        raise StorageError(f"I/O error on {path}: {e.strerror or e}") from e
    finally:
        fh.close()


@contextmanager
def atomic_writer(path: Path) -> Iterator[BinaryIO]:
    """Write a replacement for ``path`` and swap it in only on success.

    The temp file lives in the same directory so ``os.replace`` stays a rename.
    On any error the temp file is removed and the original is left as it was.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise StorageError(f"Cannot create temp file next to {path}: {e.strerror or e}") from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as tmp:
            yield tmp
            tmp.flush()
            os.fsync(tmp.fileno())
        if path.exists():
            # mkstemp creates 0600; keep the permissions the file already had.
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_path, path)
    except OSError as e:
        _discard(tmp_path)
        raise StorageError(f"Cannot rewrite {path}: {e.strerror or e}") from e
    except BaseException:
        _discard(tmp_path)
        raise


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink()
    except FileNotFoundError:
        pass
    except OSError:
        logger.warning("Could not remove temp file %s", tmp_path)


def iter_fixed_chunks(fh: BinaryIO, size: int, *, source: Path | str = "?") -> Iterator[bytes]:
    """Yield consecutive ``size``-byte chunks.

    A trailing fragment shorter than ``size`` is end of stream, not an error.
    """
    while True:
        chunk = fh.read(size)
        if not chunk:
            return
        if len(chunk) < size:
            logger.warning("Ignoring %d trailing bytes in %s (partial record)", len(chunk), source)
            return
        yield chunk

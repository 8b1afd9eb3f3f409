from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Sequence

from ..core.exceptions import CorruptRecordError
from ..storage.flatfile import atomic_writer, iter_fixed_chunks, open_file
from .codec import EmployeeCodec, RecordCodec
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class FileEmployeeRepository(EmployeeRepository):
    """Employee records stored back to back in one flat binary file.

    No header, no record count and no tombstones: deleting rewrites the file.
    """

    def __init__(self, path: Path, *, codec: Optional[RecordCodec] = None):
        self._path = Path(path)
        self._codec = codec or EmployeeCodec()

    @property
    def path(self) -> Path:
        return self._path

    def add(self, record: EmployeeRecord) -> None:
        data = self._codec.pack(record)
        size = self._codec.record_size()
        with open_file(self._path, "ab") as f:
            end = f.seek(0, os.SEEK_END)
            fragment = end % size
            if fragment:
                # Appending after a partial record would misalign every later record.
                logger.warning(
                    "Discarding %d trailing bytes (partial record) from %s before append", fragment, self._path
                )
                f.truncate(end - fragment)
            f.write(data)
        logger.info("Added employee %s to %s", record.employee_code, self._path)

    def find_by_code(self, code: int) -> Optional[EmployeeRecord]:
        for _, record in self._scan():
            if record is not None and record.employee_code == code:
                return record
        return None

    def delete_by_code(self, code: int) -> int:
        if not self._path.exists():
            return 0

        # First pass only decides whether a rewrite is needed at all.
        if not any(record is not None and record.employee_code == code for _, record in self._scan()):
            return 0

        fragment = self._path.stat().st_size % self._codec.record_size()
        if fragment:
            logger.warning("Discarding %d trailing bytes (partial record) from %s on rewrite", fragment, self._path)

        removed = 0
        with atomic_writer(self._path) as out:
            for raw, record in self._scan():
                if record is not None and record.employee_code == code:
                    removed += 1
                    continue
                out.write(raw)

        logger.info("Deleted %d record(s) with code %s from %s", removed, code, self._path)
        return 1 if removed else 0

    def list_sorted_by_grade_desc(self) -> Sequence[EmployeeRecord]:
        records = [record for _, record in self._scan() if record is not None]
        # list.sort is stable, so equal grades keep file order.
        records.sort(key=lambda r: r.grade, reverse=True)
        return records

    def _scan(self) -> Iterator[tuple[bytes, Optional[EmployeeRecord]]]:
        """Yield (raw bytes, record) pairs in file order.

        Undecodable records come through with ``record=None`` so callers can skip
        them or copy them unchanged.
        """
        if not self._path.exists():
            return

        size = self._codec.record_size()
        with open_file(self._path, "rb") as f:
            for index, raw in enumerate(iter_fixed_chunks(f, size, source=self._path)):
                try:
                    record = self._codec.unpack(raw)
                except CorruptRecordError as e:
                    logger.warning("Skipping corrupt record #%d in %s: %s", index, self._path, e)
                    record = None
                yield raw, record

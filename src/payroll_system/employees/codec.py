from __future__ import annotations

import struct
from typing import Protocol

from ..core.constants import ADDRESS_MAX_LEN, DESIGNATION_MAX_LEN, NAME_MAX_LEN, PHONE_MAX_LEN
from ..core.exceptions import CorruptRecordError, ValidationError
from .model import EmployeeRecord, Income, JoinDate

FORMAT_VERSION = 1

# UTF-8 needs at most 4 bytes per character, so a truncated field always fits.
_BYTES_PER_CHAR = 4


class RecordCodec(Protocol):
    """Protocol for (de)serializing fixed-size records to bytes."""

    def record_size(self) -> int: ...
    def pack(self, record: EmployeeRecord) -> bytes: ...
    def unpack(self, b: bytes) -> EmployeeRecord: ...


def _sfix(text: str, n: int) -> bytes:
    b = text.encode("utf-8")
    if len(b) > n:
        raise ValidationError(f"Text does not fit a {n}-byte field")
    return b + b"\x00" * (n - len(b))


def _sunfix(b: bytes) -> str:
    try:
        return b.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as e:
        raise CorruptRecordError(f"Invalid text field: {e}") from e


class EmployeeCodec(RecordCodec):
    """Little-endian layout, 381 bytes per record.

    version B | code i | grade i | day B | month B | year H |
    name 100s | address 120s | phone 40s | designation 60s | income 6d
    """

    _STRUCT = struct.Struct(
        "<BiiBBH"
        f"{NAME_MAX_LEN * _BYTES_PER_CHAR}s"
        f"{ADDRESS_MAX_LEN * _BYTES_PER_CHAR}s"
        f"{PHONE_MAX_LEN * _BYTES_PER_CHAR}s"
        f"{DESIGNATION_MAX_LEN * _BYTES_PER_CHAR}s"
        "6d"
    )

    def record_size(self) -> int:
        return self._STRUCT.size  # 381

    def pack(self, record: EmployeeRecord) -> bytes:
        try:
            return self._STRUCT.pack(
                FORMAT_VERSION,
                record.employee_code,
                record.grade,
                record.join_date.day,
                record.join_date.month,
                record.join_date.year,
                _sfix(record.name, NAME_MAX_LEN * _BYTES_PER_CHAR),
                _sfix(record.address, ADDRESS_MAX_LEN * _BYTES_PER_CHAR),
                _sfix(record.phone, PHONE_MAX_LEN * _BYTES_PER_CHAR),
                _sfix(record.designation, DESIGNATION_MAX_LEN * _BYTES_PER_CHAR),
                *record.income.as_tuple(),
            )
        except (struct.error, UnicodeEncodeError) as e:
            raise ValidationError(f"Record cannot be encoded: {e}") from e

    def unpack(self, b: bytes) -> EmployeeRecord:
        if len(b) != self._STRUCT.size:
            raise CorruptRecordError(f"Expected {self._STRUCT.size} bytes, got {len(b)}")

        (version, code, grade, day, month, year, name, address, phone, designation, *income) = self._STRUCT.unpack(b)
        if version != FORMAT_VERSION:
            raise CorruptRecordError(f"Unknown record format version {version}")

        try:
            return EmployeeRecord(
                employee_code=code,
                grade=grade,
                join_date=JoinDate(day=day, month=month, year=year),
                name=_sunfix(name),
                address=_sunfix(address),
                phone=_sunfix(phone),
                designation=_sunfix(designation),
                income=Income(*income),
            )
        except ValidationError as e:
            raise CorruptRecordError(f"Record {code} holds invalid data: {e}") from e

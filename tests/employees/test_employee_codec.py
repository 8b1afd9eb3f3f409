import struct

import pytest

from payroll_system.core.exceptions import CorruptRecordError
from payroll_system.employees.codec import FORMAT_VERSION, EmployeeCodec


def test_record_size_is_fixed():
    assert EmployeeCodec().record_size() == 381


def test_pack_has_fixed_length_and_version_byte(make_record):
    codec = EmployeeCodec()
    short = codec.pack(make_record(code=1, name="A"))
    long = codec.pack(make_record(code=2, name="B" * 25))
    assert len(short) == len(long) == 381
    assert short[0] == FORMAT_VERSION


def test_layout_is_little_endian(make_record):
    data = EmployeeCodec().pack(make_record(code=258, grade=3))
    assert struct.unpack_from("<ii", data, 1) == (258, 3)


def test_non_ascii_text_survives(make_record):
    codec = EmployeeCodec()
    rec = make_record(name="Zoë Łukasiewicz 名前", address="Straße 7")
    assert codec.unpack(codec.pack(rec)) == rec


def test_unknown_version_is_corrupt(make_record):
    codec = EmployeeCodec()
    data = bytearray(codec.pack(make_record()))
    data[0] = 99
    with pytest.raises(CorruptRecordError):
        codec.unpack(bytes(data))


def test_invalid_field_values_are_corrupt(make_record):
    codec = EmployeeCodec()
    data = bytearray(codec.pack(make_record()))
    struct.pack_into("<i", data, 1, 0)  # employee_code 0
    with pytest.raises(CorruptRecordError):
        codec.unpack(bytes(data))


def test_wrong_length_is_corrupt():
    with pytest.raises(CorruptRecordError):
        EmployeeCodec().unpack(b"\x01" * 10)

# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import io
import tarfile
import zipfile
from collections.abc import Callable

import pytest

# "これはテストです。" in Shift_JIS.
SJIS_SAMPLE = (
    b"\x82\xb1\x82\xea\x82\xcd\x83\x65\x83\x58\x83\x67\x82\xc5\x82\xb7\x81\x42"
)
# "안녕하세요" in CP949.
CP949_SAMPLE = b"\xbe\xc8\xb3\xe7\xc7\xcf\xbc\xbc\xbf\xe4"
UTF8_SAMPLE = "Héllo wörld, これはテストです。".encode()


@pytest.fixture
def sjis_sample() -> bytes:
    return SJIS_SAMPLE


@pytest.fixture
def cp949_sample() -> bytes:
    return CP949_SAMPLE


@pytest.fixture
def utf8_sample() -> bytes:
    return UTF8_SAMPLE


def _build_zip(names: list[bytes]) -> bytes:
    """Build a ZIP whose entry names are stored as the exact *names* bytes.

    zipfile always stores non-ASCII names as flagged UTF-8, so entries are
    written under same-length runs of one capital letter that are patched
    afterwards.  The placeholder appears in both the local header and the
    central directory; neither is covered by the CRC.
    """
    placeholders = []
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for i, name in enumerate(names):
            placeholder = bytes([ord("A") + i]) * len(name)
            placeholders.append(placeholder)
            zf.writestr(placeholder.decode("ascii"), b"payload")
    data = buf.getvalue()
    for placeholder, name in zip(placeholders, names):
        data = data.replace(placeholder, name)
    return data


def _build_tar(names: list[bytes], mode: str = "w") -> bytes:
    buf = io.BytesIO()
    with tarfile.open(
        fileobj=buf,
        mode=mode,
        format=tarfile.GNU_FORMAT,
        encoding="utf-8",
        errors="surrogateescape",
    ) as tf:
        for name in names:
            info = tarfile.TarInfo(name.decode("utf-8", "surrogateescape"))
            payload = b"payload"
            info.size = len(payload)
            tf.addfile(info, io.BytesIO(payload))
    return buf.getvalue()


@pytest.fixture
def make_zip() -> Callable[[list[bytes]], bytes]:
    return _build_zip


@pytest.fixture
def make_tar() -> Callable[..., bytes]:
    return _build_tar

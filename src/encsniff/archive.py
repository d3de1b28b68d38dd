"""Detect the encoding of the file names stored in an archive.

Only the entry names are examined; entry bodies are never decompressed.
Understood containers: ZIP, 7z, RAR and TAR (plain, gzip, bzip2 and xz).
"""

from __future__ import annotations

import io
import logging
import lzma
import tarfile
import zipfile
import zlib
from collections.abc import Iterator

import py7zr
import rarfile
from py7zr.exceptions import ArchiveError, PasswordRequired

from encsniff.detector import StringEncodingDetector
from encsniff.enums import Encoding

logger = logging.getLogger(__name__)

# General purpose bit 11: the name is stored as UTF-8.
_ZIP_FLAG_UTF8 = 0x800
# zipfile decodes unflagged names with CP437, which maps all 256 bytes.
_ZIP_LEGACY_CODEC = "cp437"

_TAR_END_BLOCK = tarfile.NUL * tarfile.BLOCKSIZE

_ARCHIVE_ERRORS = (
    zipfile.BadZipFile,
    tarfile.TarError,
    ArchiveError,
    PasswordRequired,
    rarfile.Error,
    lzma.LZMAError,
    zlib.error,
    # Also raised by zipfile for a UTF-8 flagged name that is not UTF-8.
    ValueError,
    OSError,
    EOFError,
)


class _UnreadableEntryName(Exception):
    """An entry whose name could not be recovered as bytes."""


def _checked(name: bytes, label: str) -> bytes:
    if not name:
        raise _UnreadableEntryName(label)
    return name


def _encode_name(name: str, *args: str) -> bytes:
    try:
        return _checked(name.encode(*args), name)
    except UnicodeEncodeError as e:
        raise _UnreadableEntryName(name) from e


def _iter_zip_names(data: bytes) -> Iterator[bytes]:
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        for info in zf.infolist():
            if info.flag_bits & _ZIP_FLAG_UTF8:
                yield _encode_name(info.filename, "utf-8")
            else:
                yield _encode_name(info.filename, _ZIP_LEGACY_CODEC)


def _iter_7z_names(data: bytes) -> Iterator[bytes]:
    # 7z stores names as UTF-16, so they always come back as text.
    with py7zr.SevenZipFile(io.BytesIO(data), "r") as szf:
        for info in szf.list():
            yield _encode_name(info.filename, "utf-8")


def _iter_rar_names(data: bytes) -> Iterator[bytes]:
    with rarfile.RarFile(io.BytesIO(data)) as rf:
        for info in rf.infolist():
            # RAR3 keeps the name bytes as stored; RAR5 names are UTF-8.
            raw = getattr(info, "orig_filename", None)
            if isinstance(raw, bytes):
                yield _checked(raw, info.filename)
            else:
                yield _encode_name(info.filename, "utf-8")


def _iter_tar_names(data: bytes) -> Iterator[bytes]:
    with tarfile.open(
        fileobj=io.BytesIO(data),
        mode="r:*",
        encoding="utf-8",
        errors="surrogateescape",
    ) as tf:
        # Iterating a TarFile reads headers and seeks past member data.
        for member in tf:
            yield _encode_name(member.name, "utf-8", "surrogateescape")

        # tarfile ends the walk quietly on a short read, so a truncated
        # archive is only caught by checking for the end-of-archive block
        # and reading the (possibly compressed) stream through to its end.
        fileobj = tf.fileobj
        fileobj.seek(tf.offset)
        if fileobj.read(tarfile.BLOCKSIZE) != _TAR_END_BLOCK:
            msg = f"no end-of-archive block at offset {tf.offset}"
            raise tarfile.ReadError(msg)
        while fileobj.read(tarfile.RECORDSIZE):
            pass


def iter_entry_names(archive_bytes: bytes | bytearray | memoryview) -> Iterator[bytes]:
    """Yield the raw name of each entry in an in-memory archive.

    The container format is sniffed from the data: ZIP, then 7z, then RAR,
    and anything else is tried as a TAR.

    :raises zipfile.BadZipFile, tarfile.TarError: If the container cannot
        be parsed.  7z and RAR failures raise the py7zr and rarfile errors.
    """
    data = bytes(archive_bytes)
    if zipfile.is_zipfile(io.BytesIO(data)):
        return _iter_zip_names(data)
    if py7zr.is_7zfile(io.BytesIO(data)):
        return _iter_7z_names(data)
    if rarfile.is_rarfile(io.BytesIO(data)):
        return _iter_rar_names(data)
    return _iter_tar_names(data)


def detect_archive_entry_names(
    archive_bytes: bytes | bytearray | memoryview,
) -> Encoding:
    """Detect the encoding shared by every entry name in an archive.

    All names go through one detection session.  A container that cannot
    be opened or is cut short, an entry whose name cannot be read, or an
    archive with no entries gives :attr:`Encoding.UNKNOWN`.

    :param archive_bytes: The complete archive file contents.
    """
    detector = StringEncodingDetector()
    entries = 0
    try:
        for name in iter_entry_names(archive_bytes):
            detector.feed(name)
            entries += 1
    except _UnreadableEntryName as e:
        logger.debug("Unreadable entry name %r, giving up", e.args[0])
        return Encoding.UNKNOWN
    except _ARCHIVE_ERRORS as e:
        logger.debug("Could not read archive: %s", e)
        return Encoding.UNKNOWN

    if not entries:
        return Encoding.UNKNOWN
    return detector.finalize()

"""Read and write text entries inside a .docx (zip) container."""

import io
import logging
import zipfile

logger = logging.getLogger(__name__)

DOCUMENT_ENTRY = "word/document.xml"


class ContainerReadError(Exception):
    """Exception raised when the container or one of its entries cannot be read."""

    pass


class ContainerWriteError(Exception):
    """Exception raised when the container cannot be rewritten."""

    pass


def read_entry(container: bytes, path: str = DOCUMENT_ENTRY) -> str:
    """
    Read a UTF-8 text entry from a zip container.

    Args:
        container: Raw bytes of the .docx file
        path: Entry name inside the archive

    Returns:
        The decoded entry text

    Raises:
        ContainerReadError: If the archive is invalid, the entry is missing
            or it is not valid UTF-8
    """
    try:
        with zipfile.ZipFile(io.BytesIO(container), "r") as archive:
            data = archive.read(path)
    except zipfile.BadZipFile as e:
        raise ContainerReadError(f"Not a valid document archive: {e}") from e
    except KeyError as e:
        raise ContainerReadError(f"Entry '{path}' not found in document archive") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ContainerReadError(f"Entry '{path}' is not valid UTF-8: {e}") from e


def write_entry(container: bytes, path: str, text: str) -> bytes:
    """
    Return a copy of the container with one entry replaced.

    Every other entry is copied byte-for-byte with its original metadata.
    The rewritten entry is stored with DEFLATE compression.

    Args:
        container: Raw bytes of the source .docx file
        path: Entry name to replace
        text: New entry contents

    Returns:
        Bytes of the rewritten container

    Raises:
        ContainerWriteError: If the source archive cannot be read or the entry
            does not exist
    """
    output = io.BytesIO()
    try:
        with zipfile.ZipFile(io.BytesIO(container), "r") as source, zipfile.ZipFile(
            output, "w", zipfile.ZIP_DEFLATED
        ) as target:
            if path not in source.namelist():
                raise ContainerWriteError(f"Entry '{path}' not found in document archive")
            for info in source.infolist():
                if info.filename == path:
                    info.compress_type = zipfile.ZIP_DEFLATED
                    target.writestr(info, text.encode("utf-8"))
                else:
                    target.writestr(info, source.read(info.filename))
    except zipfile.BadZipFile as e:
        raise ContainerWriteError(f"Not a valid document archive: {e}") from e

    logger.debug(f"Rewrote entry '{path}' ({len(text)} chars)")
    return output.getvalue()

"""Word document container access."""

from .container import (
    DOCUMENT_ENTRY,
    ContainerReadError,
    ContainerWriteError,
    read_entry,
    write_entry,
)

__all__ = [
    "DOCUMENT_ENTRY",
    "ContainerReadError",
    "ContainerWriteError",
    "read_entry",
    "write_entry",
]

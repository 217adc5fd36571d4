"""File path helpers and file type detection from extensions."""

from __future__ import annotations

import enum


class FileType(enum.Enum):
    """Kinds of file recognised by their extension."""

    OBJ = "obj"
    STL = "stl"
    GEOM = "geom"
    GLTF = "gltf"
    PNG = "png"
    JPG = "jpg"
    HDR = "hdr"
    UNKNOWN = "unknown"


_EXTENSIONS = {
    "obj": FileType.OBJ,
    "stl": FileType.STL,
    "geom": FileType.GEOM,
    "gltf": FileType.GLTF,
    "png": FileType.PNG,
    "jpg": FileType.JPG,
    "jpeg": FileType.JPG,
    "hdr": FileType.HDR,
}


def get_file_extension(file_path: str) -> str:
    """Return the text after the last '.', or '' when there is none."""
    _, dot, extension = file_path.rpartition(".")
    return extension if dot else ""


def get_file_type(file_path: str) -> FileType:
    """Classify a path by its (case-sensitive) extension."""
    return _EXTENSIONS.get(get_file_extension(file_path), FileType.UNKNOWN)


def _last_separator(file_path: str) -> int:
    return max(file_path.rfind("/"), file_path.rfind("\\"))


def get_file_name(file_path: str) -> str:
    """Return the part after the last '/' or '\\', or the whole path."""
    pos = _last_separator(file_path)
    return file_path if pos < 0 else file_path[pos + 1:]


def get_file_folder(file_path: str) -> str:
    """Return the path up to and including the last separator, or the whole path."""
    pos = _last_separator(file_path)
    return file_path if pos < 0 else file_path[: pos + 1]
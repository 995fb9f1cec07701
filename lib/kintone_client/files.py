from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import ConfigurationError

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadFile:
    name: str
    mime_type: str
    content: bytes


class FileSource(Protocol):
    def get(self, file_id: str) -> UploadFile:
        ...


class LocalFileSource:
    """Resolves file ids as filesystem paths."""

    def get(self, file_id: str) -> UploadFile:
        path = Path(file_id).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"File not found: {file_id}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return UploadFile(
            name=path.name,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            content=path.read_bytes(),
        )

# chatificial/utils/file_types.py

import os

import chardet

from chatificial.config import BINARY_FILE_EXTENSIONS, BINARY_SNIFF_BYTES
from chatificial.utils.logger import logger


class FileTypeClassifier:
    """Extension and content heuristics deciding whether a file is binary."""

    def __init__(self, binary_extensions=None, sniff_bytes: int = BINARY_SNIFF_BYTES):
        self.binary_extensions = {e.lower() for e in (binary_extensions or BINARY_FILE_EXTENSIONS)}
        self.sniff_bytes = sniff_bytes

    def is_binary(self, file_path: str | os.PathLike) -> bool:
        _, ext = os.path.splitext(os.fspath(file_path))
        if ext.lower() in self.binary_extensions:
            return True

        try:
            with open(file_path, "rb") as f:
                raw = f.read(self.sniff_bytes)
        except OSError as e:
            # Let the reader report it; an unreadable file is not known to be binary
            logger.debug(f"Could not sniff {file_path}: {e}")
            return False

        if not raw:
            return False
        if b"\0" in raw:
            return True

        # Fast path: UTF-8 is common; if it decodes, it is text
        try:
            raw.decode("utf-8")
            return False
        except UnicodeDecodeError as e:
            # a multi-byte sequence cut at the sniff boundary is still UTF-8
            if e.start >= len(raw) - 3 and e.reason == "unexpected end of data":
                return False

        result = chardet.detect(raw)
        return not result.get("encoding")

# chatificial/core/scratch_store.py
from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from chatificial.config import APP_NAME, APP_AUTHOR, MSG_FAILED_TO_CREATE_SCRATCH, SCRATCH_DIR_NAME
from chatificial.core.errors import ScratchBufferError
from chatificial.utils.logger import logger


def default_scratch_dir() -> Path:
    return Path(user_data_dir(appname=APP_NAME, appauthor=APP_AUTHOR)) / SCRATCH_DIR_NAME


def open_with_default_app(path: str) -> None:
    if sys.platform.startswith("win"):
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.run(["open", path], check=False)
    else:
        subprocess.run(["xdg-open", path], check=False)


class ScratchStore:
    """Named, overwritable text files kept in the user data directory."""

    def __init__(self, directory: str | os.PathLike | None = None, *, open_in_viewer: bool = True):
        self.directory = Path(directory) if directory else default_scratch_dir()
        self.open_in_viewer = open_in_viewer

    def path_for(self, name: str) -> Path:
        return self.directory / name

    def write(self, name: str, text: str) -> Path:
        target = self.path_for(name)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", delete=False, dir=self.directory,
                                             newline="") as tmp:
                tmp.write(text)
                tmp_path = tmp.name
            os.replace(tmp_path, target)
        except OSError as e:
            logger.error(f"Failed to write scratch file {target}: {e}")
            raise ScratchBufferError(MSG_FAILED_TO_CREATE_SCRATCH.format(name), name) from e
        logger.info(f"Scratch file written: {target}")
        return target

    def open(self, handle: Path) -> None:
        if not self.open_in_viewer:
            return
        try:
            open_with_default_app(str(handle))
        except OSError as e:
            # content is already saved; a missing viewer is not fatal
            logger.warning(f"Could not open {handle}: {e}")

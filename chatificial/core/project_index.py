# chatificial/core/project_index.py

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from pathspec import GitIgnoreSpec

from chatificial.config import EXCLUDED_FOLDER_NAMES_DEFAULT
from chatificial.utils.logger import logger


class ProjectIndex:
    """
    Answers project-level questions about paths:
      - is_excluded: default junk folder names, .gitignore, user patterns
      - relative_path: POSIX path relative to the project root, if under it
      - walk: top-down directory enumeration with in-place pruning
    """

    def __init__(
        self,
        base_folder: str | os.PathLike,
        *,
        apply_gitignore: bool = True,
        excluded_folder_names: Iterable[str] = EXCLUDED_FOLDER_NAMES_DEFAULT,
        excluded_patterns: Iterable[str] = (),
    ):
        self.base_folder = os.path.abspath(base_folder)
        self.excluded_folder_names = set(excluded_folder_names)
        self._user_spec = GitIgnoreSpec.from_lines(list(excluded_patterns))

        self._gitignore_spec = None
        gi = os.path.join(self.base_folder, ".gitignore")
        if apply_gitignore and os.path.exists(gi):
            try:
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    self._gitignore_spec = GitIgnoreSpec.from_lines(f)
            except Exception as e:
                logger.warning(f"Failed to parse .gitignore: {e}")

    def relative_path(self, path: str | os.PathLike) -> str | None:
        abs_path = os.path.abspath(path)
        try:
            rel = os.path.relpath(abs_path, self.base_folder)
        except ValueError:
            # different drive on Windows
            return None
        if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return None
        return Path(rel).as_posix()

    def _matches(self, spec: GitIgnoreSpec | None, rel_path: str, is_dir: bool) -> bool:
        if spec is None:
            return False
        try:
            if spec.match_file(rel_path):
                return True
            # "build/" style patterns only match with the trailing slash
            return is_dir and spec.match_file(rel_path + "/")
        except Exception:
            return False

    def is_excluded(self, path: str | os.PathLike) -> bool:
        abs_path = os.path.abspath(path)
        if abs_path == self.base_folder:
            # the project root itself is never excluded, whatever its name
            return False
        is_dir = os.path.isdir(abs_path)
        rel = self.relative_path(abs_path)

        if rel is None:
            # outside the project: only the entry's own name can exclude it
            name = os.path.basename(abs_path)
            if is_dir and name in self.excluded_folder_names:
                logger.debug(f"Excluding folder outside project due to name match: {abs_path}")
                return True
            return self._matches(self._user_spec, name, is_dir)

        parts = rel.split("/")
        dir_parts = parts if is_dir else parts[:-1]
        if self.excluded_folder_names.intersection(dir_parts):
            logger.debug(f"Excluding due to folder name match: {rel}")
            return True

        if self._matches(self._gitignore_spec, rel, is_dir):
            logger.debug(f"Excluding due to .gitignore: {rel}")
            return True

        if self._matches(self._user_spec, rel, is_dir):
            logger.debug(f"Excluding due to user pattern: {rel}")
            return True

        return False

    def walk(self, directory: str | os.PathLike) -> Iterator[Tuple[str, List[str], List[str]]]:
        """
        Top-down walk of ``directory``. Callers may prune the yielded
        subdirectory list in place; unreadable subtrees are skipped.
        """
        def _on_error(err: OSError) -> None:
            logger.warning(f"Skipping unreadable path {err.filename}: {err.strerror}")

        for root_dir, dirs, files in os.walk(directory, topdown=True, onerror=_on_error):
            dirs.sort()
            files.sort()
            yield root_dir, dirs, files

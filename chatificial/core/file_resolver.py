# chatificial/core/file_resolver.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from chatificial.core.project_index import ProjectIndex
from chatificial.utils.file_types import FileTypeClassifier
from chatificial.utils.logger import logger


@dataclass(frozen=True)
class EligibleFile:
    """A selected text file; ``key`` is its absolute POSIX path."""
    path: Path
    key: str

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "EligibleFile":
        abs_path = Path(os.path.abspath(path))
        return cls(path=abs_path, key=abs_path.as_posix())


class FileSelectionResolver:
    def __init__(self, project: ProjectIndex, classifier: FileTypeClassifier | None = None):
        self.project = project
        self.classifier = classifier or FileTypeClassifier()

    def _is_eligible(self, path: str) -> bool:
        if not os.path.exists(path):
            return False
        if os.path.isdir(path):
            return False
        if self.project.is_excluded(path):
            return False
        if self.classifier.is_binary(path):
            logger.debug(f"Skipping binary file: {path}")
            return False
        return True

    def resolve(self, roots: Iterable[str | os.PathLike]) -> List[EligibleFile]:
        """
        Expand the selected files and folders into eligible text files,
        deduplicated by path and sorted by path.
        """
        found: Dict[str, EligibleFile] = {}

        def add_if_ok(path: str) -> None:
            if self._is_eligible(path):
                ef = EligibleFile.from_path(path)
                found.setdefault(ef.key, ef)

        for root in roots:
            root = os.path.abspath(root)
            if not os.path.exists(root):
                logger.debug(f"Skipping missing selection: {root}")
                continue
            if self.project.is_excluded(root):
                logger.debug(f"Skipping excluded selection: {root}")
                continue

            if not os.path.isdir(root):
                add_if_ok(root)
                continue

            for dir_path, dirs, files in self.project.walk(root):
                # prune excluded subtrees before descending into them
                dirs[:] = [d for d in dirs if not self.project.is_excluded(os.path.join(dir_path, d))]
                for name in files:
                    add_if_ok(os.path.join(dir_path, name))

        result = sorted(found.values(), key=lambda f: f.key)
        logger.info(f"Resolved {len(result)} eligible file(s)")
        return result

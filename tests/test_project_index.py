import shutil
import tempfile
import unittest
from pathlib import Path

from chatificial.core.project_index import ProjectIndex


class TestProjectIndex(unittest.TestCase):
    def setUp(self):
        self.base = Path(tempfile.mkdtemp(prefix="chatificial_index_"))
        self.outside = Path(tempfile.mkdtemp(prefix="chatificial_outside_"))
        (self.base / "venv" / "lib").mkdir(parents=True)
        (self.base / "src").mkdir()
        (self.base / "src" / "keep.py").write_text("print('ok')\n", encoding="utf-8")
        (self.base / "src" / "skip.log").write_text("log\n", encoding="utf-8")
        (self.base / "src" / "build").write_text("a file named like a folder\n", encoding="utf-8")
        (self.base / "README.md").write_text("# readme\n", encoding="utf-8")
        (self.base / ".gitignore").write_text("README.md\n", encoding="utf-8")
        (self.outside / "note.txt").write_text("n", encoding="utf-8")

    def tearDown(self):
        shutil.rmtree(self.base, ignore_errors=True)
        shutil.rmtree(self.outside, ignore_errors=True)

    def test_exclusions(self):
        idx = ProjectIndex(self.base, excluded_patterns=["*.log"])
        self.assertTrue(idx.is_excluded(self.base / "venv"))
        self.assertTrue(idx.is_excluded(self.base / "venv" / "lib"))
        self.assertTrue(idx.is_excluded(self.base / "README.md"))
        self.assertTrue(idx.is_excluded(self.base / "src" / "skip.log"))
        self.assertFalse(idx.is_excluded(self.base / "src" / "keep.py"))
        self.assertFalse(idx.is_excluded(self.base / "src" / "build"))
        self.assertFalse(idx.is_excluded(self.base))

    def test_gitignore_and_default_names_can_be_disabled(self):
        idx = ProjectIndex(self.base, apply_gitignore=False, excluded_folder_names=())
        self.assertFalse(idx.is_excluded(self.base / "README.md"))
        self.assertFalse(idx.is_excluded(self.base / "venv"))

    def test_relative_path(self):
        idx = ProjectIndex(self.base)
        self.assertEqual(idx.relative_path(self.base / "src" / "keep.py"), "src/keep.py")
        self.assertIsNone(idx.relative_path(self.outside / "note.txt"))
        self.assertIsNone(idx.relative_path(self.base))

    def test_paths_outside_project_checked_by_name(self):
        idx = ProjectIndex(self.base, excluded_patterns=["*.log"])
        self.assertFalse(idx.is_excluded(self.outside / "note.txt"))
        (self.outside / "node_modules").mkdir()
        self.assertTrue(idx.is_excluded(self.outside / "node_modules"))

    def test_walk_is_sorted(self):
        idx = ProjectIndex(self.base)
        top, dirs, files = next(iter(idx.walk(self.base)))
        self.assertEqual(dirs, sorted(dirs))
        self.assertEqual(files, sorted(files))

    def test_project_root_is_never_excluded(self):
        root = self.outside / "build"
        (root / "dist").mkdir(parents=True)
        (root / "a.txt").write_text("hello", encoding="utf-8")
        idx = ProjectIndex(root)
        self.assertFalse(idx.is_excluded(root))
        self.assertFalse(idx.is_excluded(root / "a.txt"))
        self.assertTrue(idx.is_excluded(root / "dist"))


if __name__ == "__main__":
    unittest.main()

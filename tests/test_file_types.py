import shutil
import tempfile
import unittest
from pathlib import Path

from chatificial.utils.file_types import FileTypeClassifier


class TestFileTypeClassifier(unittest.TestCase):
    def setUp(self):
        self.base = Path(tempfile.mkdtemp(prefix="chatificial_types_"))
        self.clf = FileTypeClassifier()

    def tearDown(self):
        shutil.rmtree(self.base, ignore_errors=True)

    def test_text_files(self):
        p = self.base / "a.py"
        p.write_text("print('héllo')\n", encoding="utf-8")
        self.assertFalse(self.clf.is_binary(p))
        empty = self.base / "empty.txt"
        empty.write_bytes(b"")
        self.assertFalse(self.clf.is_binary(empty))

    def test_binary_by_extension(self):
        p = self.base / "pic.PNG"
        p.write_text("not really an image", encoding="utf-8")
        self.assertTrue(self.clf.is_binary(p))

    def test_binary_by_nul_byte(self):
        p = self.base / "data.raw"
        p.write_bytes(b"abc\x00\x01\x02")
        self.assertTrue(self.clf.is_binary(p))

    def test_legacy_encoding_is_text(self):
        p = self.base / "latin.txt"
        p.write_bytes("café crème brûlée, déjà vu\n".encode("latin-1") * 20)
        self.assertFalse(self.clf.is_binary(p))

    def test_unreadable_is_not_binary(self):
        self.assertFalse(self.clf.is_binary(self.base / "missing.txt"))


if __name__ == "__main__":
    unittest.main()

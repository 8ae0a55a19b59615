import os
import shutil
import tempfile
import threading
import unittest
from pathlib import Path

from chatificial.config import MSG_COULD_NOT_READ_FILE_CONTENT
from chatificial.core.aggregator import Aggregator, read_file_as_utf8
from chatificial.core.errors import OperationCancelled
from chatificial.core.file_resolver import EligibleFile
from chatificial.core.project_index import ProjectIndex
from chatificial.core.template_engine import DEFAULT_TEMPLATE


class TestAggregator(unittest.TestCase):
    def setUp(self):
        self.base = Path(tempfile.mkdtemp(prefix="chatificial_agg_"))
        self.outside = Path(tempfile.mkdtemp(prefix="chatificial_agg_out_"))
        (self.base / "a.txt").write_text("hello", encoding="utf-8")
        (self.base / "b.txt").write_text("x\n", encoding="utf-8")
        (self.base / "latin.txt").write_bytes("caf\xe9".encode("latin-1"))
        (self.outside / "far.txt").write_text("far", encoding="utf-8")
        self.agg = Aggregator(ProjectIndex(self.base), max_workers=4)

    def tearDown(self):
        shutil.rmtree(self.base, ignore_errors=True)
        shutil.rmtree(self.outside, ignore_errors=True)

    def _files(self, *paths):
        return [EligibleFile.from_path(p) for p in paths]

    def test_single_file_default_template(self):
        out = self.agg.aggregate(self._files(self.base / "a.txt"), DEFAULT_TEMPLATE)
        self.assertEqual(out, "`a.txt`\n```\nhello\n```")

    def test_blocks_joined_by_blank_line_in_list_order(self):
        out = self.agg.aggregate(self._files(self.base / "a.txt", self.base / "b.txt"), "{path}:{content}")
        self.assertEqual(out, "a.txt:hello\n\nb.txt:x")

    def test_empty_list_returns_none(self):
        self.assertIsNone(self.agg.aggregate([], DEFAULT_TEMPLATE))

    def test_undecodable_and_missing_files_get_placeholder(self):
        files = self._files(self.base / "latin.txt", self.base / "vanished.txt", self.base / "a.txt")
        out = self.agg.aggregate(files, "{path}|{content}")
        self.assertEqual(
            out,
            f"latin.txt|{MSG_COULD_NOT_READ_FILE_CONTENT}\n\n"
            f"vanished.txt|{MSG_COULD_NOT_READ_FILE_CONTENT}\n\n"
            "a.txt|hello",
        )

    def test_file_outside_project_uses_absolute_path(self):
        far = self.outside / "far.txt"
        out = self.agg.aggregate(self._files(far), "{path}")
        self.assertEqual(out, Path(os.path.abspath(far)).as_posix())

    def test_cancelled_event_raises(self):
        ev = threading.Event()
        ev.set()
        with self.assertRaises(OperationCancelled):
            self.agg.aggregate(self._files(self.base / "a.txt"), DEFAULT_TEMPLATE, ev)

    def test_read_file_as_utf8(self):
        self.assertEqual(read_file_as_utf8(self.base / "a.txt"), "hello")
        self.assertIsNone(read_file_as_utf8(self.base / "latin.txt"))
        self.assertIsNone(read_file_as_utf8(self.base / "nope.txt"))


if __name__ == "__main__":
    unittest.main()

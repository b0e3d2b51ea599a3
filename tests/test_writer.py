"""Tests for rendering results and writing them to both sinks."""

import io
import shutil
import tempfile
import unittest
from pathlib import Path

import loader
import writer
from errors import FlushError, OutputCreationError, WriteError
from loader import Result


class _BrokenConsole(io.StringIO):
    def write(self, s):
        raise OSError("console gone")


class _FailingClose(io.StringIO):
    def close(self):
        super().close()
        raise OSError("disk full")


class TestRender(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(writer.render(Result(10, (2, 3, 4, 6, 8, 9, 10))), "10:2 3 4 6 8 9 10")

    def test_empty(self):
        self.assertEqual(writer.render(Result(0, ())), "0:")

    def test_reads_back(self):
        for result in (Result(20, (5, 7, 10, 14, 15, 20)), Result(3, ()), Result(1, (1,))):
            with self.subTest(result=result):
                self.assertEqual(loader.parse_result(writer.render(result)), result)


class TestWriteResults(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="divisible-writer-"))
        self.output = self.test_dir / "output.txt"

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_file_and_console_get_same_lines(self):
        console = io.StringIO()
        results = [Result(10, (2, 3, 4, 6, 8, 9, 10)), Result(0, ())]
        writer.write_results(str(self.output), results, console)
        expected = "10:2 3 4 6 8 9 10\n0:\n"
        self.assertEqual(self.output.read_text(), expected)
        self.assertEqual(console.getvalue(), expected)

    def test_truncates_existing_output(self):
        self.output.write_text("stale\nstale\nstale\n")
        writer.write_results(str(self.output), [Result(2, (2,))], io.StringIO())
        self.assertEqual(self.output.read_text(), "2:2\n")

    def test_no_results_creates_empty_file(self):
        console = io.StringIO()
        writer.write_results(str(self.output), [], console)
        self.assertTrue(self.output.exists())
        self.assertEqual(self.output.read_text(), "")
        self.assertEqual(console.getvalue(), "")

    def test_output_in_missing_directory(self):
        target = self.test_dir / "nope" / "output.txt"
        with self.assertRaises(OutputCreationError) as ctx:
            writer.write_results(str(target), [Result(2, (2,))], io.StringIO())
        self.assertEqual(ctx.exception.path, str(target))

    def test_write_error_names_position(self):
        with writer.Writer(str(self.output), io.StringIO()) as w:
            w.write(Result(1, (1,)))
            w.console = _BrokenConsole()
            with self.assertRaises(WriteError) as ctx:
                w.write(Result(2, (1, 2)))
        self.assertEqual(ctx.exception.position, 2)

    def test_flush_failure_is_typed(self):
        w = writer.Writer(str(self.output), io.StringIO())
        w.file.close()
        w.file = _FailingClose()
        w.write(Result(2, (2,)))
        with self.assertRaises(FlushError) as ctx:
            w.close()
        self.assertEqual(ctx.exception.path, str(self.output))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_flush_failure_through_context_manager(self):
        with self.assertRaises(FlushError):
            with writer.Writer(str(self.output), io.StringIO()) as w:
                w.file.close()
                w.file = _FailingClose()
                w.write(Result(2, (2,)))

    def test_close_failure_does_not_hide_write_error(self):
        with self.assertRaises(WriteError) as ctx:
            with writer.Writer(str(self.output), io.StringIO()) as w:
                w.file.close()
                w.file = _FailingClose()
                w.console = _BrokenConsole()
                w.write(Result(2, (2,)))
        self.assertEqual(ctx.exception.position, 1)
        self.assertTrue(w.file.closed)


if __name__ == "__main__":
    unittest.main()

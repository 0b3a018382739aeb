import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from parallel_merge.__main__ import main


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(argv)
        return code, buf.getvalue()

    def test_reference_array(self):
        code, out = self.run_main([])
        self.assertEqual(code, 0)
        self.assertEqual(out, "-5 2 3 4 6 7 8 12 15 18 19\n")

    def test_values_from_arguments(self):
        code, out = self.run_main(["3", "-1", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "-1 2 3\n")

    def test_bench_flag_runs_benchmark(self):
        with mock.patch("parallel_merge.bench.main") as bench_main:
            code, out = self.run_main(["--bench"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        bench_main.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()

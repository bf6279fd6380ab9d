import io
import json
import unittest
from contextlib import redirect_stderr

from optionpy import ConsoleLogger, trace, some, none, NONE


class Loud:
    def __init__(self):
        self.reprs = 0

    def __repr__(self):
        self.reprs += 1
        return "Loud()"


class TestTrace(unittest.TestCase):
    def test_trace_returns_input_and_logs_variant(self):
        logger = ConsoleLogger(json_output=True)
        s = some(7)
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertIs(trace(s, logger, "lookup"), s)
            self.assertIs(trace(none(), logger, "lookup"), NONE)
        recs = [json.loads(l) for l in buf.getvalue().strip().splitlines()]
        self.assertEqual(recs[0]["label"], "lookup")
        self.assertEqual(recs[0]["kind"], "some")
        self.assertEqual(recs[0]["value"], "7")
        self.assertEqual(recs[0]["level"], "DEBUG")
        self.assertEqual(recs[1]["kind"], "none")
        self.assertNotIn("value", recs[1])

    def test_text_output(self):
        logger = ConsoleLogger(name="opt")
        buf = io.StringIO()
        with redirect_stderr(buf):
            trace(some("a"), logger, "step", level="info")
            trace(none(), logger, "step")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith("opt INFO: step kind=some value='a'"))
        self.assertTrue(lines[1].endswith("opt DEBUG: step kind=none"))

    def test_below_threshold_is_silent_and_skips_repr(self):
        logger = ConsoleLogger(level="INFO")
        payload = Loud()
        buf = io.StringIO()
        with redirect_stderr(buf):
            out = trace(some(payload), logger, "x")
        self.assertEqual(out, some(payload))
        self.assertEqual(buf.getvalue(), "")
        self.assertEqual(payload.reprs, 0)

    def test_set_level(self):
        logger = ConsoleLogger(level="ERROR")
        self.assertFalse(logger.enabled("WARN"))
        logger.set_level("debug")
        self.assertTrue(logger.enabled("DEBUG"))
        logger.set_level("nonsense")
        self.assertTrue(logger.enabled("DEBUG"))

    def test_trace_rejects_non_option(self):
        with self.assertRaises(TypeError):
            trace(7, ConsoleLogger(), "x")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()

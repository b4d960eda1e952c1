import unittest

from dls_lab.core.metrics import MeasuredRun, Metrics


class TestMetrics(unittest.TestCase):

    def test_increment_starts_from_zero(self):
        m = Metrics()
        self.assertEqual(m.get_int("nodesExpanded"), 0)
        self.assertEqual(m.increment_int("nodesExpanded"), 1)
        self.assertEqual(m.increment_int("nodesExpanded"), 2)
        self.assertEqual(m["nodesExpanded"], 2)

    def test_set_get_and_views(self):
        m = Metrics()
        m.set("pathCost", 4.5)
        m.set("nodesExpanded", 3)
        self.assertIn("pathCost", m)
        self.assertNotIn("missing", m)
        self.assertIsNone(m.get("missing"))
        self.assertEqual(m.get("missing", 7), 7)
        self.assertEqual(m.get_float("pathCost"), 4.5)
        self.assertEqual(m.keys(), ["nodesExpanded", "pathCost"])
        self.assertEqual(m.as_dict(), {"pathCost": 4.5, "nodesExpanded": 3})
        self.assertEqual(str(m), "{nodesExpanded=3, pathCost=4.5}")
        self.assertEqual(len(m), 2)

    def test_clear(self):
        m = Metrics()
        m.set("x", 1)
        m.clear()
        self.assertEqual(len(m), 0)


class TestMeasuredRun(unittest.TestCase):

    def test_elapsed_is_available_inside_and_after(self):
        with MeasuredRun() as meter:
            inside = meter.elapsed
            [0] * 10000
        self.assertGreaterEqual(inside, 0.0)
        self.assertGreaterEqual(meter.elapsed, inside)
        self.assertGreaterEqual(meter.peak_kb, 0)

    def test_not_started(self):
        self.assertEqual(MeasuredRun().elapsed, 0.0)


if __name__ == "__main__":
    unittest.main()

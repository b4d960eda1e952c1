import io
import unittest

from dls_lab.algorithms.depth_limited import DepthLimitedSearch
from dls_lab.core.cancel import DEFAULT_TOKEN, CancellationToken, cancel_after
from dls_lab.core.log import configure_logging
from dls_lab.core.node import CUTOFF_NODE
from dls_lab.problems.chain import ChainProblem
from dls_lab.problems.tree import complete_tree


class TestCancellationToken(unittest.TestCase):

    def test_cancel_and_reset(self):
        token = CancellationToken()
        self.assertFalse(token.is_cancelled())
        token.cancel()
        self.assertTrue(token.is_cancelled())
        token.reset()
        self.assertFalse(token.is_cancelled())

    def test_cancel_after_sets_token(self):
        token = CancellationToken()
        timer = cancel_after(token, 0.01)
        timer.join(5)
        self.assertTrue(token.is_cancelled())


class TestCancelledSearch(unittest.TestCase):

    def test_preset_cancel_is_immediate_cutoff(self):
        token = CancellationToken()
        token.cancel()
        dls = DepthLimitedSearch(10, cancel_token=token)
        self.assertIs(dls.find_node(ChainProblem()), CUTOFF_NODE)
        self.assertEqual(dls.get_metrics().get_int("nodesExpanded"), 0)
        self.assertEqual(dls.find_actions(ChainProblem()), [])

    def test_cancel_during_search_unwinds_as_cutoff(self):
        token = CancellationToken()
        dls = DepthLimitedSearch(10, cancel_token=token)
        dls.add_node_listener(lambda node: token.cancel())
        self.assertIs(dls.find_node(complete_tree(3, 6)), CUTOFF_NODE)
        self.assertEqual(dls.get_metrics().get_int("nodesExpanded"), 1)

    def test_per_call_token_overrides_instance_token(self):
        token = CancellationToken()
        token.cancel()
        dls = DepthLimitedSearch(3)
        outcome = dls.search(ChainProblem(), cancel_token=token)
        self.assertTrue(outcome.is_cutoff)
        self.assertTrue(dls.search(ChainProblem()).is_solution)

    def test_default_token_is_shared(self):
        dls = DepthLimitedSearch(3)
        self.assertIs(dls.cancel_token, DEFAULT_TOKEN)
        DEFAULT_TOKEN.cancel()
        try:
            self.assertEqual(dls.find_actions(ChainProblem()), [])
        finally:
            DEFAULT_TOKEN.reset()
        self.assertEqual(len(dls.find_actions(ChainProblem())), 3)

    def test_cancellation_is_logged_once(self):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        try:
            token = CancellationToken()
            dls = DepthLimitedSearch(10, cancel_token=token)
            dls.add_node_listener(lambda node: token.cancel())
            dls.find_node(complete_tree(3, 3))
        finally:
            configure_logging("WARNING")
        self.assertEqual(stream.getvalue().count("cancelled at depth"), 1)


if __name__ == "__main__":
    unittest.main()

"""Tests for railop.operation.frames."""

from railop.operation import ExecutionFrame, FrameStack


class TestFrameStack:
    """Push, pending and done bookkeeping."""

    def test_empty(self):
        stack = FrameStack()
        assert stack.top() is None
        assert stack.pending() is None
        assert stack.mark_done() is None
        assert len(stack) == 0

    def test_push_appends_in_order(self):
        stack = FrameStack()
        stack.push("lookup")
        stack.push("debit", error="DEBIT_DECLINED")
        assert [f.step_name for f in stack] == ["lookup", "debit"]
        assert stack.top() == ExecutionFrame("debit", "DEBIT_DECLINED", False)

    def test_mark_done_only_touches_top(self):
        stack = FrameStack()
        first = stack.push("lookup")
        second = stack.push("debit")
        assert stack.mark_done() is second
        assert second.done is True
        assert first.done is False

    def test_done_top_is_not_pending(self):
        stack = FrameStack()
        stack.push("lookup")
        stack.mark_done()
        assert stack.pending() is None
        assert stack.mark_done() is None

    def test_to_list(self):
        stack = FrameStack()
        stack.push("lookup", error="X")
        assert stack.to_list() == [{"step": "lookup", "error": "X", "done": False}]

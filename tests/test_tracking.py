"""Tests for EvaluationStack."""

import pytest

from stalwart import EvaluationStack


class TestEvaluationStack:
    def test_empty_at_rest(self):
        s = EvaluationStack()
        assert len(s) == 0
        assert s.top is None

    def test_lifo(self):
        s = EvaluationStack()
        s.enter("outer")
        s.enter("inner")
        assert s.top == "inner"
        assert s.exit() == "inner"
        assert s.top == "outer"
        assert s.exit() == "outer"
        assert s.top is None

    def test_contains(self):
        s = EvaluationStack()
        s.enter("a")
        assert "a" in s
        assert "b" not in s

    def test_evaluating_scope(self):
        s = EvaluationStack()
        with s.evaluating("a"):
            assert s.top == "a"
            with s.evaluating("b"):
                assert s.top == "b"
            assert s.top == "a"
        assert len(s) == 0

    def test_evaluating_releases_on_exception(self):
        s = EvaluationStack()
        with pytest.raises(RuntimeError):
            with s.evaluating("a"):
                raise RuntimeError("boom")
        assert len(s) == 0

    def test_exit_when_empty_raises(self):
        with pytest.raises(IndexError):
            EvaluationStack().exit()

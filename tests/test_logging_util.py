import logging

import pytest

from adjgraph import logging_util


def test_nested_phase_ids(caplog):
    with caplog.at_level(logging.INFO):
        with logging_util.phase_info("outer") as outer_id:
            with logging_util.phase_info("inner") as inner_id:
                pass
            with logging_util.phase_info("second") as second_id:
                pass
    assert inner_id == outer_id + ".1"
    assert second_id == outer_id + ".2"
    messages = [r.getMessage() for r in caplog.records]
    assert f"({outer_id}) outer" in messages
    assert f"({outer_id}) outer (DONE 0 sec)" in messages


def test_phase_level_restored_after_error():
    level = logging_util.global_phase_level
    with pytest.raises(ValueError):
        with logging_util.phase_debug("failing"):
            raise ValueError()
    assert logging_util.global_phase_level == level


def test_tqdm_disabled_below_level(caplog):
    with caplog.at_level(logging.WARNING):
        assert logging_util.tqdm_debug([1, 2]).disable
        assert logging_util.tqdm_info([1, 2]).disable
        assert list(logging_util.tqdm_debug([1, 2])) == [1, 2]
    with caplog.at_level(logging.DEBUG):
        assert not logging_util.tqdm_debug([1, 2]).disable

#!/usr/bin/env python3
from __future__ import annotations

import io
import re

import pytest

from termbar import tqdm, tqdm_range, tqdm_sized
from termbar.hook import IteratorPosition, SequencePosition

TIMES_RE = re.compile(r" \[\d+:\d\d:\d\d<\d+:\d\d:\d\d\]")


def _renders(out: io.StringIO) -> list[str]:
    return out.getvalue().split("\r")[1:]


def test_five_elements_render_six_times():
    out = io.StringIO()
    bar = tqdm(["a", "b", "c", "d", "e"], title="five", file=out, mininterval=0)

    assert list(bar) == ["a", "b", "c", "d", "e"]

    lines = _renders(out)
    assert len(lines) == 6
    assert bar.renders == 6
    assert "0/5" in lines[0]
    assert "5/5" in lines[-1] and "100%" in lines[-1]
    assert lines[-1].endswith("\n")
    assert all(not line.endswith("\n") for line in lines[:-1])


def test_values_pass_through_untouched():
    data = [{"k": 1}, None, 3.5]
    got = list(tqdm(data, file=io.StringIO(), mininterval=0))
    assert got == data
    assert got[0] is data[0]


def test_empty_container_renders_once():
    out = io.StringIO()
    assert list(tqdm([], file=out)) == []
    assert out.getvalue() == "\r [=         ] 0% 0/0 [00:00:00<00:00:00]\n"


def test_range_adapter_from_two_positions():
    data = list("abcd")
    out = io.StringIO()
    begin, end = SequencePosition(data, 1), SequencePosition(data, 4)
    assert list(tqdm_range(begin, end, "tail", out, 0)) == ["b", "c", "d"]
    assert "tail [" in out.getvalue()
    assert "3/3" in _renders(out)[-1]


def test_range_adapter_rejects_reversed_range():
    data = [1, 2, 3]
    with pytest.raises(ValueError):
        tqdm_range(SequencePosition(data, 2), SequencePosition(data, 0), file=io.StringIO())


def test_sized_adapter_over_generator_stops_at_size():
    out = io.StringIO()
    begin = IteratorPosition.begin(n * n for n in range(100))
    bar = tqdm_sized(begin, 4, file=out, mininterval=0)
    assert len(bar) == 4
    assert list(bar) == [0, 1, 4, 9]
    assert _renders(out)[-1].startswith(" [==========] 100% 4/4")


def test_container_adapter_accepts_non_sequences():
    out = io.StringIO()
    items = {3, 1, 2}
    bar = tqdm(items, file=out, mininterval=0)
    assert bar.container is items
    assert sorted(bar) == [1, 2, 3]
    assert "3/3" in _renders(out)[-1]


def test_container_adapter_needs_len():
    with pytest.raises(TypeError):
        tqdm(x for x in range(3))


def test_breaking_early_leaves_line_open():
    out = io.StringIO()
    for value in tqdm(list(range(10)), file=out, mininterval=0):
        if value == 2:
            break
    assert not out.getvalue().endswith("\n")
    assert "10/10" not in out.getvalue()


def test_throttled_run_still_prints_first_and_last():
    out = io.StringIO()
    bar = tqdm(list(range(50)), file=out, mininterval=60_000)
    for _ in bar:
        pass
    lines = _renders(out)
    assert len(lines) == 2
    assert "0/50" in lines[0]
    assert "50/50" in lines[1]
    assert bar.state.suppressed == 49


def test_disable_writes_nothing_but_counts_steps():
    out = io.StringIO()
    bar = tqdm([1, 2, 3], file=out, disable=True)
    assert list(bar) == [1, 2, 3]
    assert out.getvalue() == ""
    assert bar.state.is_end()


def test_defaults_write_to_stderr(capsys):
    list(tqdm([1, 2], title="err", mininterval=0))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "err [" in captured.err and "2/2" in captured.err


def test_environment_supplies_defaults(monkeypatch):
    monkeypatch.setenv("TERMBAR_WIDTH", "4")
    monkeypatch.setenv("TERMBAR_MININTERVAL", "0")
    out = io.StringIO()
    bar = tqdm([1, 2, 3], file=out)
    list(bar)
    assert bar.state.width == 4
    assert len(_renders(out)) == 4
    assert "[====] 100% 3/3" in _renders(out)[-1]


def test_environment_can_disable_output(monkeypatch):
    monkeypatch.setenv("TERMBAR_DISABLE", "1")
    out = io.StringIO()
    list(tqdm([1, 2], file=out))
    assert out.getvalue() == ""


def _without_times(lines: list[str]) -> list[str]:
    return [TIMES_RE.sub("", line) for line in lines]


@pytest.mark.parametrize("items", [["a", "b", "c"], {"a", "b", "c"}])
def test_second_pass_repeats_the_first(items):
    out = io.StringIO()
    bar = tqdm(items, title="again", file=out, mininterval=0)

    first_values = list(bar)
    first_lines = _renders(out)
    out.seek(0)
    out.truncate()

    assert list(bar) == first_values
    second_lines = _renders(out)
    assert _without_times(second_lines) == _without_times(first_lines)
    assert "0/3" in second_lines[0] and "3/3" in second_lines[-1]
    assert bar.renders == 4


def test_sized_adapter_rejects_negative_size():
    with pytest.raises(ValueError):
        tqdm_sized(SequencePosition([1, 2, 3], 0), -1, file=io.StringIO())

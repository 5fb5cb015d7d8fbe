import io

import pytest

from scattersim.progress import ProgressBar


def test_set_progress_stores_value():
    bar = ProgressBar()
    bar.set_progress(42.5)
    assert bar.progress == 42.5


@pytest.mark.parametrize("value", [0.0, 12.0, 37.5, 99.9, 100.0])
def test_render_bar_shape(value):
    bar = ProgressBar(progress=value)
    text = bar.render()
    assert text.startswith("[")
    assert text.endswith("%\r")
    inner = text[1:text.index("]")]
    assert inner.count("|") == int(value) + 1
    assert inner.count(" ") == 100 - int(value)
    assert inner == "|" * (int(value) + 1) + " " * (100 - int(value))


def test_render_shows_percentage():
    bar = ProgressBar(progress=37.5)
    assert bar.render().endswith("] 37.5%\r")


def test_update_prints_on_whole_percent():
    stream = io.StringIO()
    bar = ProgressBar(progress=3.0, stream=stream)
    assert bar.update() is True
    assert stream.getvalue() == bar.render()


def test_update_skips_fractional_percent():
    stream = io.StringIO()
    bar = ProgressBar(progress=3.5, stream=stream)
    assert bar.update() is False
    assert stream.getvalue() == ""


def test_update_defaults_to_stdout(capsys):
    bar = ProgressBar()
    assert bar.update() is True
    assert capsys.readouterr().out == bar.render()
import pytest

from browser_skill.core.errors import NoPagesAvailableError, TabIndexOutOfRangeError, TypeMismatchError
from browser_skill.core.tabs import coerce_tab_index, resolve_tab


def test_in_range_no_warning(capsys):
    assert resolve_tab(["A", "B", "C"], 1) == "B"
    assert capsys.readouterr().err == ""


def test_out_of_range_falls_back_to_first(capsys):
    assert resolve_tab(["A", "B", "C"], 5) == "A"
    assert "out of bounds" in capsys.readouterr().err


def test_negative_index_falls_back(capsys):
    assert resolve_tab(["A", "B"], -1) == "A"
    assert "out of bounds" in capsys.readouterr().err


def test_empty_pages():
    with pytest.raises(NoPagesAvailableError):
        resolve_tab([], 0)


def test_strict_mode_raises():
    with pytest.raises(TabIndexOutOfRangeError):
        resolve_tab(["A"], 3, strict=True)


def test_coerce_tab_index():
    assert coerce_tab_index(None) == 0
    assert coerce_tab_index("2") == 2
    assert coerce_tab_index(1) == 1
    with pytest.raises(TypeMismatchError):
        coerce_tab_index("second")

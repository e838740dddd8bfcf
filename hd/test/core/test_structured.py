from __future__ import annotations

from hd.core.structured import as_str_dict, get_str, get_str_list, get_table


def test_as_str_dict_rejects_non_string_keys() -> None:
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict([]) is None
    assert as_str_dict({"a": 1}) == {"a": 1}


def test_get_str_strips_and_rejects_blank() -> None:
    assert get_str({"k": "  v "}, "k") == "v"
    assert get_str({"k": "   "}, "k") is None
    assert get_str({"k": 3}, "k") is None
    assert get_str({}, "k") is None


def test_get_table() -> None:
    assert get_table({"t": {"a": 1}}, "t") == {"a": 1}
    assert get_table({"t": "x"}, "t") is None


def test_get_str_list() -> None:
    assert get_str_list({"l": ["a", "b"]}, "l") == ["a", "b"]
    assert get_str_list({"l": ["a", 1]}, "l") is None
    assert get_str_list({"l": "a"}, "l") is None

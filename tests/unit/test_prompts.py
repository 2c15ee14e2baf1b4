from screenshot_crawler.prompts import choose, choose_device_type, choose_mobile_device  # type: ignore[import]

from tests.helpers.pytest_import import pytest
from tests.helpers.fakes import PIXEL_5


def _answers(*values):
    replies = iter(values)
    return lambda _prompt: next(replies)


def test_choose_accepts_number_or_label():
    assert choose("Pick", ["a", "b"], input_fn=_answers("2"), output=lambda _m: None) == "b"
    assert choose("Pick", ["a", "b"], input_fn=_answers("a"), output=lambda _m: None) == "a"


def test_choose_reprompts_on_invalid_input():
    messages = []

    picked = choose("Pick", ["a", "b"], input_fn=_answers("9", "zzz", "1"), output=messages.append)

    assert picked == "a"
    assert messages.count("[!] Invalid choice, try again.") == 2


def test_choose_requires_choices():
    with pytest.raises(ValueError):
        choose("Pick", [], input_fn=_answers(), output=lambda _m: None)


def test_device_type_prompt_returns_internal_value():
    assert choose_device_type(input_fn=_answers("Mobile"), output=lambda _m: None) == "mobile"
    assert choose_device_type(input_fn=_answers("1"), output=lambda _m: None) == "pc"


def test_mobile_prompt_lists_catalog_in_order():
    catalog = {"Desktop Chrome": {"is_mobile": False}, "iPhone 12": {"is_mobile": True}, "Pixel 5": PIXEL_5}
    messages = []

    picked = choose_mobile_device(catalog, input_fn=_answers("2"), output=messages.append)

    assert picked == "Pixel 5"
    assert messages[1:] == ["  1) iPhone 12", "  2) Pixel 5"]


def test_prompt_reads_from_builtin_input_by_default(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _prompt: "2")

    assert choose_device_type(output=lambda _m: None) == "mobile"

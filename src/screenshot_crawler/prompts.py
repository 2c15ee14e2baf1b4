"""Interactive device selection on the terminal."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from .core.devices import mobile_presets, normalize_device_type

DEVICE_TYPE_CHOICES = ("PC", "Mobile")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], Any]


def choose(
    message: str,
    choices: Sequence[str],
    *,
    input_fn: Optional[InputFn] = None,
    output: Optional[OutputFn] = None,
) -> str:
    """Numbered single-choice menu. Accepts the number or the exact label."""

    if not choices:
        raise ValueError("no choices to pick from")
    input_fn = input_fn or input
    output = output or print

    output(message)
    for index, choice in enumerate(choices, start=1):
        output(f"  {index}) {choice}")

    while True:
        raw = input_fn(f"Choice [1-{len(choices)}]: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1]
        if raw in choices:
            return raw
        output("[!] Invalid choice, try again.")


def choose_device_type(
    *, input_fn: Optional[InputFn] = None, output: Optional[OutputFn] = None
) -> str:
    picked = choose("Choose the device type:", DEVICE_TYPE_CHOICES, input_fn=input_fn, output=output)
    return normalize_device_type(picked)


def choose_mobile_device(
    catalog: Mapping[str, Mapping[str, Any]],
    *,
    input_fn: Optional[InputFn] = None,
    output: Optional[OutputFn] = None,
) -> str:
    return choose("Choose the mobile device:", mobile_presets(catalog), input_fn=input_fn, output=output)

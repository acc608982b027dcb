"""Currency conversion through the exchange-rate backend."""

from __future__ import annotations

import json
import math
import struct
from collections.abc import Sequence
from decimal import Decimal

import requests

CURRENCY_URL = "https://lifestuff.thejcbfamily.workers.dev/currency"
_TIMEOUT = 5


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _positional(text: str) -> str:
    rendered = format(Decimal(text), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def _f64_display(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return _positional(repr(value))


def _f32_display(value: float) -> str:
    value = _f32(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = f"{value:.8e}"
    for precision in range(9):
        candidate = f"{value:.{precision}e}"
        if _f32(float(candidate)) == value:
            text = candidate
            break
    return _positional(text)


def _quoted(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def validate_currencies(source: str, targets: Sequence[str]) -> None:
    """Check that every currency code has exactly three characters."""
    if len(source) != 3:
        raise ValueError(f'Invalid currency "{source}" passed you Jabroni!')
    if not targets:
        raise ValueError("At least one destination currency must be given")
    if not all(len(target) == 3 for target in targets):
        raise ValueError("Invalid destination currency passed.... you Jabroni!!")


def convert_currency(
    source: str,
    amount: float,
    targets: Sequence[str],
    verbose: bool = False,
    session: requests.Session | None = None,
) -> list[str]:
    """Ask the backend for the exchange rate and describe it for each target currency."""
    validate_currencies(source, targets)
    if session is None:
        session = requests.Session()

    if verbose:
        print(f"target url = {CURRENCY_URL}")

    body = {
        "target": targets[0].upper(),
        "source": source.upper(),
        "amount": _f64_display(abs(amount)),
    }
    try:
        response = session.post(CURRENCY_URL, json=body, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise RuntimeError(
            f"Unable to send request to get currency exchange rate: {exc}"
        ) from exc

    if response.status_code != 200:
        raise RuntimeError(
            f"Got a bad response code from currency API: {response.status_code}"
        )

    text = response.text
    if verbose:
        print(f"So the response from the backend was {text}")
    payload = json.loads(text)

    success = payload.get("success") if isinstance(payload, dict) else None
    if not isinstance(success, dict):
        success = {}
    message = success.get("message")
    if not isinstance(message, str):
        raise RuntimeError("Missing 'message' in response")
    rate = success.get("rate")
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise RuntimeError("Missing 'rate' in response")

    rate_text = _f32_display(float(rate))
    return [
        f"{_quoted(message)} at a rate of 1 {source} = {rate_text} {target}"
        for target in targets
    ]
"""DuckDuckGo e-mail protection aliases."""

from __future__ import annotations

import json
import os
import re

import requests
from termcolor import colored

DDG_ADDRESSES_URL = "https://quack.duckduckgo.com/api/email/addresses"
_TIMEOUT = 5
_DEFAULT_SENDER = "[email]"

_EMAIL = re.compile(
    r"^([a-zA-Z0-9_+]([a-zA-Z0-9_+.]*[a-zA-Z0-9_+])?)@"
    r"([a-zA-Z0-9]+([\-.][a-zA-Z0-9]+)*\.[a-zA-Z]{2,6})"
)


def is_valid_email_address(email: str) -> bool:
    """Whether ``email`` starts with something shaped like an e-mail address."""
    return _EMAIL.match(email) is not None


def validate_email(email: str) -> str:
    """Return ``email`` unchanged, or raise ``ValueError`` if it is not valid."""
    if not is_valid_email_address(email):
        raise ValueError(
            f"Invalid email address: {json.dumps(email, ensure_ascii=False)} provided"
        )
    return email


def create_session() -> requests.Session:
    """A session authorised with the bearer value from ``DDG_BEARER``."""
    bearer = os.environ.get("DDG_BEARER")
    if bearer is None:
        raise RuntimeError("Unable to get `DDG_BEARER` environment variable")
    session = requests.Session()
    session.headers["Authorization"] = f"Bearer {bearer}"
    return session


def generate_ddg_address(
    session: requests.Session | None = None,
    url: str = DDG_ADDRESSES_URL,
    verbose: bool = False,
) -> str:
    """Request a new private alias address."""
    if session is None:
        session = create_session()
    try:
        response = session.post(url, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise RuntimeError(f"Unable to send request to get new DDG Address: {exc}") from exc

    if response.status_code != 201:
        raise RuntimeError(
            f"Got a bad response code from DDG Endpoint: {response.status_code}"
        )

    text = response.text
    if verbose:
        print(f"So the response from the backend was {text}")
    payload = json.loads(text)
    address = payload.get("address") if isinstance(payload, dict) else None
    if not isinstance(address, str):
        raise ValueError("Missing 'address' in DDG response")
    return address


def build_alias(recipient: str, sender: str) -> str:
    """The address that sends to ``recipient`` through the alias ``sender``."""
    return f"{recipient.replace('@', '_at_').strip()}_{sender}"


def perform_address_conversion(
    recipient: str,
    sender: str | None = None,
    use_default: bool = False,
    generate: bool = False,
    session: requests.Session | None = None,
    url: str = DDG_ADDRESSES_URL,
    verbose: bool = False,
) -> str:
    """Build and announce the alias address for ``recipient``.

    The sender is, in order of preference, the given ``sender``, the default
    alias, or a freshly generated one.
    """
    recipient = validate_email(recipient)

    if sender is not None:
        sender_address = sender
    elif use_default:
        sender_address = _DEFAULT_SENDER
    elif generate:
        sender_address = generate_ddg_address(session, url, verbose)
    else:
        raise ValueError("At least one sender address option must be specified.")

    alias = build_alias(recipient, sender_address)
    print(
        f"Use {colored(alias, 'green', attrs=['bold'])} "
        f"to send to {colored(recipient, 'light_yellow', attrs=['italic'])} "
        f"from {colored(sender_address, 'light_cyan', attrs=['italic', 'bold'])}"
    )
    return alias
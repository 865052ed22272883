"""
Option list codec

Parses and formats the percent-encoded `name=value` lists embedded in the
user-info (`,` separated) and query (`&` separated) parts of a connection URI.
"""
from typing import List, Optional
from urllib.parse import quote_plus, unquote_plus

from ...core.exceptions import FormatError, ArgumentError
from .models import SshOption


def parse_option(token: str) -> SshOption:
    """
    Parse a single `name=value` token.

    Raises:
        FormatError: If the token does not contain exactly one '=' or the name is empty
    """
    parts = token.split("=")
    if len(parts) != 2 or not parts[0]:
        raise FormatError(f"Invalid SSH option '{token}'.", token=token)

    return SshOption(name=unquote_plus(parts[0]), value=unquote_plus(parts[1]))


def split_option(text: str) -> SshOption:
    """
    Split option text typed by a user, such as `-o SetEnv=A+B`.

    Nothing is percent-decoded and the value may itself contain '='.

    Raises:
        FormatError: If there is no '=' or the name is empty
    """
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise FormatError(f"Invalid SSH option '{text}'.", token=text)

    return SshOption(name=name, value=value)


def parse_options(text: Optional[str], separator: str) -> List[SshOption]:
    """
    Parse a delimited option list.

    Duplicate names are kept; callers decide how to treat them.

    Args:
        text: Raw (still percent-encoded) option list
        separator: Token separator, ',' for user-info or '&' for query

    Returns:
        Options in source order, empty if text is empty
    """
    if not text:
        return []

    return [parse_option(token) for token in text.split(separator)]


def format_option(option: SshOption) -> str:
    """
    Format an option as a percent-encoded `name=value` token.

    Raises:
        ArgumentError: If the option name is empty
    """
    if not option.name:
        raise ArgumentError("Option name must contain non empty string.", name="name")

    name = quote_plus(option.name, safe="")
    value = quote_plus(option.value, safe="") if option.value else ""

    return f"{name}={value}"

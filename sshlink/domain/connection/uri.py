"""
Connection URI codec

Translates between `ssh://` / `mosh://` links and ConnectionInfo:

    ssh://user;IdentityFile=%2Fhome%2Fk,Compression=yes@host:2222
    mosh://user@host?mosh_ports=60000-60010
"""
from typing import List, Optional, Tuple
from urllib.parse import urlsplit, unquote, unquote_plus, quote_plus

from ...core.constants import (
    SSH_URI_SCHEME,
    MOSH_URI_SCHEME,
    DEFAULT_SSH_PORT,
    MAX_PORT,
    IDENTITY_FILE_OPTION_NAME,
    MOSH_PORTS_PARAMETER_NAMES,
    MOSH_PORTS_RANGE_RE,
    USERINFO_SEPARATOR,
    USERINFO_OPTION_SEPARATOR,
    QUERY_OPTION_SEPARATOR,
)
from ...core.exceptions import FormatError, ArgumentError
from ...core.logging import get_logger
from .models import ConnectionInfo, ConnectionKind, MoshKind, SshKind, SshOption, ValidationResult
from .options import parse_options, format_option
from .validation import validate, describe

logger = get_logger(__name__)

_MOSH_PORTS_NAMES = {name.casefold() for name in MOSH_PORTS_PARAMETER_NAMES}


def _scheme_of(uri: str) -> str:
    scheme, sep, _ = uri.partition(":")
    return scheme.lower() if sep else ""


def is_recognized_scheme(uri: Optional[str]) -> bool:
    """Check whether a link uses the ssh or mosh scheme"""
    if not uri:
        return False
    return _scheme_of(uri.strip()) in (SSH_URI_SCHEME, MOSH_URI_SCHEME)


def _split_host_port(hostport: str) -> Tuple[str, Optional[int]]:
    """
    Split `host[:port]`, keeping IPv6 brackets on the host.

    Returns:
        (host, port) where port is None when not given
    """
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise FormatError(f"Invalid host '{hostport}'.", token=hostport)
        host = hostport[:end + 1]
        rest = hostport[end + 1:]
        if rest and not rest.startswith(":"):
            raise FormatError(f"Invalid host '{hostport}'.", token=hostport)
        port_text = rest[1:]
    else:
        host, _, port_text = hostport.partition(":")

    if not port_text:
        return unquote(host), None

    if not (port_text.isascii() and port_text.isdigit()) or int(port_text) > MAX_PORT:
        raise FormatError(f"Invalid port '{port_text}'.", token=port_text)

    return unquote(host), int(port_text)


def _parse_userinfo(userinfo: str) -> Tuple[str, str, List[SshOption]]:
    """
    Parse `username[;name=value,...]`.

    Returns:
        (username, identity_file, options)
    """
    parts = userinfo.split(USERINFO_SEPARATOR)
    if len(parts) > 2:
        raise FormatError(f"UserInfo part contains {len(parts)} elements.", token=userinfo)

    username = unquote_plus(parts[0])
    identity_file = ""
    options: List[SshOption] = []
    seen = set()

    if len(parts) > 1:
        for option in parse_options(parts[1], USERINFO_OPTION_SEPARATOR):
            key = option.name.casefold()
            if key == IDENTITY_FILE_OPTION_NAME.casefold():
                identity_file = option.value
            elif key in seen:
                raise FormatError(
                    f"SSH option '{option.name}' is defined more than once.",
                    token=option.name,
                )
            else:
                seen.add(key)
                options.append(option)

    return username, identity_file, options


def _parse_mosh_query(query: str) -> Optional[MoshKind]:
    """Parse the mosh ports query; the last occurrence wins"""
    kind = None

    for option in parse_options(query, QUERY_OPTION_SEPARATOR):
        if option.name.casefold() not in _MOSH_PORTS_NAMES:
            raise FormatError(f"Unknown query parameter '{option.name}'.", token=option.name)

        match = MOSH_PORTS_RANGE_RE.match(option.value)
        if not match:
            raise FormatError(f"Invalid mosh ports range '{option.value}'.", token=option.value)

        port_from = int(match.group("from"))
        port_to = int(match.group("to"))
        if port_from > MAX_PORT or port_to > MAX_PORT:
            raise FormatError(f"Invalid mosh ports range '{option.value}'.", token=option.value)

        kind = MoshKind(port_from=port_from, port_to=port_to)

    return kind


def decode(uri: str) -> ConnectionInfo:
    """
    Parse an ssh:// or mosh:// link.

    Callers normally check is_recognized_scheme() first.

    Args:
        uri: Connection link

    Returns:
        Decoded ConnectionInfo

    Raises:
        FormatError: If the link is malformed
    """
    logger.debug("Decoding connection link %s", uri)

    try:
        parts = urlsplit(uri.strip())
    except ValueError as e:
        raise FormatError(f"Invalid connection link '{uri}': {e}", token=uri) from e

    scheme = parts.scheme.lower()
    if scheme not in (SSH_URI_SCHEME, MOSH_URI_SCHEME):
        raise FormatError(f"Unsupported scheme '{parts.scheme}'.", token=parts.scheme)
    use_mosh = scheme == MOSH_URI_SCHEME

    userinfo, _, hostport = parts.netloc.rpartition("@")
    host, port = _split_host_port(hostport)
    if not host:
        raise FormatError(f"Connection link '{uri}' has no host.", token=uri)

    username, identity_file, options = "", "", []
    if userinfo:
        username, identity_file, options = _parse_userinfo(userinfo)

    kind: ConnectionKind = MoshKind() if use_mosh else SshKind()

    query = parts.query
    if query.startswith("?"):
        query = query[1:]
    if query:
        if not use_mosh:
            raise FormatError("Query parameters are not supported in SSH links.", token=query)
        kind = _parse_mosh_query(query) or kind

    return ConnectionInfo(
        host=host,
        port=port if port is not None else DEFAULT_SSH_PORT,
        username=username,
        identity_file=identity_file,
        options=tuple(options),
        kind=kind,
    )


def encode(info: ConnectionInfo) -> str:
    """
    Build the canonical link for a connection.

    Args:
        info: Connection to encode

    Returns:
        ssh:// or mosh:// link

    Raises:
        ArgumentError: If info does not pass validation
    """
    result = validate(info, allow_no_user=True)
    if result != ValidationResult.VALID:
        raise ArgumentError(f"Invalid connection info: {describe(result)}", name="info", result=result)

    parts = [MOSH_URI_SCHEME if info.use_mosh else SSH_URI_SCHEME, "://"]
    contains_userinfo = False

    if info.username:
        parts.append(quote_plus(info.username, safe=""))
        contains_userinfo = True

    if info.identity_file or info.options:
        items = []
        if info.identity_file:
            items.append(f"{IDENTITY_FILE_OPTION_NAME}={quote_plus(info.identity_file, safe='')}")
        items.extend(format_option(option) for option in info.options)

        parts.append(USERINFO_SEPARATOR)
        parts.append(USERINFO_OPTION_SEPARATOR.join(items))
        contains_userinfo = True

    if contains_userinfo:
        parts.append("@")

    parts.append(info.host)

    if info.port != DEFAULT_SSH_PORT:
        parts.append(f":{info.port}")

    if isinstance(info.kind, MoshKind):
        parts.append(
            f"?{MOSH_PORTS_PARAMETER_NAMES[0]}={info.kind.port_from}-{info.kind.port_to}"
        )

    link = "".join(parts)
    logger.debug("Encoded connection link %s", link)
    return link

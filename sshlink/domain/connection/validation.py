"""
ConnectionInfo validation
"""
import ipaddress

from .models import ConnectionInfo, MoshKind, ValidationResult
from ...core.constants import IDENTITY_FILE_OPTION_NAME, MAX_PORT


def _is_valid_port(port: int) -> bool:
    return 0 < port <= MAX_PORT


_HOST_RESERVED = frozenset("/?#@%[]")


def _is_valid_host(host: str) -> bool:
    """Host text that is carried verbatim through a link"""
    if host.startswith("[") and host.endswith("]"):
        if "%" in host:
            return False
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True
    return not any(c in _HOST_RESERVED or c == ":" or c.isspace() for c in host)


def validate(info: ConnectionInfo, allow_no_user: bool = False) -> ValidationResult:
    """
    Validate a connection descriptor.

    Args:
        info: Connection to check
        allow_no_user: Accept an empty username (URIs may omit it)

    Returns:
        ValidationResult.VALID, or the union of every problem found
    """
    result = ValidationResult.VALID

    if not info.host or not info.host.strip():
        result |= ValidationResult.HOST_EMPTY
    elif not _is_valid_host(info.host):
        result |= ValidationResult.HOST_INVALID

    if not allow_no_user and not info.username:
        result |= ValidationResult.USERNAME_EMPTY

    if not _is_valid_port(info.port):
        result |= ValidationResult.SSH_PORT_INVALID

    if isinstance(info.kind, MoshKind):
        if not (_is_valid_port(info.kind.port_from) and _is_valid_port(info.kind.port_to)):
            result |= ValidationResult.MOSH_PORT_INVALID
        elif info.kind.port_from > info.kind.port_to:
            result |= ValidationResult.MOSH_PORT_RANGE_INVALID

    # IdentityFile has its own field and may not appear as an option
    seen = {IDENTITY_FILE_OPTION_NAME.casefold()}
    for option in info.options:
        if not option.name:
            result |= ValidationResult.OPTION_NAME_EMPTY
            continue
        key = option.name.casefold()
        if key in seen:
            result |= ValidationResult.OPTION_DUPLICATE
        seen.add(key)

    return result


def describe(result: ValidationResult) -> str:
    """Human readable list of the problems in a validation result"""
    if result == ValidationResult.VALID:
        return "valid"
    names = [flag.name.lower().replace("_", " ") for flag in ValidationResult if flag.value and flag in result]
    return ", ".join(names)

"""
Interactive connection dialog
"""
from dataclasses import replace
from typing import List, Optional

from ...core.constants import MOSH_PORTS_RANGE_RE, MAX_PORT
from ...core.exceptions import FormatError
from ...core.interfaces import ConnectionDialog, PromptProvider
from ...core.logging import get_logger
from ...domain.connection.models import (
    ConnectionInfo,
    ConnectionKind,
    LineEndingStyle,
    MoshKind,
    SshKind,
    SshOption,
    ValidationResult,
)
from ...domain.connection.options import split_option
from ...domain.connection.validation import validate, describe
from .prompts import RichPromptProvider

logger = get_logger(__name__)


class RichConnectionDialog(ConnectionDialog):
    """
    Console dialog asking for each connection field in turn.

    An empty host cancels the dialog. Invalid input is reported and the
    dialog starts over with the answers given so far as defaults.
    """

    def __init__(self, prompts: Optional[PromptProvider] = None, allow_no_user: bool = False):
        self.prompts = prompts or RichPromptProvider()
        self.allow_no_user = allow_no_user

    def show(self, initial: Optional[ConnectionInfo] = None) -> Optional[ConnectionInfo]:
        current = initial or ConnectionInfo(host="")

        while True:
            host = self.prompts.prompt("Host (empty to cancel)", default=current.host or None).strip()
            if not host:
                return None

            username = self.prompts.prompt("Username", default=current.username or None).strip()

            try:
                port = self._parse_port(self.prompts.prompt("Port", default=str(current.port)))
            except ValueError as e:
                self.prompts.error(str(e))
                current = replace(current, host=host, username=username)
                continue

            identity_file = self.prompts.prompt(
                "Identity file (empty for none)", default=current.identity_file or None
            ).strip()
            options = self._ask_options(current.options)

            use_mosh = self.prompts.confirm("Use mosh?", default=current.use_mosh)
            kind: ConnectionKind = SshKind()
            if use_mosh:
                previous = current.kind if isinstance(current.kind, MoshKind) else MoshKind()
                try:
                    kind = self._parse_mosh_ports(self.prompts.prompt(
                        "Mosh ports (from-to)", default=f"{previous.port_from}-{previous.port_to}"
                    ))
                except ValueError as e:
                    self.prompts.error(str(e))
                    current = replace(
                        current, host=host, username=username, port=port,
                        identity_file=identity_file, options=tuple(options), kind=previous,
                    )
                    continue

            style = self.prompts.choose(
                "Line endings",
                [s.value for s in LineEndingStyle],
                default=current.line_ending_style.value,
            )

            info = ConnectionInfo(
                host=host,
                port=port,
                username=username,
                identity_file=identity_file,
                options=tuple(options),
                kind=kind,
                line_ending_style=LineEndingStyle(style),
            )

            result = validate(info, allow_no_user=self.allow_no_user)
            if result == ValidationResult.VALID:
                return info

            logger.debug("Dialog input rejected: %s", result)
            self.prompts.error(f"Invalid connection: {describe(result)}")
            current = info

    def _ask_options(self, existing: tuple) -> List[SshOption]:
        options = list(existing)
        if options:
            self.prompts.info("Current options: " + ", ".join(str(o) for o in options))
            if not self.prompts.confirm("Keep current options?", default=True):
                options = []

        while True:
            text = self.prompts.prompt("SSH option name=value (empty to finish)").strip()
            if not text:
                return options
            try:
                options.append(split_option(text))
            except FormatError as e:
                self.prompts.error(str(e))

    @staticmethod
    def _parse_port(text: str) -> int:
        text = text.strip()
        if not text.isdigit() or not 0 < int(text) <= MAX_PORT:
            raise ValueError(f"Invalid port '{text}'.")
        return int(text)

    @staticmethod
    def _parse_mosh_ports(text: str) -> MoshKind:
        match = MOSH_PORTS_RANGE_RE.match(text.strip())
        if not match:
            raise ValueError(f"Invalid mosh ports range '{text}'.")
        return MoshKind(port_from=int(match.group("from")), port_to=int(match.group("to")))

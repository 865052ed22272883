"""Shared test doubles."""

from typing import List, Optional, Sequence

import pytest

from sshlink.core.interfaces import ConnectionDialog, PromptProvider
from sshlink.domain.connection.command import CommandLineBuilder, ExecutableSettings
from sshlink.domain.connection.models import ConnectionInfo


class ScriptedPrompts(PromptProvider):
    """Answers prompts from a list; None means accept the default."""

    def __init__(self, answers: Sequence):
        self.answers = list(answers)
        self.messages: List[str] = []
        self.infos: List[str] = []
        self.errors: List[str] = []

    def _next(self, message: str, default):
        self.messages.append(message)
        answer = self.answers.pop(0)
        return default if answer is None else answer

    def prompt(self, message: str, default: Optional[str] = None, password: bool = False) -> str:
        return self._next(message, default or "")

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._next(message, default)

    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        return self._next(message, default)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class FakeDialog(ConnectionDialog):
    """Dialog returning a fixed result and recording what it was shown."""

    def __init__(self, result: Optional[ConnectionInfo]):
        self.result = result
        self.shown_with: List[Optional[ConnectionInfo]] = []

    def show(self, initial: Optional[ConnectionInfo] = None) -> Optional[ConnectionInfo]:
        self.shown_with.append(initial)
        return self.result


@pytest.fixture
def settings() -> ExecutableSettings:
    return ExecutableSettings(ssh_executable="/usr/bin/ssh", mosh_executable="mosh")


@pytest.fixture
def builder(settings: ExecutableSettings) -> CommandLineBuilder:
    return CommandLineBuilder(settings)

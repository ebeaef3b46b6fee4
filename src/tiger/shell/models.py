"""Shell data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

GIT_ALIAS = "git"


class CommandLine(BaseModel):
    """One line of input split into a command name and its arguments."""

    model_config = ConfigDict(frozen=True)

    tokens: list[str]

    @classmethod
    def parse(cls, line: str) -> CommandLine:
        """Split on whitespace, dropping a leading ``git`` typed out of habit."""
        tokens = line.split()
        if tokens and tokens[0] == GIT_ALIAS:
            tokens = tokens[1:]
        return cls(tokens=tokens)

    @property
    def empty(self) -> bool:
        return not self.tokens

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def args(self) -> list[str]:
        return self.tokens[1:]

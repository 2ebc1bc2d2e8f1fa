from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"

    @property
    def flag(self) -> str:
        return f"--{self.value}"


@dataclass(slots=True)
class RepoRequest:
    name: str
    description: str = ""
    visibility: Visibility = Visibility.PUBLIC
    create_readme: bool = False
    main_branch: str = "main"

    def full_name(self, owner: str | None) -> str:
        return f"{owner}/{self.name}" if owner else self.name

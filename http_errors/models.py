from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusClass(str, Enum):
    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class StatusEntry:
    code: int
    name: str
    phrase: str

    @property
    def status_class(self) -> StatusClass:
        return _CLASSES[self.code // 100]

    @property
    def is_error(self) -> bool:
        return self.status_class in (StatusClass.CLIENT_ERROR, StatusClass.SERVER_ERROR)


_CLASSES = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESS,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from . import registry

ERROR_SUFFIX = "Error"


class HttpErrorsError(Exception):
    """Base class for failures while building an :class:`HttpError`."""

    def __init__(self, code: Any, message: str) -> None:
        super().__init__(message)
        self.code = code


class UnknownStatusCode(HttpErrorsError, TypeError):
    def __init__(self, code: Any) -> None:
        super().__init__(code, f"Unknown HTTP Status Code `{code}`")


class InvalidErrorStatusRange(HttpErrorsError, TypeError):
    def __init__(self, code: int) -> None:
        super().__init__(code, f"Only 4xx or 5xx status codes allowed, but got `{code}`")


def error_name(code: int) -> str:
    name = registry.short_name(code) or ""
    if not name.endswith(ERROR_SUFFIX):
        name += ERROR_SUFFIX
    return name


class HttpError(Exception):
    """An HTTP error response carried as an exception.

    ``status``, ``name`` and ``expose`` are fixed once the instance exists.
    ``extras`` is a free-form mapping the caller may keep editing; its
    entries are also readable as attributes.
    """

    def __init__(
        self,
        status: int,
        message: Optional[str] = None,
        extras: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if not registry.is_known(status):
            raise UnknownStatusCode(status)
        if status < 400 or status >= 600:
            raise InvalidErrorStatusRange(status)

        if message is None:
            message = registry.reason_phrase(status) or ""
        super().__init__(message)
        self._status = status
        self._name = error_name(status)
        self.message = message
        if not isinstance(extras, Mapping):
            extras = {}
        self.extras: Dict[str, Any] = {
            key: value for key, value in extras.items() if key != "status"
        }

    @property
    def status(self) -> int:
        return self._status

    @property
    def name(self) -> str:
        return self._name

    @property
    def expose(self) -> bool:
        return self._status < 500

    def __getattr__(self, key: str) -> Any:
        extras = self.__dict__.get("extras")
        if extras is not None and key in extras:
            return extras[key]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {key!r}")

    def __str__(self) -> str:
        return f"{self.name} [{self.status}]: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self._status!r}, message={self.message!r})"

    def __reduce__(self):
        return (type(self), (self._status, self.message, self.extras))

    def to_json(self) -> Dict[str, Any]:
        return {"name": self.name, "status": self.status, "message": self.message}

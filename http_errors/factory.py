from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .exceptions import HttpError

Extras = Mapping[str, Any]


def create_error(
    status: int,
    message: Union[str, Extras, None] = None,
    extras: Optional[Extras] = None,
) -> HttpError:
    """Build an :class:`HttpError` for ``status``.

    Accepts ``create_error(404)``, ``create_error(404, "gone", {"id": 1})``
    and ``create_error(404, extras={"id": 1})``. Any non-text value passed
    in place of the message is used as ``extras`` and the third argument
    is ignored, so ``create_error(404, {"id": 1})`` works too. A ``status``
    key in ``extras`` is ignored and non-mapping extras attach nothing.

    Raises:
        UnknownStatusCode: ``status`` is not a registered HTTP status.
        InvalidErrorStatusRange: ``status`` is registered but not 4xx/5xx.
    """
    if message is not None and not isinstance(message, str):
        message, extras = None, message
    return HttpError(status, message, extras)

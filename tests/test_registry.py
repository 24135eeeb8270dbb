from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from http_errors import data, registry
from http_errors.models import StatusClass


def test_registry_covers_every_status_class():
    classes = {entry.status_class for entry in data.statuses.values()}
    assert classes == set(StatusClass)
    assert all(100 <= code <= 599 for code in data.statuses)


def test_lookups():
    assert registry.is_known(404)
    assert registry.reason_phrase(404) == "Not Found"
    assert registry.short_name(404) == "NotFound"
    assert registry.reason_phrase(418) == "I'm a teapot"
    assert registry.reason_phrase(200) == "OK"


def test_unknown_code_lookups():
    assert not registry.is_known(3000)
    assert registry.reason_phrase(3000) is None
    assert registry.short_name(3000) is None
    assert registry.lookup(306) is None


def test_unhashable_code_is_unknown():
    assert registry.is_known([404]) is False
    assert registry.reason_phrase([404]) is None


def test_only_client_and_server_errors_are_error_entries():
    for entry in data.statuses.values():
        expected = entry.status_class in (StatusClass.CLIENT_ERROR, StatusClass.SERVER_ERROR)
        assert entry.is_error is expected
    assert data.statuses[404].status_class is StatusClass.CLIENT_ERROR
    assert data.statuses[503].status_class is StatusClass.SERVER_ERROR


def test_error_codes_are_sorted_4xx_and_5xx():
    codes = registry.error_codes()
    assert codes == sorted(codes)
    assert codes[0] == 400
    assert codes[-1] == 511
    assert all(400 <= code < 600 for code in codes)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        data.statuses[599] = data.statuses[500]

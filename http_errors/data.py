from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from .models import StatusEntry

_entries: List[StatusEntry] = [
    # 1xx
    StatusEntry(code=100, name="Continue", phrase="Continue"),
    StatusEntry(code=101, name="SwitchingProtocols", phrase="Switching Protocols"),
    StatusEntry(code=102, name="Processing", phrase="Processing"),
    StatusEntry(code=103, name="EarlyHints", phrase="Early Hints"),
    # 2xx
    StatusEntry(code=200, name="OK", phrase="OK"),
    StatusEntry(code=201, name="Created", phrase="Created"),
    StatusEntry(code=202, name="Accepted", phrase="Accepted"),
    StatusEntry(code=203, name="NonAuthoritativeInfo", phrase="Non-Authoritative Information"),
    StatusEntry(code=204, name="NoContent", phrase="No Content"),
    StatusEntry(code=205, name="ResetContent", phrase="Reset Content"),
    StatusEntry(code=206, name="PartialContent", phrase="Partial Content"),
    StatusEntry(code=207, name="MultiStatus", phrase="Multi-Status"),
    StatusEntry(code=208, name="AlreadyReported", phrase="Already Reported"),
    StatusEntry(code=226, name="IMUsed", phrase="IM Used"),
    # 3xx
    StatusEntry(code=300, name="MultipleChoices", phrase="Multiple Choices"),
    StatusEntry(code=301, name="MovedPermanently", phrase="Moved Permanently"),
    StatusEntry(code=302, name="Found", phrase="Found"),
    StatusEntry(code=303, name="SeeOther", phrase="See Other"),
    StatusEntry(code=304, name="NotModified", phrase="Not Modified"),
    StatusEntry(code=305, name="UseProxy", phrase="Use Proxy"),
    StatusEntry(code=307, name="TemporaryRedirect", phrase="Temporary Redirect"),
    StatusEntry(code=308, name="PermanentRedirect", phrase="Permanent Redirect"),
    # 4xx
    StatusEntry(code=400, name="BadRequest", phrase="Bad Request"),
    StatusEntry(code=401, name="Unauthorized", phrase="Unauthorized"),
    StatusEntry(code=402, name="PaymentRequired", phrase="Payment Required"),
    StatusEntry(code=403, name="Forbidden", phrase="Forbidden"),
    StatusEntry(code=404, name="NotFound", phrase="Not Found"),
    StatusEntry(code=405, name="MethodNotAllowed", phrase="Method Not Allowed"),
    StatusEntry(code=406, name="NotAcceptable", phrase="Not Acceptable"),
    StatusEntry(code=407, name="ProxyAuthRequired", phrase="Proxy Authentication Required"),
    StatusEntry(code=408, name="RequestTimeout", phrase="Request Timeout"),
    StatusEntry(code=409, name="Conflict", phrase="Conflict"),
    StatusEntry(code=410, name="Gone", phrase="Gone"),
    StatusEntry(code=411, name="LengthRequired", phrase="Length Required"),
    StatusEntry(code=412, name="PreconditionFailed", phrase="Precondition Failed"),
    StatusEntry(code=413, name="RequestEntityTooLarge", phrase="Request Entity Too Large"),
    StatusEntry(code=414, name="RequestURITooLong", phrase="Request URI Too Long"),
    StatusEntry(code=415, name="UnsupportedMediaType", phrase="Unsupported Media Type"),
    StatusEntry(code=416, name="RequestedRangeNotSatisfiable", phrase="Requested Range Not Satisfiable"),
    StatusEntry(code=417, name="ExpectationFailed", phrase="Expectation Failed"),
    StatusEntry(code=418, name="Teapot", phrase="I'm a teapot"),
    StatusEntry(code=421, name="MisdirectedRequest", phrase="Misdirected Request"),
    StatusEntry(code=422, name="UnprocessableEntity", phrase="Unprocessable Entity"),
    StatusEntry(code=423, name="Locked", phrase="Locked"),
    StatusEntry(code=424, name="FailedDependency", phrase="Failed Dependency"),
    StatusEntry(code=425, name="TooEarly", phrase="Too Early"),
    StatusEntry(code=426, name="UpgradeRequired", phrase="Upgrade Required"),
    StatusEntry(code=428, name="PreconditionRequired", phrase="Precondition Required"),
    StatusEntry(code=429, name="TooManyRequests", phrase="Too Many Requests"),
    StatusEntry(code=431, name="RequestHeaderFieldsTooLarge", phrase="Request Header Fields Too Large"),
    StatusEntry(code=451, name="UnavailableForLegalReasons", phrase="Unavailable For Legal Reasons"),
    # 5xx
    StatusEntry(code=500, name="InternalServerError", phrase="Internal Server Error"),
    StatusEntry(code=501, name="NotImplemented", phrase="Not Implemented"),
    StatusEntry(code=502, name="BadGateway", phrase="Bad Gateway"),
    StatusEntry(code=503, name="ServiceUnavailable", phrase="Service Unavailable"),
    StatusEntry(code=504, name="GatewayTimeout", phrase="Gateway Timeout"),
    StatusEntry(code=505, name="HTTPVersionNotSupported", phrase="HTTP Version Not Supported"),
    StatusEntry(code=506, name="VariantAlsoNegotiates", phrase="Variant Also Negotiates"),
    StatusEntry(code=507, name="InsufficientStorage", phrase="Insufficient Storage"),
    StatusEntry(code=508, name="LoopDetected", phrase="Loop Detected"),
    StatusEntry(code=510, name="NotExtended", phrase="Not Extended"),
    StatusEntry(code=511, name="NetworkAuthenticationRequired", phrase="Network Authentication Required"),
]

statuses: Mapping[int, StatusEntry] = MappingProxyType({entry.code: entry for entry in _entries})

del _entries

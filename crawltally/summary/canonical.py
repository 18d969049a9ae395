"""Canonical forms for MIME types and status codes.

Both functions are pure and total: any input yields a string, and neither
raises. An empty canonical MIME type is its own bucket for records with no
usable type; unknown status codes get the "Unknown" label instead.
"""

from http import HTTPStatus

UNKNOWN_STATUS = "Unknown"

# Values crawlers write when the server sent no Content-Type
_NO_TYPE = frozenset(
    {"-", "no-type", "unknown", "unknown/unknown", "application/unknown"}
)

# Noisy variants -> preferred label. Targets must never appear as keys.
_MIME_ALIASES = {
    "application/x-javascript": "text/javascript",
    "application/javascript": "text/javascript",
    "application/ecmascript": "text/javascript",
    "text/x-javascript": "text/javascript",
    "text/ecmascript": "text/javascript",
    "image/jpg": "image/jpeg",
    "image/pjpeg": "image/jpeg",
    "image/x-png": "image/png",
    "image/x-icon": "image/vnd.microsoft.icon",
    "application/x-pdf": "application/pdf",
    "application/x-gzip": "application/gzip",
    "text/xml": "application/xml",
}

# Heritrix FetchStatusCodes for URIs that never produced an HTTP response
_CRAWLER_STATUS = {
    1: "Successful DNS lookup",
    0: "Fetch never tried",
    -1: "DNS lookup failed",
    -2: "HTTP connect failed",
    -3: "HTTP connect broken",
    -4: "HTTP timeout",
    -5: "Unexpected runtime exception",
    -6: "Prerequisite domain lookup failed",
    -7: "URI recognized as unsupported or illegal",
    -8: "Multiple retries failed",
    -9: "Unable to parse content",
    -50: "Temporary status",
    -60: "Failed to get prerequisite",
    -61: "Robots.txt prerequisite not fetched",
    -62: "Other prerequisite failed",
    -63: "Prerequisite could not be scheduled",
    -404: "Empty HTTP response",
    -3000: "Severe Java error",
    -4000: "Detected trap or chaff",
    -4001: "Too many link hops",
    -4002: "Too many embed hops",
    -5000: "Out of scope",
    -5001: "Blocked by user",
    -5002: "Blocked by custom processor",
    -5003: "Blocked due to exceeding quota",
    -6000: "Deleted from frontier",
    -7000: "Processing thread killed",
    -9998: "Robots.txt precluded fetch",
}


def canonicalize_mime_type(raw: str | None) -> str:
    """Reduce a raw MIME type to its canonical bucket label.

    Parameters (after ";") and repeated header values (after ",") are
    dropped, whitespace removed and the result lower-cased, then crawler
    placeholders collapse to "" and known aliases to one label.

    >>> canonicalize_mime_type("text/HTML; charset=utf-8")
    'text/html'
    >>> canonicalize_mime_type("no-type")
    ''
    """
    if not raw:
        return ""
    mime = raw.split(";", 1)[0].split(",", 1)[0]
    mime = "".join(mime.split()).lower()
    if mime in _NO_TYPE:
        return ""
    return _MIME_ALIASES.get(mime, mime)


def describe_status_code(code: int) -> str:
    """Human-readable description of an HTTP or crawler status code.

    >>> describe_status_code(404)
    'Not Found'
    >>> describe_status_code(-61)
    'Robots.txt prerequisite not fetched'
    >>> describe_status_code(799)
    'Unknown'
    """
    description = _CRAWLER_STATUS.get(code)
    if description is not None:
        return description
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return UNKNOWN_STATUS

from urllib.parse import urlparse, quote

SCHEMES = ("http://", "https://")
INTERNAL_LINK_PREFIX = "/?_url="

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"

def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already carries an http(s) scheme."""
    if url.startswith(SCHEMES):
        return url
    return "https://" + url

def is_valid_url(url: str) -> bool:
    """
    Check that a (normalized) URL is an absolute http(s) URL.
    Examples: 'https://example.com/a' -> True, 'https://' -> False
    """
    if not url:
        return False
    try:
        parsed = urlparse(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    # Spaces are allowed in the path and query, not in the host
    if any(ch.isspace() for ch in parsed.netloc):
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)

def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)

def build_internal_link(absolute_url: str) -> str:
    """Wrap a target URL in the in-app navigation form /?_url=<encoded>."""
    return INTERNAL_LINK_PREFIX + encode_uri_component(absolute_url)

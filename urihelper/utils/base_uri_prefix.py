from typing import Optional


def to_base_uri_prefix(raw_base_uri: Optional[str]) -> str:
    """
    Given the page's declared base URI, returns the prefix that can be
    prepended to URI paths to produce an absolute URI.
    ex. 'https://example.com/app/' returns 'https://example.com/app'
    ex. 'https://example.com/app/index.html' returns 'https://example.com/app'
    """
    if raw_base_uri is not None:
        last_slash_index = raw_base_uri.rfind("/")
        if last_slash_index >= 0:
            return raw_base_uri[:last_slash_index]

    return ""

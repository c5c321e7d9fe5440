from urihelper.errors import InvalidArgument


def to_base_relative_path(base_uri_prefix: str, absolute_uri: str) -> str:
    """
    Given a base URI prefix and an absolute URI inside it, returns the
    path relative to the prefix, always starting with '/'.
    ex. ('/app', '/app/page') returns '/page'
    """
    if absolute_uri == base_uri_prefix:
        # Being exactly at the base is treated as "{base_uri_prefix}/",
        # which is what a server mounted on a path base serves anyway.
        return "/"

    prefix_length = len(base_uri_prefix)
    if (
        absolute_uri.startswith(base_uri_prefix)
        and len(absolute_uri) > prefix_length
        and absolute_uri[prefix_length] == "/"
    ):
        return absolute_uri[prefix_length:]

    raise InvalidArgument(
        f"The URI '{absolute_uri}' is not contained by the base URI "
        f"'{base_uri_prefix}'."
    )

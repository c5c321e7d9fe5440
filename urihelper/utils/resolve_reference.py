from urllib.parse import SplitResult, urlsplit


def has_authority(uri: str) -> bool:
    """
    True when the URI spells an authority ('//'), even an empty one.
    ex. 'file:///C:/app' returns True, 'mailto:a@b' returns False
    """
    scheme, colon, rest = uri.partition(":")
    if not colon or "/" in scheme:
        rest = uri
    return rest.startswith("//")


def remove_dot_segments(path: str) -> str:
    """
    Removes '.' and '..' segments from a path.
    ex. '/a/b/../c/./d' returns '/a/c/d'
    """
    output = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../") or path == "/..":
            path = "/" + path[4:]
            if output:
                output.pop()
        elif path in (".", ".."):
            path = ""
        else:
            end = path.find("/", 1)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)


def _merge(base: SplitResult, base_has_authority: bool, path: str) -> str:
    if base_has_authority and not base.path:
        return "/" + path
    return base.path[: base.path.rfind("/") + 1] + path


def resolve_reference(
    base: SplitResult, base_has_authority: bool, reference: str
) -> str:
    """
    Resolves a URI reference against an absolute base URI. Works the same
    for every scheme, including ones the standard library's urljoin
    leaves alone (e.g. 'app://').
    """
    ref = urlsplit(reference)
    before_fragment, hash_mark, _ = reference.partition("#")
    ref_query = ref.query if "?" in before_fragment else None
    ref_fragment = ref.fragment if hash_mark else None

    if ref.scheme:
        scheme = ref.scheme
        authority = ref.netloc if has_authority(reference) else None
        path = remove_dot_segments(ref.path)
        query = ref_query
    else:
        scheme = base.scheme
        if reference.startswith("//"):
            authority = ref.netloc
            path = remove_dot_segments(ref.path)
            query = ref_query
        else:
            authority = base.netloc if base_has_authority else None
            if not ref.path:
                path = base.path
                if ref_query is not None:
                    query = ref_query
                else:
                    query = base.query if base.query else None
            else:
                if ref.path.startswith("/"):
                    path = remove_dot_segments(ref.path)
                else:
                    path = remove_dot_segments(
                        _merge(base, base_has_authority, ref.path)
                    )
                query = ref_query

    result = scheme + ":"
    if authority is not None:
        result += "//" + authority
    result += path
    if query is not None:
        result += "?" + query
    if ref_fragment is not None:
        result += "#" + ref_fragment
    return result

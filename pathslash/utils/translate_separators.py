"""Rewrite one separator character into the native separator."""


def translate_separators(text: str, separator: str, native_separator: str) -> str:
    """Replace every ``separator`` in ``text`` with ``native_separator``.

    All other characters pass through unchanged. When nothing needs rewriting
    the very same ``text`` object is returned, so callers can tell a borrowed
    result from a freshly built one with ``is``.

    Args:
        text: Text delimited by ``separator``
        separator: Separator used in ``text`` (``/`` or ``\\``)
        native_separator: Separator of the target path flavour

    Returns:
        Text delimited by ``native_separator``

    Examples:
        >>> translate_separators("foo/bar", "/", "|")
        "foo|bar"
        >>> translate_separators("foo/bar", "/", "/")
        "foo/bar"
    """
    if separator == native_separator or separator not in text:
        return text
    return text.replace(separator, native_separator)

"""
Type-aware value formatting for exception and warning messages.

Every error raised by metricnum embeds the offending input as a type-value
token such as ``<str: '12q'>`` so that messages stay unambiguous even for
blank strings, look-alike unicode symbols or exotic numeric types.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal

# Classes --------------------------------------------------------------------------------------------------------------

Style = Literal["ascii", "colon", "equal", "paren", "unicode-angle"]

# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(
        obj: Any, *,
        style: Style = "ascii",
        max_repr: int = 120,
        ellipsis: str | None = None,
        show_module: bool = False,
) -> str:
    """Format type information for exception messages.

    Args:
        obj: Any Python object or type.
        style: Display style - "ascii" (default), "unicode-angle", "equal", "paren", "colon".
        max_repr: Maximum length of the type name before truncation.
        ellipsis: Custom truncation token. Auto-selected per style if None.
        show_module: Whether to qualify non-builtin types with their module name.

    Returns:
        Formatted string like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
        >>> from decimal import Decimal
        >>> fmt_type(Decimal(1), show_module=True)
        '<type: decimal.Decimal>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)

    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    if show_module:
        module_name = getattr(target_type, "__module__", None)
        if module_name and module_name != "builtins":
            type_name = f"{module_name}.{type_name}"

    truncated_name = _fmt_truncate(type_name, max_repr, ellipsis=_fmt_more_token(style, ellipsis))
    return _fmt_format_pair("type", truncated_name, style)


def fmt_value(
        x: Any, *,
        style: Style = "ascii",
        max_repr: int = 120,
        ellipsis: str | None = None,
) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Handles broken __repr__ and very long representations gracefully.

    Args:
        x: Any Python object to format.
        style: Display style - "ascii" (default), "unicode-angle", "equal", "paren", "colon".
        max_repr: Maximum length of the value's repr before truncation.
        ellipsis: Custom truncation token. Auto-selected per style if None ("..." for ASCII, "…" otherwise).

    Returns:
        Formatted string like "<int: 42>" (ASCII) or "⟨str: '1k'⟩" (unicode-angle).

    Examples:
        >>> fmt_value(1e27)
        '<float: 1e+27>'
        >>> fmt_value("12 kilo", style="equal")
        "str='12 kilo'"
        >>> fmt_value("1234567890k", max_repr=6)
        "<str: '12'...>"
    """
    t = type(x).__name__
    ellipsis_token = _fmt_more_token(style, ellipsis)

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    # Escape before truncation so a custom ellipsis is never escaped
    if style == "ascii":
        base_repr = base_repr.replace(">", "\\>")

    r = _fmt_truncate(base_repr, max_repr, ellipsis=ellipsis_token)
    return _fmt_format_pair(t, r, style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "…") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner_budget = max(1, max_len - 4)
        return f"{s[0]}{s[1:1 + inner_budget]}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis


def _fmt_format_pair(type_name: str, value_repr: str, style: str) -> str:
    """Combine a type name and a repr into a single display token according to style."""
    if style == "unicode-angle":
        return f"⟨{type_name}: {value_repr}⟩"
    if style == "equal":
        return f"{type_name}={value_repr}"
    if style == "paren":
        return f"{type_name}({value_repr})"
    if style == "colon":
        return f"{type_name}: {value_repr}"
    return f"<{type_name}: {value_repr}>"


def _fmt_more_token(style: str, more_token: str | None = None) -> str:
    """Decide which 'more' token to use (ellipsis vs custom)."""
    if more_token is not None:
        return more_token
    return "..." if style == "ascii" else "…"

"""Relative link rewriting for Markdown bodies.

Runs on raw text before rendering. This is a single regex pass, not a
Markdown parse: links inside code spans and fenced blocks are rewritten too.
"""

import re
from collections.abc import Callable

_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
_SKIP_PREFIXES = ("http://", "https://", "#", "/")

PathResolver = Callable[[str, str], str | None]


def rewrite_markdown_links(content: str, base_path: str, resolve_path: PathResolver) -> str:
    """Rewrite relative Markdown link targets to absolute paths.

    External URLs, in-page anchors and absolute paths are left alone. For the
    remaining targets the part before the first "#" is passed to
    resolve_path(base_path, target); a result replaces the target with the
    anchor re-appended, None leaves the link untouched.

    Args:
        content: Markdown text
        base_path: Location the links are relative to, passed through to resolve_path
        resolve_path: Maps (base_path, relative target) to an absolute path or None

    Returns:
        Markdown text with resolvable links rewritten
    """

    def _replace(match: re.Match[str]) -> str:
        text, href = match.group(1), match.group(2)
        if href.startswith(_SKIP_PREFIXES):
            return match.group(0)

        # Only the first anchor segment is kept: "a#b#c" keeps "b"
        path_part, *anchors = href.split("#")
        anchor = anchors[0] if anchors else ""
        if not path_part:
            return match.group(0)

        absolute_path = resolve_path(base_path, path_part)
        if not absolute_path:
            return match.group(0)

        new_href = f"{absolute_path}#{anchor}" if anchor else absolute_path
        return f"[{text}]({new_href})"

    return _LINK_RE.sub(_replace, content)

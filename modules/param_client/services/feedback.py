from __future__ import annotations

from typing import Any

# Message text is inserted as-is; callers only pass trusted strings.


def render_error(message: str) -> str:
    return f'<div class="error">{message}</div>'


def render_loading(message: str) -> str:
    return f'<div class="loading">{message}</div>'


def show_error(message: str, container: Any) -> None:
    """Replace the container's markup with an error box."""
    container.inner_html = render_error(message)


def show_loading(message: str, container: Any) -> None:
    """Replace the container's markup with a loading notice."""
    container.inner_html = render_loading(message)


class HtmlFragment:
    """Minimal container used when markup is rendered server side."""

    def __init__(self, inner_html: str = "") -> None:
        self.inner_html = inner_html

    def __str__(self) -> str:
        return self.inner_html

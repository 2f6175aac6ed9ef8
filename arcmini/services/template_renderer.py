from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from arcmini.domain.errors import UnknownFormatKind
from arcmini.domain.interfaces import ITemplateRenderer
from arcmini.domain.models import CopyRequest, PreferenceState
from arcmini.log import logger

PLACEHOLDERS = frozenset({"title", "url", "separator"})
_TOKEN_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

Shape = Callable[[str, str, PreferenceState], str]


def _plain(title: str, url: str, state: PreferenceState) -> str:
    return title + state.plain_text_separator + url


def _markdown(title: str, url: str, state: PreferenceState) -> str:
    return "[" + title + "](" + url + ")"


def _html(title: str, url: str, state: PreferenceState) -> str:
    return '<a href="' + url + '">' + title + "</a>"


def _csv(title: str, url: str, state: PreferenceState) -> str:
    return '"' + title + '","' + url + '"'


_SHAPES: dict[str, Shape] = {
    "plain": _plain,
    "markdown": _markdown,
    "html": _html,
    "csv": _csv,
}


def shape_for(kind: str) -> Shape:
    try:
        return _SHAPES[kind]
    except (KeyError, TypeError):
        raise UnknownFormatKind(kind) from None


def fill_template(template: str, values: Mapping[str, str]) -> str:
    """
    Replace ``{title}``, ``{url}`` and ``{separator}`` in *template*.

    Any other ``{token}`` and stray braces are left exactly as written.
    """

    def sub(m: re.Match[str]) -> str:
        name = m.group(1)
        if name in PLACEHOLDERS and name in values:
            return values[name]
        return m.group(0)

    return _TOKEN_RE.sub(sub, template)


class TemplateRenderer(ITemplateRenderer):
    """
    Renders a title/url pair for the selected format.

    Markdown, HTML and CSV use fixed shapes rather than the stored templates: a
    user-edited template for those formats would need escaping rules this
    renderer does not have. Plain text is customised only through the separator.
    Title and URL are inserted verbatim.
    """

    def render(self, request: CopyRequest, state: PreferenceState) -> str:
        try:
            shape = shape_for(state.selected_format)
        except UnknownFormatKind as exc:
            logger.warning("%s; falling back to plain 'title url'", exc)
            return request.title + " " + request.url
        return shape(request.title, request.url, state)

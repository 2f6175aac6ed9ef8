from __future__ import annotations

import html

import markdown


class FormatPreview:
    """Turn rendered copy text into rich text for the settings preview."""

    def to_html(self, kind: str, text: str) -> str:
        if kind == "markdown":
            return markdown.markdown(text, output_format="html5")
        if kind == "html":
            return text
        return "<pre>" + html.escape(text) + "</pre>"

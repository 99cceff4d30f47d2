import asyncio
import html
import json
import logging
import re
from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from app.errors import ContentProcessingError

logger = logging.getLogger(__name__)

# Capitalised tags are MDX components; lowercase ones are plain HTML.
COMPONENT_TAG = re.compile(r"<(/)?([A-Z][\w.]*)\b[^<>]*?(/)?>")


def code_highlighter(theme: str):
    """Build a markdown-it highlight callback that renders with a Pygments style."""
    style = get_style_by_name(theme)
    formatter = HtmlFormatter(nowrap=True, noclasses=True, style=style)
    background = style.background_color

    def _highlight(code: str, lang: str, _attrs: str) -> str:
        try:
            lexer = get_lexer_by_name(lang) if lang else TextLexer()
        except ClassNotFound:
            logger.debug(f"No lexer for '{lang}', rendering as plain text")
            lexer = TextLexer()
        body = highlight(code, lexer, formatter)
        return (
            f'<pre data-language="{html.escape(lang or "plaintext")}" '
            f'data-theme="{theme}" style="background-color: {background}">'
            f"<code>{body}</code></pre>"
        )

    return _highlight


def autolink_headings_plugin(md: MarkdownIt) -> None:
    """Wrap each heading's content in a link to the heading's own id."""

    def _autolink(state: StateCore) -> None:
        tokens = state.tokens
        for idx, token in enumerate(tokens):
            if token.type != "heading_open":
                continue
            slug = token.attrGet("id")
            inline = tokens[idx + 1]
            if not slug or inline.type != "inline":
                continue
            link_open = Token("link_open", "a", 1)
            link_open.attrSet("href", f"#{slug}")
            link_close = Token("link_close", "a", -1)
            inline.children = [link_open, *(inline.children or []), link_close]

    # pushed last so it runs after the anchors rule has assigned ids
    md.core.ruler.push("autolink_headings", _autolink)


def check_components(tokens: List[Token]) -> None:
    """Raise if an MDX component tag is opened but never closed, or vice versa."""
    stack: List[tuple] = []

    def _scan(token: Token, line: Optional[int]) -> None:
        for match in COMPONENT_TAG.finditer(token.content):
            closing, name, self_closing = match.groups()
            if self_closing:
                continue
            if not closing:
                stack.append((name, line))
                continue
            if not stack:
                raise ContentProcessingError(
                    f"Unexpected closing tag </{name}>", line=line
                )
            open_name, open_line = stack.pop()
            if open_name != name:
                raise ContentProcessingError(
                    f"Expected a closing tag for <{open_name}> (opened on line {open_line})"
                    f" before </{name}>",
                    line=line,
                )

    for token in tokens:
        line = token.map[0] + 1 if token.map else None
        if token.type == "html_block":
            _scan(token, line)
        elif token.type == "inline":
            for child in token.children or []:
                if child.type == "html_inline":
                    _scan(child, line)

    if stack:
        name, line = stack[-1]
        raise ContentProcessingError(
            f"Expected a closing tag for <{name}>", line=line
        )


class ContentSerializer:
    """
    Turns an MDX body into the serialized payload the site hydrates on the client.

    Pipeline: heading ids -> syntax highlighting -> heading autolinks.
    """

    def __init__(self, theme: str = "material"):
        self.theme = theme
        self.md = (
            MarkdownIt("commonmark", {"highlight": code_highlighter(theme)})
            .enable(["table", "strikethrough"])
            .use(anchors_plugin, min_level=1, max_level=6)
            .use(autolink_headings_plugin)
        )

    def render(self, body: str) -> str:
        env: dict = {}
        tokens = self.md.parse(body, env)
        check_components(tokens)
        return self.md.renderer.render(tokens, self.md.options, env)

    def serialize_sync(self, body: str) -> str:
        compiled = self.render(body)
        return json.dumps({"compiledSource": compiled, "frontmatter": {}, "scope": {}})

    async def serialize(self, body: str) -> str:
        return await asyncio.to_thread(self.serialize_sync, body)

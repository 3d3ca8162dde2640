"""Conversion of article HTML into Markdown for the terminal."""

import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

_HEADINGS = {"h1": "#", "h2": "##", "h3": "###", "h4": "####", "h5": "#####", "h6": "######"}
_BLOCKS = {"p", "div", "section", "article", "blockquote"}
_WHITESPACE = re.compile(r"\s+")
_BLANK_LINES = re.compile(r"\n{2,}")


def html_to_markdown(html: str) -> str:
    """Render a fragment of article HTML as Markdown."""
    soup = BeautifulSoup(html or "", "html.parser")
    blocks = _BLANK_LINES.split(_render_children(soup))
    return "\n\n".join(block.strip() for block in blocks if block.strip())


def _render_children(tag: Tag) -> str:
    return "".join(_render(child) for child in tag.children)


def _render(node: object) -> str:
    if isinstance(node, Comment):
        return ""
    if isinstance(node, NavigableString):
        return _WHITESPACE.sub(" ", str(node))
    if not isinstance(node, Tag):
        return ""

    name = node.name
    inner = _render_children(node).strip()
    if name in _HEADINGS:
        return f"\n\n{_HEADINGS[name]} {inner}\n\n"
    if name in _BLOCKS:
        return f"\n\n{inner}\n\n"
    if name in ("ul", "ol"):
        lines = []
        for index, item in enumerate(node.find_all("li", recursive=False), start=1):
            marker = f"{index}." if name == "ol" else "-"
            lines.append(f"{marker} {_render_children(item).strip()}")
        return "\n\n" + "\n".join(lines) + "\n\n"
    if name in ("strong", "b"):
        return f"**{inner}**" if inner else ""
    if name in ("em", "i"):
        return f"*{inner}*" if inner else ""
    if name == "a":
        href = node.get("href")
        return f"[{inner}]({href})" if href else inner
    if name == "br":
        return "\n"
    if name == "img":
        return f"![{node.get('alt', '')}]({node.get('src', '')})"
    return inner

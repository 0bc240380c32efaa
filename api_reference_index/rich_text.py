"""Logic for reading rich-text HTML exported by the content repository."""

import re

from bs4 import BeautifulSoup

# <object type="application/kenticocloud" data-type="item" data-codename="foo">
ITEM_OBJECT_ATTRS = {"data-type": "item"}
NON_TEXT_TAGS = ["script", "style", "template"]
BLOCK_TAGS = [
    "p",
    "li",
    "ul",
    "ol",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "tr",
    "table",
    "div",
    "pre",
    "blockquote",
]
INLINE_SPACE_RE = re.compile(r"[ \t\r\f\v\xa0]+")
BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def parse_rich_text(rich_text: str) -> BeautifulSoup:
    """Parse rich-text HTML with the standard-library parser backend."""
    return BeautifulSoup(rich_text, "html.parser")


def get_child_codenames_from_rich_text(rich_text: str | None) -> list[str]:
    """Return codenames of items embedded in rich text, in order of first appearance."""
    if not rich_text:
        return []

    codenames: list[str] = []
    soup = parse_rich_text(rich_text)
    for obj in soup.find_all("object", attrs=ITEM_OBJECT_ATTRS):
        codename = obj.get("data-codename")
        if codename and codename not in codenames:
            codenames.append(codename)
    return codenames


def rich_text_to_plain_text(rich_text: str | None) -> str:
    """Convert rich text to plain text, leaving out embedded items and scripts."""
    if not rich_text:
        return ""

    soup = parse_rich_text(rich_text)
    dropped = soup.find_all("object", attrs=ITEM_OBJECT_ATTRS)
    dropped.extend(soup.find_all(NON_TEXT_TAGS))
    for tag in dropped:
        # Nested matches are gone once their ancestor is decomposed
        if not tag.decomposed:
            tag.decompose()

    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(BLOCK_TAGS):
        block.append("\n")

    text = INLINE_SPACE_RE.sub(" ", soup.get_text())
    lines = [line.strip() for line in text.split("\n")]
    return BLANK_LINES_RE.sub("\n", "\n".join(lines)).strip()

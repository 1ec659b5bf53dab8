import re
import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Elements dropped together with everything inside them
MEDIA_TAGS = ["img", "picture", "video", "audio", "iframe", "embed", "object", "svg", "source", "track", "canvas"]
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

BLOCK_TAGS = [
    "p", "div", "br", "hr", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6",
    "blockquote", "pre", "section", "article", "header", "footer", "figure",
    "figcaption", "table", "tr", "td", "th", "dd", "dt",
]


def html_to_text(content: str) -> str:
    """
    Renders article markup as plain text.
    Links keep their visible text, media is removed, nothing is word-wrapped.
    """
    if not content:
        return ""

    try:
        soup = BeautifulSoup(content, "html.parser")

        for tag in soup(MEDIA_TAGS + NON_CONTENT_TAGS):
            # Nested media goes with its parent
            if not tag.decomposed:
                tag.decompose()

        # Keep the anchor text, discard the href
        for link in soup.find_all("a"):
            link.unwrap()

        for tag in soup.find_all(BLOCK_TAGS):
            tag.insert_before("\n")
            tag.insert_after("\n")

        text = soup.get_text()
    except Exception as e:
        logger.warning(f"Falling back to tag stripping for malformed markup: {e}")
        text = re.sub(r"<[^>]*>", " ", content)

    return _collapse_whitespace(text)


def _collapse_whitespace(text: str) -> str:
    lines = (re.sub(r"[ \t\r\f\v\xa0]+", " ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)

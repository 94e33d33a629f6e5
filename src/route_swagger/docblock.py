"""Handler docstring parsing.

Only three things are read from a docstring: the summary (first
paragraph), the description (following paragraphs up to the first
section) and whether the handler is marked deprecated.
"""

import re

from pydantic import BaseModel

from route_swagger.errors import DocBlockError

SECTION_RE = re.compile(
    r"^(args|arguments|params|parameters|returns?|yields?|raises?|examples?|notes?)\s*:\s*$",
    re.IGNORECASE,
)
DEPRECATED_RE = re.compile(
    r"^(\.\.\s+deprecated::|@deprecated\b|deprecated\s*:)", re.IGNORECASE
)
TAG_RE = re.compile(r"^@(\w+)")


class DocBlock(BaseModel):
    summary: str = ""
    description: str = ""
    deprecated: bool = False


class ParseResult(BaseModel):
    """Outcome of a parse: a DocBlock, or the reason there is none."""

    doc_block: DocBlock | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DocBlockParser:
    """Parses docstrings into DocBlocks."""

    def parse(self, docstring: str) -> DocBlock:
        if not isinstance(docstring, str):
            raise DocBlockError(f"Expected a docstring, got {type(docstring).__name__}")

        lines = [line.strip() for line in docstring.strip().splitlines()]
        deprecated = False
        body: list[str] = []
        in_section = False

        for line in lines:
            if DEPRECATED_RE.match(line):
                deprecated = True
                in_section = True
                continue
            if SECTION_RE.match(line):
                in_section = True
                continue
            tag = TAG_RE.match(line)
            if tag:
                if not line[tag.end():].strip() and tag.group(1) in ("param", "return", "throws"):
                    raise DocBlockError(f"Tag '@{tag.group(1)}' needs a value")
                in_section = True
                continue
            if in_section:
                # sections run until the next blank line
                if not line:
                    in_section = False
                continue
            body.append(line)

        paragraphs = _paragraphs(body)
        summary = " ".join(paragraphs[0]) if paragraphs else ""
        description = "\n\n".join(" ".join(p) for p in paragraphs[1:])
        return DocBlock(summary=summary, description=description, deprecated=deprecated)

    def try_parse(self, docstring: str) -> ParseResult:
        try:
            return ParseResult(doc_block=self.parse(docstring))
        except Exception as e:
            return ParseResult(error=str(e) or type(e).__name__)


def _paragraphs(lines: list[str]) -> list[list[str]]:
    paragraphs: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        if line:
            current.append(line)
        elif current:
            paragraphs.append(current)
            current = []
    if current:
        paragraphs.append(current)
    return paragraphs

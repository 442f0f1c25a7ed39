"""Decide whether the caret sits in a component's prop list, and which component.

The analyzer never looks past the caret. It walks backwards over candidate
`<name` openings, newest first, and lexes each one forward to the caret with a
small state machine. The first candidate whose tag is still open at the caret
decides the outcome; candidates whose tag closes before the caret are skipped,
which lets markup such as `title="<b>"` inside an attribute value resolve to
the outer tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import MalformedContext
from .models import CursorContext

_COMPONENT_NAME = re.compile(r"[A-Z][A-Za-z0-9]*")
_TAG_OPEN = re.compile(r"<(?=[A-Za-z])")
_TRAILING_WORD = re.compile(r"[A-Za-z0-9]*$")
_LEADING_WORD = re.compile(r"[A-Za-z0-9]*")

_QUOTES = "\"'"
_TAG_NAME_CHARS = set("._-:$")
_ATTR_NAME_CHARS = set("_-:.$")

NOT_ELIGIBLE = CursorContext(inside_props=False)


class TagState(Enum):
    TAG_NAME = "tag-name"
    GAP = "gap"
    ATTR_NAME = "attr-name"
    AFTER_EQUALS = "after-equals"
    STRING = "string"
    UNQUOTED_VALUE = "unquoted-value"
    EXPRESSION = "expression"
    SLASH = "slash"
    CLOSED = "closed"
    INVALID = "invalid"


@dataclass
class TagScan:
    """Where lexing a single tag candidate ended up."""

    tag_name: str
    state: TagState
    word: str = ""
    self_closing: bool = False
    end: int = 0

    @property
    def is_open(self) -> bool:
        return self.state is not TagState.CLOSED

    @property
    def in_prop_region(self) -> bool:
        return self.state in (TagState.GAP, TagState.ATTR_NAME)


def scan_tag(text: str, start: int) -> TagScan:
    """Lex the tag opening at `text[start] == "<"` up to the end of `text`."""
    length = len(text)
    index = start + 1
    while index < length and (text[index].isalnum() or text[index] in _TAG_NAME_CHARS):
        index += 1
    tag_name = text[start + 1 : index]
    if index == length:
        return TagScan(tag_name, TagState.TAG_NAME, end=index)

    state = TagState.GAP
    char = text[index]
    if char == ">":
        return TagScan(tag_name, TagState.CLOSED, end=index + 1)
    if not (char.isspace() or char == "/"):
        return TagScan(tag_name, TagState.INVALID, end=index)

    word = ""
    pending_attr = False
    quote = ""
    depth = 0
    expression_quote = ""

    while index < length:
        char = text[index]

        if state is TagState.STRING:
            if char == quote:
                state = TagState.GAP
                pending_attr = False
            index += 1
            continue

        if state is TagState.EXPRESSION:
            if not expression_quote and text.startswith("//", index):
                newline = text.find("\n", index)
                index = length if newline == -1 else newline + 1
                continue
            if not expression_quote and text.startswith("/*", index):
                close = text.find("*/", index + 2)
                index = length if close == -1 else close + 2
                continue
            if expression_quote:
                if char == "\\":
                    index += 2
                    continue
                if char == expression_quote:
                    expression_quote = ""
            elif char in _QUOTES or char == "`":
                expression_quote = char
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    state = TagState.GAP
                    pending_attr = False
            index += 1
            continue

        if state is TagState.UNQUOTED_VALUE:
            if char.isspace():
                state = TagState.GAP
                pending_attr = False
            elif char == ">":
                return TagScan(tag_name, TagState.CLOSED, end=index + 1)
            index += 1
            continue

        if state is TagState.AFTER_EQUALS:
            if char.isspace():
                pass
            elif char in _QUOTES:
                state, quote = TagState.STRING, char
            elif char == "{":
                state, depth = TagState.EXPRESSION, 1
            elif char == ">":
                return TagScan(tag_name, TagState.CLOSED, end=index + 1)
            else:
                state = TagState.UNQUOTED_VALUE
            index += 1
            continue

        if state is TagState.SLASH:
            if char == ">":
                return TagScan(tag_name, TagState.CLOSED, self_closing=True, end=index + 1)
            state = TagState.GAP
            continue

        if state is TagState.ATTR_NAME:
            if char.isalnum() or char in _ATTR_NAME_CHARS:
                word += char
                index += 1
                continue
            if char == "=":
                state = TagState.AFTER_EQUALS
                index += 1
                continue
            pending_attr = char.isspace()
            state = TagState.GAP
            # fall through: the character is handled by the gap rules below

        # TagState.GAP
        if char.isspace():
            pass
        elif char.isalpha() or char in "_$":
            state, word, pending_attr = TagState.ATTR_NAME, char, False
        elif char == "=" and pending_attr:
            state = TagState.AFTER_EQUALS
        elif char in _QUOTES:
            state, quote = TagState.STRING, char
        elif char == "{":
            state, depth = TagState.EXPRESSION, 1
        elif char == "/":
            state = TagState.SLASH
        elif char == ">":
            return TagScan(tag_name, TagState.CLOSED, end=index + 1)
        index += 1

    return TagScan(tag_name, state, word=word if state is TagState.ATTR_NAME else "", end=length)


class CursorContextAnalyzer:
    """Classifies the caret as outside a tag, in a prop region, or inside a literal."""

    def __init__(self, max_candidates: int = 64) -> None:
        self.max_candidates = max_candidates

    def analyze(self, text_before_caret: str, caret_line_text: Optional[str] = None) -> CursorContext:
        candidates: List[int] = [match.start() for match in _TAG_OPEN.finditer(text_before_caret)]
        if not candidates:
            return NOT_ELIGIBLE

        newest = True
        for start in reversed(candidates[-self.max_candidates :]):
            scan = scan_tag(text_before_caret, start)
            if scan.state is TagState.INVALID:
                continue
            if not scan.is_open:
                if newest and scan.self_closing and not text_before_caret[scan.end :].strip():
                    return CursorContext(inside_props=False, component_name=_component_name(scan.tag_name))
                newest = False
                continue
            if not scan.in_prop_region:
                return NOT_ELIGIBLE
            component = _component_name(scan.tag_name)
            if component is None:
                return NOT_ELIGIBLE
            partial = _partial_word(scan.word, text_before_caret, caret_line_text)
            return CursorContext(inside_props=True, component_name=component, partial_word=partial)
        return NOT_ELIGIBLE

    def analyze_offset(self, buffer: str, offset: int) -> CursorContext:
        """Analyze a whole buffer with the caret at `offset`."""
        offset = max(0, min(offset, len(buffer)))
        line_start = buffer.rfind("\n", 0, offset) + 1
        line_end = buffer.find("\n", offset)
        if line_end == -1:
            line_end = len(buffer)
        return self.analyze(buffer[:offset], buffer[line_start:line_end])

    def require(self, text_before_caret: str, caret_line_text: Optional[str] = None) -> CursorContext:
        """Like `analyze` but raises MalformedContext when the caret is not in a prop region."""
        context = self.analyze(text_before_caret, caret_line_text)
        if not context.inside_props:
            raise MalformedContext("Caret is not inside a component's prop list")
        return context


def _component_name(tag_name: str) -> Optional[str]:
    return tag_name if _COMPONENT_NAME.fullmatch(tag_name) else None


def _partial_word(word: str, text_before_caret: str, caret_line_text: Optional[str]) -> str:
    left = _TRAILING_WORD.search(word).group(0)
    if not caret_line_text:
        return left
    line_prefix = text_before_caret.rsplit("\n", 1)[-1]
    if not caret_line_text.startswith(line_prefix):
        return left
    right = _LEADING_WORD.match(caret_line_text, len(line_prefix)).group(0)
    return left + right


__all__ = ["CursorContextAnalyzer", "TagScan", "TagState", "scan_tag"]

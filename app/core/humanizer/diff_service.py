"""
Diff Service

Word-level diff between the original and the humanized text, plus the HTML
rendering and word/character counts shown next to a result.
"""
import difflib
import html
import re
from dataclasses import dataclass
from typing import List


_TOKEN_RE = re.compile(r"\s+|\S+")

DIFF_EQUAL = "equal"
DIFF_INSERT = "insert"
DIFF_DELETE = "delete"

_SPAN_CLASSES = {
    DIFF_EQUAL: "",
    DIFF_INSERT: "diff-insert",
    DIFF_DELETE: "diff-delete",
}


@dataclass(frozen=True)
class DiffSpan:
    op: str
    text: str


@dataclass(frozen=True)
class TextStats:
    words: int
    characters: int


def _tokenize(text: str) -> List[str]:
    # Words and whitespace runs, so joining the tokens gives back the text
    return _TOKEN_RE.findall(text)


def _append(spans: List[DiffSpan], op: str, text: str) -> None:
    if not text:
        return
    if spans and spans[-1].op == op:
        spans[-1] = DiffSpan(op, spans[-1].text + text)
    else:
        spans.append(DiffSpan(op, text))


def compute_diff(original: str, result: str) -> List[DiffSpan]:
    """
    Diff `original` against `result`.

    Joining the equal and delete spans gives `original`; joining the equal
    and insert spans gives `result`.
    """
    a = _tokenize(original)
    b = _tokenize(result)
    matcher = difflib.SequenceMatcher(None, a, b, autojunk=False)

    spans: List[DiffSpan] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(spans, DIFF_EQUAL, "".join(a[i1:i2]))
            continue
        if tag in ("delete", "replace"):
            _append(spans, DIFF_DELETE, "".join(a[i1:i2]))
        if tag in ("insert", "replace"):
            _append(spans, DIFF_INSERT, "".join(b[j1:j2]))
    return spans


def render_diff_html(spans: List[DiffSpan]) -> str:
    """Render spans as `<span class="diff-insert|diff-delete|">` elements"""
    return "".join(
        f'<span class="{_SPAN_CLASSES[span.op]}">{html.escape(span.text)}</span>'
        for span in spans
    )


def text_stats(text: str) -> TextStats:
    """Count words and characters the way the result view shows them"""
    stripped = text.strip()
    words = len(stripped.split()) if stripped else 0
    return TextStats(words=words, characters=len(text))

"""
Computed-style values and inline ``style`` attribute helpers.

The cloner works with ordered declarations the same way a browser's
``CSSStyleDeclaration`` exposes them: property name, value and priority
(``"important"`` or ``""``).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple


IMPORTANT = "important"


@dataclass(frozen=True)
class StyleDeclaration:
    name: str
    value: str
    priority: str = ""

    def css(self) -> str:
        if self.priority:
            return f"{self.name}: {self.value} !{self.priority}"
        return f"{self.name}: {self.value}"


class ComputedStyle:
    """Ordered, read-only set of resolved declarations for one element."""

    def __init__(self, declarations: Iterable[StyleDeclaration] = ()):
        self._decls: List[StyleDeclaration] = list(declarations)

    @classmethod
    def from_triples(cls, triples: Iterable[Sequence[str]]) -> "ComputedStyle":
        decls = []
        for t in triples or []:
            name = t[0]
            value = t[1] if len(t) > 1 else ""
            priority = t[2] if len(t) > 2 else ""
            decls.append(StyleDeclaration(str(name), "" if value is None else str(value), priority or ""))
        return cls(decls)

    def __iter__(self) -> Iterator[StyleDeclaration]:
        return iter(self._decls)

    def __len__(self) -> int:
        return len(self._decls)

    def get(self, name: str, default: str = "") -> str:
        for d in reversed(self._decls):
            if d.name == name:
                return d.value
        return default

    @property
    def content(self) -> str:
        return self.get("content").strip()

    def has_generated_content(self) -> bool:
        c = self.content
        return bool(c) and c != "none"


def _split_declarations(text: str) -> List[str]:
    # Split on ';' outside quotes and parentheses, e.g. url("a;b") stays whole
    parts, buf = [], []
    depth = 0
    quote = ""
    for ch in text:
        if quote:
            buf.append(ch)
            if ch == quote:
                quote = ""
            continue
        if ch in ("'", '"'):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        elif ch == ";" and depth == 0:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return [p.strip() for p in parts if p.strip()]


def parse_inline_style(text: Optional[str]) -> Dict[str, Tuple[str, str]]:
    """Parse a ``style`` attribute into name -> (value, priority), last write wins."""
    out: Dict[str, Tuple[str, str]] = {}
    for decl in _split_declarations(text or ""):
        if ":" not in decl:
            continue
        name, value = decl.split(":", 1)
        name = name.strip()
        if not name.startswith("--"):
            name = name.lower()
        value = value.strip()
        priority = ""
        low = value.lower()
        if low.endswith("!important"):
            value = value[: -len("!important")].rstrip()
            priority = IMPORTANT
        if name:
            out.pop(name, None)
            out[name] = (value, priority)
    return out


def serialize_inline_style(decls: Dict[str, Tuple[str, str]]) -> str:
    return "; ".join(StyleDeclaration(n, v, p).css() for n, (v, p) in decls.items()) + (";" if decls else "")


def apply_declarations(existing: Optional[str], computed: Iterable[StyleDeclaration]) -> str:
    """Set each declaration on an inline style, like ``style.setProperty``."""
    decls = parse_inline_style(existing)
    for d in computed:
        # setProperty keeps the original slot of an existing property
        decls[d.name] = (d.value, d.priority)
    return serialize_inline_style(decls)


def format_pseudo_rule(selector: str, pseudo: str, style: ComputedStyle) -> str:
    body = "; ".join(f"{d.name}: {d.value}" for d in style)
    return f"{selector}::{pseudo} {{ {body}; }}"

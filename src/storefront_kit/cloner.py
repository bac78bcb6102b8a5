"""
Clone a rendered element subtree with every element's computed style inlined.

The result renders like the original once detached from the page's
stylesheets. ``:before``/``:after`` content is carried over on a best-effort
basis as rules in a ``<style>`` element appended to the clone root, addressed
by ``nth-child`` position from the root. Those selectors stop matching if the
clone is restructured afterwards.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, List, Union

from bs4 import BeautifulSoup, Tag

from .engine import StyleEngine
from .errors import PseudoElementUnavailable, StructureMismatchError
from .styles import apply_declarations, format_pseudo_rule


log = logging.getLogger(__name__)

PSEUDO_ELEMENTS = ("before", "after")

# Live DOMs expose no element children for these; their markup is inert content
OPAQUE_CONTENT_TAGS = ("noscript", "template")


@dataclass
class Cloned:
    selector: str
    element: Tag
    pseudo_rules: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return True


@dataclass
class NotFound:
    selector: str

    @property
    def found(self) -> bool:
        return False


CloneResult = Union[Cloned, NotFound]


def element_children(tag: Tag) -> List[Tag]:
    return [c for c in tag.children if isinstance(c, Tag)]


def deep_copy(html: str) -> Tag:
    """Parse an element's outer HTML into a detached tag."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.find(True)
    if root is None:
        raise StructureMismatchError("(root)", "source markup produced no element")
    return root.extract()


def child_selector(parent_selector: str, tag_name: str, index: int) -> str:
    return f"{parent_selector} > {tag_name.lower()}:nth-child({index + 1})"


def copy_computed_styles(engine: StyleEngine, source: Any, target: Tag) -> None:
    computed = engine.computed_style(source)
    target["style"] = apply_declarations(target.get("style"), computed)


def _check_pair(engine: StyleEngine, source: Any, target: Tag, path: str) -> None:
    src_tag = engine.tag_name(source).lower()
    if src_tag != (target.name or "").lower():
        raise StructureMismatchError(path, f"source <{src_tag}> vs clone <{target.name}>")


def copy_styles_recursive(engine: StyleEngine, source: Any, target: Tag, path: str) -> int:
    _check_pair(engine, source, target, path)
    copy_computed_styles(engine, source, target)
    copied = 1

    src_children = engine.children(source)
    tgt_children = element_children(target)
    if not src_children and target.name in OPAQUE_CONTENT_TAGS:
        # keep the copied markup as-is, unstyled
        tgt_children = []
    if len(src_children) != len(tgt_children):
        raise StructureMismatchError(
            path, f"source has {len(src_children)} children, clone has {len(tgt_children)}"
        )
    for i, (s, t) in enumerate(zip(src_children, tgt_children)):
        copied += copy_styles_recursive(engine, s, t, child_selector(path, engine.tag_name(s), i))
    return copied


def collect_pseudo_rules(engine: StyleEngine, node: Any, selector: str) -> List[str]:
    rules: List[str] = []
    for pseudo in PSEUDO_ELEMENTS:
        try:
            style = engine.computed_style(node, pseudo)
        except PseudoElementUnavailable as e:
            log.debug(f"Skipping ::{pseudo} of {selector}: {e}")
            continue
        if style.has_generated_content():
            rules.append(format_pseudo_rule(selector, pseudo, style))

    for i, child in enumerate(engine.children(node)):
        rules.extend(collect_pseudo_rules(engine, child, child_selector(selector, engine.tag_name(child), i)))
    return rules


def clone_with_computed_styles(engine: StyleEngine, selector: str) -> CloneResult:
    source = engine.query_selector(selector)
    if source is None:
        log.error(f"Element not found: {selector}")
        return NotFound(selector)

    clone = deep_copy(engine.outer_html(source))
    root_selector = engine.tag_name(source).lower()
    count = copy_styles_recursive(engine, source, clone, root_selector)

    rules = collect_pseudo_rules(engine, source, root_selector)
    if rules:
        style_tag = BeautifulSoup("", "html.parser").new_tag("style")
        style_tag.string = "\n".join(rules) + "\n"
        clone.append(style_tag)

    log.info(f"Cloned {selector}: {count} element(s) styled, {len(rules)} pseudo rule(s)")
    return Cloned(selector=selector, element=clone, pseudo_rules=rules)


def to_html(result: CloneResult) -> str:
    if isinstance(result, Cloned):
        return str(result.element)
    return ""

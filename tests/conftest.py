"""
Shared fixtures.

SoupStyleEngine resolves "computed" styles without a browser: engine
defaults, then matching rules in insertion order, then the element's inline
style attribute. That is enough cascade for the cloner tests.
"""
import copy

import pytest
from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from storefront_kit.engine import StyleEngine
from storefront_kit.errors import InvalidSelectorError, PseudoElementUnavailable
from storefront_kit.styles import ComputedStyle, StyleDeclaration, parse_inline_style


DEFAULT_STYLE = {
    "display": "block",
    "color": "rgb(0, 0, 0)",
    "background-color": "rgba(0, 0, 0, 0)",
    "font-size": "16px",
}


class SoupStyleEngine(StyleEngine):
    def __init__(self, html="", rules=None, pseudo_rules=None, unavailable=(), defaults=None):
        self.rules = rules or {}
        self.pseudo_rules = pseudo_rules or {}
        self.unavailable = set(unavailable)
        self.defaults = DEFAULT_STYLE if defaults is None else defaults
        self.style_queries = 0
        self.load_html(html)

    def load_html(self, html):
        self.soup = BeautifulSoup(html, "html.parser")

    def _matches(self, selector, element):
        return any(m is element for m in self.soup.select(selector))

    def query_selector(self, selector):
        try:
            return self.soup.select_one(selector)
        except SelectorSyntaxError as e:
            raise InvalidSelectorError(str(e)) from e

    def children(self, element):
        return [c for c in element.children if isinstance(c, Tag)]

    def tag_name(self, element):
        return element.name

    def outer_html(self, element):
        return str(element)

    def computed_style(self, element, pseudo=None):
        self.style_queries += 1
        if pseudo:
            if pseudo in self.unavailable:
                raise PseudoElementUnavailable(f"::{pseudo} blocked")
            props = {}
            for selector, decls in self.pseudo_rules.get(pseudo, {}).items():
                if self._matches(selector, element):
                    props.update(decls)
            if not props:
                return ComputedStyle([StyleDeclaration("content", "none")])
            return ComputedStyle(StyleDeclaration(n, v) for n, v in props.items())

        props = dict(self.defaults)
        for selector, decls in self.rules.items():
            if self._matches(selector, element):
                props.update(decls)
        for name, (value, _priority) in parse_inline_style(element.get("style")).items():
            props[name] = value
        return ComputedStyle(StyleDeclaration(n, v) for n, v in props.items())


@pytest.fixture
def soup_engine():
    return SoupStyleEngine


@pytest.fixture
def card_html():
    return (
        "<html><body>"
        "<div id='card' class='product-card'>"
        "<span class='badge'>New</span>"
        "<p class='price'>$10</p>"
        "</div>"
        "<div class='product-card'><span>second</span></div>"
        "</body></html>"
    )


@pytest.fixture
def card_rules():
    return {
        ".product-card": {"padding": "8px", "border-top-width": "1px"},
        "#card > span": {"background-color": "rgb(255, 0, 0)"},
        ".price": {"color": "rgb(0, 128, 0)", "font-size": "20px"},
    }


_PRODUCT = {
    "id": 101,
    "handle": "linen-shirt",
    "title": "Linen Shirt",
    "body_html": "<p>Breathable, relaxed fit</p>",
    "vendor": "Acme",
    "product_type": "Shirts",
    "tags": ["linen", "summer"],
    "published_at": "2024-03-01T10:00:00-05:00",
    "options": [{"name": "Size"}, {"name": "Color"}],
    "images": [
        {"src": "https://cdn.example.com/shirt-1.jpg", "position": 1, "alt": "Front"},
        {"src": "https://cdn.example.com/shirt-2.jpg", "position": 2, "alt": "Back"},
    ],
    "variants": [
        {
            "option1": "S",
            "option2": "White",
            "sku": "LS-S-W",
            "grams": 250,
            "available": True,
            "price": "49.00",
            "compare_at_price": "59.00",
            "requires_shipping": True,
            "taxable": True,
            "featured_image": None,
        },
        {
            "option1": "M",
            "option2": "Navy",
            "sku": "LS-M-N",
            "grams": 260,
            "available": False,
            "price": "49.00",
            "compare_at_price": None,
            "requires_shipping": True,
            "taxable": False,
            "featured_image": {"src": "https://cdn.example.com/shirt-navy.jpg", "alt": "Navy"},
        },
    ],
}


@pytest.fixture
def product():
    return copy.deepcopy(_PRODUCT)


@pytest.fixture
def catalog(product):
    single_option = {
        "id": 202,
        "handle": "gift-mug",
        "title": "Gift Mug",
        "options": [{"name": "Title"}],
        "variants": [{"option1": "Default Title", "sku": "MUG-1", "available": True, "price": "12.50"}],
    }
    placeholder = {"id": None, "handle": "placeholder", "variants": [{"sku": "X"}, {"sku": "Y"}]}
    return {"products": [product, placeholder, single_option]}

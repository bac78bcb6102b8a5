from storefront_kit.styles import (
    ComputedStyle,
    StyleDeclaration,
    apply_declarations,
    format_pseudo_rule,
    parse_inline_style,
)


def test_parse_inline_style_keeps_quoted_semicolons():
    parsed = parse_inline_style('color: red; background-image: url("a;b.png"); margin: 0 !important')
    assert parsed == {
        "color": ("red", ""),
        "background-image": ('url("a;b.png")', ""),
        "margin": ("0", "important"),
    }


def test_parse_inline_style_last_write_wins():
    assert parse_inline_style("color: red; COLOR: blue")["color"] == ("blue", "")


def test_apply_declarations_overrides_and_keeps_others():
    out = apply_declarations(
        "color: blue; margin: 3px",
        [StyleDeclaration("color", "rgb(255, 0, 0)"), StyleDeclaration("padding", "0px", "important")],
    )
    assert parse_inline_style(out) == {
        "color": ("rgb(255, 0, 0)", ""),
        "margin": ("3px", ""),
        "padding": ("0px", "important"),
    }
    assert "padding: 0px !important" in out


def test_apply_declarations_on_empty_style():
    assert apply_declarations(None, [StyleDeclaration("display", "block")]) == "display: block;"
    assert apply_declarations("", []) == ""


def test_computed_style_content():
    style = ComputedStyle.from_triples([["content", '"*"', ""], ["color", "red"]])
    assert style.has_generated_content()
    assert style.get("color") == "red"
    assert len(style) == 2
    assert not ComputedStyle.from_triples([["content", "none"]]).has_generated_content()
    assert not ComputedStyle().has_generated_content()


def test_format_pseudo_rule():
    style = ComputedStyle([StyleDeclaration("content", '"*"'), StyleDeclaration("color", "red")])
    assert format_pseudo_rule("div > p:nth-child(2)", "after", style) == (
        'div > p:nth-child(2)::after { content: "*"; color: red; }'
    )

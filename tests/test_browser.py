"""
SeleniumStyleEngine against a mocked WebDriver (no browser needed).
"""
from unittest.mock import Mock

import pytest
from selenium.common.exceptions import InvalidSelectorException, JavascriptException

from storefront_kit.browser import CHILDREN_JS, COMPUTED_STYLE_JS, SeleniumStyleEngine
from storefront_kit.errors import InvalidSelectorError, PseudoElementUnavailable


@pytest.fixture
def driver():
    return Mock()


def test_query_selector_first_match(driver):
    first, second = Mock(), Mock()
    driver.find_elements.return_value = [first, second]
    assert SeleniumStyleEngine(driver).query_selector(".card") is first


def test_query_selector_no_match(driver):
    driver.find_elements.return_value = []
    assert SeleniumStyleEngine(driver).query_selector("#nope") is None


def test_query_selector_rejects_malformed_selector(driver):
    driver.find_elements.side_effect = InvalidSelectorException("invalid selector")
    with pytest.raises(InvalidSelectorError):
        SeleniumStyleEngine(driver).query_selector("div[")


def test_computed_style_reads_triples(driver):
    el = Mock()
    driver.execute_script.return_value = [["color", "rgb(255, 0, 0)", ""], ["margin-top", "0px", "important"]]
    style = SeleniumStyleEngine(driver).computed_style(el)
    driver.execute_script.assert_called_once_with(COMPUTED_STYLE_JS, el, None)
    assert style.get("color") == "rgb(255, 0, 0)"
    assert [d.priority for d in style] == ["", "important"]


def test_pseudo_query_passes_selector(driver):
    el = Mock()
    driver.execute_script.return_value = [["content", '"x"', ""]]
    style = SeleniumStyleEngine(driver).computed_style(el, "before")
    driver.execute_script.assert_called_once_with(COMPUTED_STYLE_JS, el, ":before")
    assert style.has_generated_content()


def test_pseudo_failure_becomes_unavailable(driver):
    driver.execute_script.side_effect = JavascriptException("blocked")
    with pytest.raises(PseudoElementUnavailable):
        SeleniumStyleEngine(driver).computed_style(Mock(), "after")


def test_element_failure_propagates(driver):
    driver.execute_script.side_effect = JavascriptException("stale")
    with pytest.raises(JavascriptException):
        SeleniumStyleEngine(driver).computed_style(Mock())


def test_children_and_markup(driver):
    el = Mock(tag_name="div")
    el.get_attribute.return_value = "<div></div>"
    driver.execute_script.return_value = None
    engine = SeleniumStyleEngine(driver)
    assert engine.children(el) == []
    driver.execute_script.assert_called_once_with(CHILDREN_JS, el)
    assert engine.tag_name(el) == "div"
    assert engine.outer_html(el) == "<div></div>"

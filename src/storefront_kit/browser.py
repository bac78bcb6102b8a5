from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional
from urllib.parse import quote

from selenium import webdriver
from selenium.common.exceptions import InvalidSelectorException, WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .engine import StyleEngine
from .errors import InvalidSelectorError, PseudoElementUnavailable
from .styles import ComputedStyle


log = logging.getLogger(__name__)

COMPUTED_STYLE_JS = """
const el = arguments[0];
const pseudo = arguments[1];
const cs = window.getComputedStyle(el, pseudo);
const out = [];
for (let i = 0; i < cs.length; i++) {
  const p = cs[i];
  out.push([p, cs.getPropertyValue(p), cs.getPropertyPriority(p)]);
}
return out;
"""

CHILDREN_JS = "return Array.from(arguments[0].children);"


class SeleniumStyleEngine(StyleEngine):
    """StyleEngine backed by a live browser through WebDriver."""

    def __init__(self, driver: webdriver.Remote, timeout: int = 10):
        self.driver = driver
        self.timeout = timeout

    def load_html(self, html: str) -> None:
        self.driver.get("data:text/html;charset=utf-8," + quote(html))
        self._wait_ready()

    def open_url(self, url: str) -> None:
        self.driver.get(url)
        self._wait_ready()

    def _wait_ready(self) -> None:
        WebDriverWait(self.driver, self.timeout).until(EC.presence_of_element_located((By.TAG_NAME, "body")))

    def query_selector(self, selector: str) -> Optional[WebElement]:
        try:
            found = self.driver.find_elements(By.CSS_SELECTOR, selector)
        except InvalidSelectorException as e:
            raise InvalidSelectorError(f"Invalid selector {selector!r}: {e.msg or e}") from e
        return found[0] if found else None

    def children(self, element: WebElement) -> List[WebElement]:
        return list(self.driver.execute_script(CHILDREN_JS, element) or [])

    def tag_name(self, element: WebElement) -> str:
        return element.tag_name

    def outer_html(self, element: WebElement) -> str:
        return element.get_attribute("outerHTML") or ""

    def computed_style(self, element: WebElement, pseudo: Optional[str] = None) -> ComputedStyle:
        arg = f":{pseudo}" if pseudo else None
        try:
            triples = self.driver.execute_script(COMPUTED_STYLE_JS, element, arg)
        except WebDriverException as e:
            if pseudo:
                raise PseudoElementUnavailable(f"::{pseudo}: {e.msg or e}") from e
            raise
        return ComputedStyle.from_triples(triples)


def build_driver(settings: Dict) -> webdriver.Chrome:
    chrome_options = Options()
    if settings.get("browser_headless", True):
        chrome_options.add_argument("--headless=new")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    if settings.get("browser_binary"):
        chrome_options.binary_location = settings["browser_binary"]
    driver = webdriver.Chrome(options=chrome_options)
    driver.set_page_load_timeout(int(settings.get("page_load_timeout") or 10))
    log.debug(f"Started Chrome headless={settings.get('browser_headless', True)}")
    return driver


@contextmanager
def browser_session(settings: Dict) -> Iterator[SeleniumStyleEngine]:
    driver = build_driver(settings)
    try:
        yield SeleniumStyleEngine(driver, timeout=int(settings.get("page_load_timeout") or 10))
    finally:
        driver.quit()

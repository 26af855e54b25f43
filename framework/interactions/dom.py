from selenium.common.exceptions import NoSuchElementException

from framework.core.lookup import LocateResult
from framework.errors import ElementLookupError


def _mask_if_sensitive(name: str, text: str) -> str:
    n = (name or "").lower()
    sensitive_keywords = ("password", "passwd", "pwd", "otp", "token", "secret")
    if any(k in n for k in sensitive_keywords):
        return "****"
    return text


class DomMixin:
    """Author: taobo.zhou
    中文：DOM 交互混入类，提供基础元素操作。
    English: DOM interaction mixin providing basic element operations.
    """

    def _get_locator(self, name):
        return self._locators.get(name)

    def locate(self, name) -> LocateResult:
        """Author: taobo.zhou
        中文：查找元素并以 LocateResult 返回，不抛出未找到异常。
        参数:
            name: 定位器名称。
        """

        by, value = self._get_locator(name)
        self._log.debug(f"[FIND] {self._page_name}.{name} ({by}, {value})")
        try:
            return LocateResult(element=self.__driver.find_element(by, value))
        except NoSuchElementException as exc:
            self._log.warning(f"[FIND][MISS] {self._page_name}.{name} ({by}, {value})")
            return LocateResult(
                error=ElementLookupError(self._page_name, name, (by, value), cause=exc)
            )

    def _find(self, name):
        return self.locate(name).unwrap()

    def open(self, url: str):
        """Author: taobo.zhou
        中文：打开指定 URL。
        参数:
            url: 目标页面地址。
        """

        self._log.info(f"[OPEN] {self._page_name} -> {url}")
        self.__driver.get(url)

    def click(self, name):
        """Author: taobo.zhou
        中文：点击指定元素。
        参数:
            name: 定位器名称。
        """

        self._log.debug(f"[CLICK] {self._page_name}.{name}")
        self._find(name).click()

    def input(self, name, text, clear: bool = False):
        """Author: taobo.zhou
        中文：向元素输入文本，clear 为 True 时先清空。
        参数:
            name: 定位器名称。
            text: 需要输入的文本。
            clear: 输入前是否清空。
        """

        self._log.debug(f"[INPUT] {self._page_name}.{name} <- {_mask_if_sensitive(name, text)}")
        el = self._find(name)
        if clear:
            el.clear()
        el.send_keys(text)

    def is_displayed(self, name) -> bool:
        """Author: taobo.zhou
        中文：返回元素是否可见；元素不存在时抛出 ElementLookupError。
        参数:
            name: 定位器名称。
        """

        displayed = self._find(name).is_displayed()
        self._log.debug(f"[DISPLAYED] {self._page_name}.{name} = {displayed}")
        return displayed

    def get_text(self, name) -> str:
        return self._find(name).text

    def current_url(self) -> str:
        url = self.__driver.current_url
        self._log.debug(f"[URL] {self._page_name} -> {url}")
        return url

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from framework.errors import ElementLookupError


class WaitMixin:
    """Author: taobo.zhou
    中文：等待交互混入类，提供页面与元素等待能力。
    English: Wait interaction mixin providing page and element waits.
    """

    def wait_page_ready(self, timeout=None):
        """Author: taobo.zhou
        中文：等待 document.readyState 为 complete。
        参数:
            timeout: 最大等待时间（秒），为空时使用页面默认值。
        """

        if timeout is None:
            timeout = self._timeout
        WebDriverWait(self.__driver, timeout).until(
            lambda d: d.execute_script("return document.readyState") == "complete"
        )

    def _wait_for(self, name, condition, timeout, label):
        if timeout is None:
            timeout = self._timeout
        by, value = self._get_locator(name)
        self._log.debug(f"[{label}] {self._page_name}.{name} timeout={timeout}s")
        try:
            return WebDriverWait(self.__driver, timeout).until(condition((by, value)))
        except TimeoutException as exc:
            self._log.warning(f"[{label}][TIMEOUT] {self._page_name}.{name} ({by}, {value})")
            raise ElementLookupError(self._page_name, name, (by, value), cause=exc) from exc

    def wait_present(self, name, timeout=None):
        """Author: taobo.zhou
        中文：等待元素出现在 DOM 中（不要求可见）并返回，超时抛出 ElementLookupError。
        参数:
            name: 定位器名称。
            timeout: 最大等待时间（秒），为空时使用页面默认值。
        """

        return self._wait_for(name, EC.presence_of_element_located, timeout, "WAIT_PRESENT")

    def wait_visible(self, name, timeout=None):
        """Author: taobo.zhou
        中文：等待元素可见并返回该元素，超时抛出 ElementLookupError。
        参数:
            name: 定位器名称。
            timeout: 最大等待时间（秒），为空时使用页面默认值。
        """

        return self._wait_for(name, EC.visibility_of_element_located, timeout, "WAIT_VISIBLE")

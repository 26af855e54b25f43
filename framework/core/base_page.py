from framework.interactions.dom import DomMixin
from framework.interactions.wait import WaitMixin
from framework.utils.locator_loader import build_page_locators


class BasePage(
    DomMixin,
    WaitMixin,
):
    """Author: taobo.zhou
    页面基类，提供通用交互与日志能力。页面对象只借用 driver，不负责关闭。
    Base page class providing common interactions and logging.
    """

    page_name = None

    def __init__(self, driver, locator_loader, page_name=None, timeout=10):
        """Author: taobo.zhou
        初始化页面基类并绑定驱动与定位器。

            driver: WebDriver 实例。
            locator_loader: 定位器加载器实例。
            page_name: 页面名称，为空时使用类属性 page_name。
            timeout: 显式等待默认超时（秒）。
        """

        page_name = page_name or self.page_name
        self.__driver = driver
        self._locators = build_page_locators(locator_loader, page_name)
        self._page_name = page_name
        self._timeout = timeout
        self._log = self._init_logger()
        self._bind_driver_to_mixins(driver)

    def _init_logger(self):
        from framework.utils.logger import get_page_logger

        return get_page_logger(self._page_name)

    def _bind_driver_to_mixins(self, driver):
        """Author: taobo.zhou
        将 WebDriver 绑定到各交互混入类。

            driver: WebDriver 实例。
        """

        for mixin in (DomMixin, WaitMixin):
            setattr(self, f"_{mixin.__name__}__driver", driver)

from contextlib import contextmanager

from framework.driver.driver_factory import create_driver
from framework.utils.config_loader import cfg_get
from framework.utils.logger import get_logger

log = get_logger()


class DriverManager:
    """Author: taobo.zhou
    中文：单个场景的浏览器会话管理器，负责创建与释放 WebDriver。
    每个场景持有自己的实例，不在场景之间共享。
    English: Per-scenario browser session owner; creates and disposes one WebDriver.
    """

    def __init__(self, browser="chrome", headless=False, driver_factory=create_driver):
        self._browser = browser
        self._headless = headless
        self._driver_factory = driver_factory
        self._driver = None
        self.created = 0
        self.quit_count = 0

    @property
    def driver(self):
        if self._driver is None:
            raise RuntimeError("Browser session not started")
        return self._driver

    @property
    def active(self) -> bool:
        return self._driver is not None

    def start(self):
        """Author: taobo.zhou
        中文：启动浏览器；已启动时直接返回现有驱动。
        """

        if self._driver is None:
            self._driver = self._driver_factory(self._browser, self._headless)
            self.created += 1
            log.info(f"[SESSION] started browser={self._browser}")
        return self._driver

    def apply_timeouts(self, implicit_wait=None, page_load_timeout=None):
        """仅在配置了数值时设置驱动超时，否则保留驱动默认值。"""
        if implicit_wait is not None:
            self.driver.implicitly_wait(float(implicit_wait))
        if page_load_timeout is not None:
            self.driver.set_page_load_timeout(float(page_load_timeout))

    def quit(self):
        """Author: taobo.zhou
        中文：关闭并清理 WebDriver；未启动或已关闭时不做任何事。
        quit() 自身抛出的异常向上传播。
        """

        if self._driver is None:
            return
        driver, self._driver = self._driver, None
        self.quit_count += 1
        log.info(f"[SESSION] quit browser={self._browser}")
        driver.quit()


@contextmanager
def scenario_session(config, driver_factory=create_driver, on_start=None):
    """Author: taobo.zhou
    中文：为单个场景启动浏览器会话，退出时一定关闭。
    启动之后的任何失败（包括设置超时）都会先关闭浏览器再向上抛出。
    参数:
        config: 全局配置字典。
        driver_factory: 创建 WebDriver 的工厂函数。
        on_start: 会话对象创建后回调，例如挂载到 pytest 节点供截图使用。
    """

    session = DriverManager(
        browser=cfg_get(config, ["project", "browser"], "chrome"),
        headless=bool(cfg_get(config, ["project", "headless"], False)),
        driver_factory=driver_factory,
    )
    if on_start is not None:
        on_start(session)
    session.start()
    try:
        session.apply_timeouts(
            implicit_wait=cfg_get(config, ["selenium", "implicit_wait"]),
            page_load_timeout=cfg_get(config, ["selenium", "page_load_timeout"]),
        )
        yield session
    finally:
        if session.active:
            session.quit()

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from framework.errors import SessionError
from framework.utils.logger import get_logger

log = get_logger()


def create_driver(browser: str = "chrome", headless: bool = False):
    """Author: taobo.zhou
    中文：按浏览器类型创建并返回 WebDriver，不设置任何超时。
    参数:
        browser: 浏览器类型，可为 chrome、edge、firefox。
        headless: 是否无头运行。
    """

    browser = (browser or "chrome").lower()
    log.info(f"[DRIVER] create browser={browser} headless={headless}")

    try:
        if browser == "chrome":
            options = ChromeOptions()
            if headless:
                options.add_argument("--headless=new")
            return webdriver.Chrome(options=options)

        if browser == "edge":
            options = EdgeOptions()
            if headless:
                options.add_argument("--headless=new")
            return webdriver.Edge(options=options)

        if browser == "firefox":
            options = FirefoxOptions()
            if headless:
                options.add_argument("-headless")
            return webdriver.Firefox(options=options)
    except WebDriverException as exc:
        raise SessionError(f"Failed to start {browser}: {exc.msg}") from exc

    raise ValueError(f"Unsupported browser: {browser}")

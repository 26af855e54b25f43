import os

import yaml
from selenium.webdriver.common.by import By

from framework.errors import LocatorError


_BY_MAP = {
    "id": By.ID,
    "name": By.NAME,
    "xpath": By.XPATH,
    "css": By.CSS_SELECTOR,
    "class": By.CLASS_NAME,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
}


class LocatorLoader:
    """Author: taobo.zhou
    定位器加载器，负责读取并校验定位器配置。
    Locator loader that reads and validates locator configurations.
    """

    def __init__(self, yaml_path):
        """Author: taobo.zhou
        初始化定位器加载器。

            yaml_path: 定位器 YAML 文件路径。
        """

        if not os.path.exists(yaml_path):
            raise LocatorError(f"Locator file not found: {yaml_path}")
        with open(yaml_path, "r", encoding="utf-8") as f:
            self.data = yaml.safe_load(f)

    def validate_all(self):
        """Author: taobo.zhou
        校验定位器配置结构与定位方式。
         无。
        """

        if not isinstance(self.data, dict):
            raise LocatorError("Locator root must be a dict")

        for page, locators in self.data.items():
            if not isinstance(locators, dict):
                raise LocatorError(f"Page {page} must be a dict")
            for name, locator in locators.items():
                if not isinstance(locator, dict) or "by" not in locator or "value" not in locator:
                    raise LocatorError(f"{page}.{name} missing by/value")
                _convert_locator(locator["by"], locator["value"])

    def get(self, page, name):
        """Author: taobo.zhou
        获取指定页面的定位器配置。

            page: 页面名称。
            name: 定位器名称。
        """

        try:
            return self.data[page][name]
        except (KeyError, TypeError):
            raise LocatorError(f"Locator not found: {page}.{name}")


class PageLocators:
    """Author: taobo.zhou
    页面定位器代理，转换为 Selenium 定位器。
    Page locator proxy that converts to Selenium locators.
    """

    def __init__(self, loader: LocatorLoader, page_name: str):
        self._loader = loader
        self._page_name = page_name

    @property
    def page_name(self):
        return self._page_name

    def get(self, name):
        """Author: taobo.zhou
        获取页面定位器并转换为 Selenium 定位器 (by, value)。

            name: 定位器名称。
        """

        locator = self._loader.get(self._page_name, name)
        return _convert_locator(locator["by"], locator["value"])


def _convert_locator(locator_type: str, locator_value: str):
    """Author: taobo.zhou
    将定位器类型转换为 Selenium By。

        locator_type: 定位器类型字符串。
        locator_value: 定位器值。
    """

    locator_type = (locator_type or "").lower()
    if locator_type not in _BY_MAP:
        raise LocatorError(f"Unsupported locator type: {locator_type}")
    if not locator_value:
        raise LocatorError(f"Empty locator value for type: {locator_type}")
    return _BY_MAP[locator_type], locator_value


def build_page_locators(locator_loader, page_name: str):
    """Author: taobo.zhou
    构建页面定位器代理或返回原代理。

        locator_loader: 定位器加载器或代理。
        page_name: 页面名称。
    """

    if isinstance(locator_loader, PageLocators):
        return locator_loader
    if page_name is None:
        raise LocatorError("page_name is required to build page locators")
    return PageLocators(locator_loader, page_name)

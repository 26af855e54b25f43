class AutomationError(Exception):
    """Author: taobo.zhou
    中文：自动化框架异常基类。
    English: Base class for automation framework errors.
    """


class ConfigError(AutomationError):
    """配置缺失或格式错误。 Missing or malformed configuration."""


class LocatorError(AutomationError):
    """定位器文件或定位器名称无效。 Invalid locator file or unknown locator name."""


class SessionError(AutomationError):
    """浏览器会话无法创建。 Browser session could not be created."""


class DuplicateStepError(AutomationError):
    """同一步骤短语被重复注册。 The same step phrase was registered twice."""


class ElementLookupError(AutomationError):
    """Author: taobo.zhou
    中文：定位器在当前页面未匹配到任何元素。
    English: A locator matched no element on the current page.
    """

    def __init__(self, page_name, name, locator, cause=None):
        self.page_name = page_name
        self.name = name
        self.locator = locator
        self.cause = cause
        by, value = locator
        super().__init__(f"Element not found: {page_name}.{name} ({by}, {value})")

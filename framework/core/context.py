class ScenarioContext:
    """Author: taobo.zhou
    中文：场景上下文数据对象，保存单个场景内的依赖（配置、浏览器会话、当前页面）。
    每个场景新建一个实例，通过步骤参数显式传递。
    English: Per-scenario context holding config, browser session and current page.
    """

    def __init__(self, config, session, locator_loader, name=None):
        """Author: taobo.zhou
        中文：初始化场景上下文数据。
        参数:
            config: 全局配置字典。
            session: DriverManager 实例。
            locator_loader: 定位器加载器实例。
            name: 场景名称，可为空。
        """

        self.config = config
        self.session = session
        self.locators = locator_loader
        self.name = name
        self.page = None

    @property
    def driver(self):
        return self.session.driver

    def current_page(self):
        if self.page is None:
            raise RuntimeError("No page opened in this scenario yet")
        return self.page

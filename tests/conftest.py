import pytest

from framework.core.context import ScenarioContext
from framework.core.driver_manager import scenario_session
from framework.driver.driver_factory import create_driver
from framework.utils.config_loader import load_config, resolve_paths
from framework.utils.locator_loader import LocatorLoader


@pytest.fixture(scope="session")
def config(pytestconfig):
    """Author: taobo.zhou
    加载并补全全局配置，命令行参数覆盖浏览器设置。
     无。
    """

    cfg = resolve_paths(load_config())

    browser = pytestconfig.getoption("--browser")
    if browser:
        cfg["project"]["browser"] = browser
    if pytestconfig.getoption("--headless"):
        cfg["project"]["headless"] = True

    run_dir = getattr(pytestconfig, "_pw_run_paths", None)
    if run_dir:
        cfg["paths"].update(run_dir)

    return cfg


@pytest.fixture(scope="session")
def locator_loader(config):
    loader = LocatorLoader(config["paths"]["locator"])
    loader.validate_all()
    return loader


@pytest.fixture
def driver_factory():
    return create_driver


@pytest.fixture
def browser_session(config, driver_factory, request):
    """Author: taobo.zhou
    每个场景创建一个浏览器会话，场景结束后关闭（无论成功与否）。

        config: 全局配置字典。
        driver_factory: WebDriver 工厂，单元测试中可替换为假驱动。
        request: pytest 请求对象，用于挂载会话供截图钩子使用。
    """

    def _attach(session):
        request.node._pw_session = session

    with scenario_session(config, driver_factory=driver_factory, on_start=_attach) as session:
        yield session


@pytest.fixture
def scenario_context(config, locator_loader, browser_session, request):
    return ScenarioContext(
        config,
        browser_session,
        locator_loader,
        name=getattr(request.node, "_pw_scenario", request.node.name),
    )

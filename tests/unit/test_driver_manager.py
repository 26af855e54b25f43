from unittest.mock import MagicMock

import pytest

from framework.core.context import ScenarioContext
from framework.core.driver_manager import DriverManager, scenario_session


@pytest.fixture
def factory():
    return MagicMock(name="create_driver", side_effect=lambda browser, headless: MagicMock(name="driver"))


def test_start_creates_driver_once(factory):
    session = DriverManager("chrome", False, driver_factory=factory)

    first = session.start()
    second = session.start()

    assert first is second
    assert session.created == 1
    factory.assert_called_once_with("chrome", False)


def test_quit_is_idempotent(factory):
    session = DriverManager(driver_factory=factory)
    driver = session.start()

    session.quit()
    session.quit()

    driver.quit.assert_called_once_with()
    assert session.quit_count == 1
    assert session.active is False


def test_quit_without_start_is_noop(factory):
    session = DriverManager(driver_factory=factory)

    session.quit()

    factory.assert_not_called()
    assert session.quit_count == 0


def test_quit_error_propagates_and_releases_handle(factory):
    session = DriverManager(driver_factory=factory)
    driver = session.start()
    driver.quit.side_effect = RuntimeError("browser crashed")

    with pytest.raises(RuntimeError):
        session.quit()
    assert session.active is False


def test_driver_before_start_raises(factory):
    with pytest.raises(RuntimeError):
        DriverManager(driver_factory=factory).driver


def test_timeouts_only_applied_when_configured(factory):
    session = DriverManager(driver_factory=factory)
    driver = session.start()

    session.apply_timeouts()
    driver.implicitly_wait.assert_not_called()
    driver.set_page_load_timeout.assert_not_called()

    session.apply_timeouts(implicit_wait=2, page_load_timeout="30")
    driver.implicitly_wait.assert_called_once_with(2.0)
    driver.set_page_load_timeout.assert_called_once_with(30.0)


def test_each_scenario_gets_its_own_session(factory):
    sessions = []
    for _ in range(3):
        session = DriverManager(driver_factory=factory)
        ctx = ScenarioContext({}, session, None)
        session.start()
        sessions.append(ctx.driver)
        session.quit()
        assert (session.created, session.quit_count) == (1, 1)

    assert len({id(d) for d in sessions}) == 3


def test_scenario_context_requires_page(factory):
    ctx = ScenarioContext({}, DriverManager(driver_factory=factory), None, name="s")

    with pytest.raises(RuntimeError):
        ctx.current_page()

    ctx.page = object()
    assert ctx.current_page() is ctx.page


def test_create_driver_headless_chrome(monkeypatch):
    from framework.driver import driver_factory

    chrome = MagicMock(name="Chrome")
    monkeypatch.setattr(driver_factory.webdriver, "Chrome", chrome)

    driver = driver_factory.create_driver("Chrome", headless=True)

    assert driver is chrome.return_value
    options = chrome.call_args.kwargs["options"]
    assert "--headless=new" in options.arguments


def test_create_driver_defaults_to_visible_browser(monkeypatch):
    from framework.driver import driver_factory

    chrome = MagicMock(name="Chrome")
    monkeypatch.setattr(driver_factory.webdriver, "Chrome", chrome)

    driver_factory.create_driver()

    assert chrome.call_args.kwargs["options"].arguments == []


def test_create_driver_wraps_startup_failure(monkeypatch):
    from selenium.common.exceptions import WebDriverException

    from framework.driver import driver_factory
    from framework.errors import SessionError

    monkeypatch.setattr(
        driver_factory.webdriver, "Chrome", MagicMock(side_effect=WebDriverException("no chromedriver"))
    )

    with pytest.raises(SessionError, match="no chromedriver"):
        driver_factory.create_driver("chrome")


def test_create_driver_rejects_unknown_browser():
    from framework.driver.driver_factory import create_driver

    with pytest.raises(ValueError):
        create_driver("netscape")


def _config(**selenium):
    return {"project": {"browser": "chrome", "headless": False}, "selenium": selenium}


def test_scenario_session_creates_and_quits_once(factory):
    with scenario_session(_config(), driver_factory=factory) as session:
        driver = session.driver
        assert session.created == 1

    assert (session.created, session.quit_count) == (1, 1)
    driver.quit.assert_called_once_with()


def test_scenario_session_quits_when_timeout_setup_fails():
    from selenium.common.exceptions import WebDriverException

    driver = MagicMock(name="driver")
    driver.set_page_load_timeout.side_effect = WebDriverException("timeouts not supported")
    attached = []

    with pytest.raises(WebDriverException):
        with scenario_session(
            _config(page_load_timeout=5),
            driver_factory=lambda browser, headless: driver,
            on_start=attached.append,
        ):
            pytest.fail("body must not run when setup fails")

    driver.quit.assert_called_once_with()
    assert attached[0].quit_count == 1
    assert attached[0].active is False


def test_scenario_session_quits_when_scenario_raises(factory):
    with pytest.raises(AssertionError):
        with scenario_session(_config(), driver_factory=factory) as session:
            raise AssertionError("step failed")

    assert (session.created, session.quit_count) == (1, 1)

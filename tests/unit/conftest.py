from unittest.mock import MagicMock

import pytest

from framework.utils.config_loader import PROJECT_ROOT
from framework.utils.locator_loader import LocatorLoader


@pytest.fixture
def locator_file():
    return PROJECT_ROOT / "config" / "locators.yaml"


@pytest.fixture
def loader(locator_file):
    loader = LocatorLoader(str(locator_file))
    loader.validate_all()
    return loader


@pytest.fixture
def element():
    el = MagicMock(name="element")
    el.is_displayed.return_value = True
    el.text = ""
    return el


@pytest.fixture
def fake_driver(element):
    driver = MagicMock(name="driver")
    driver.find_element.return_value = element
    driver.current_url = "https://demo.opencart.com/en-gb?route=account/login"
    driver.execute_script.return_value = "complete"
    return driver

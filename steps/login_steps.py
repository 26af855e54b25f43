"""OpenCart 登录场景的步骤绑定。 Step bindings for the OpenCart login scenarios."""

from pytest_bdd import parsers

from framework.bdd.registry import given, when, then
from framework.utils.config_loader import build_url, cfg_get
from framework.utils.logger import get_logger
from pages.login_page import LoginPage

log = get_logger()


@given("I am on the OpenCart login page")
def i_am_on_the_open_cart_login_page(scenario_context):
    cfg = scenario_context.config
    page = LoginPage(
        scenario_context.driver,
        scenario_context.locators,
        timeout=cfg_get(cfg, ["selenium", "explicit_wait"], 10),
    )
    page.open(build_url(cfg, "login"))
    page.wait_page_ready()
    scenario_context.page = page


@given("I have entered a valid username and password")
def i_have_entered_a_valid_username_and_password(scenario_context):
    valid = scenario_context.config["credentials"]["valid"]
    page = scenario_context.current_page()
    page.enter_email(valid["email"])
    page.enter_password(valid["password"])


@given(parsers.parse('I have entered a invalid "{username}" and "{password}"'))
def i_have_entered_invalid_and(scenario_context, username, password):
    page = scenario_context.current_page()
    page.enter_email(username)
    page.enter_password(password)


@when("I click on the login button")
def i_click_on_the_login_button(scenario_context):
    scenario_context.current_page().click_login_button()


@when('I click on the "Forgotten Password" link')
def i_click_on_the_forgotten_password_link(scenario_context):
    scenario_context.current_page().click_forgotten_password_link()


@then("I should be logged in successfully")
def i_should_be_logged_in_successfully(scenario_context):
    page = scenario_context.current_page()
    page.wait_visible("logout_link")
    assert page.check_logout_link() is True


@then(parsers.parse('I should see an error message indicating "{message}"'))
def i_should_see_an_error_message_indicating(scenario_context, message):
    page = scenario_context.current_page()
    assert page.is_error_alert_displayed() is True
    alert_text = page.get_error_alert_text()
    log.info(f"[ASSERT] error alert text: {alert_text}")
    assert message.lower() in alert_text.lower(), f"expected '{message}' in '{alert_text}'"
    assert page.has_logout_link() is False


@then("I should be redirected to the password reset page")
def i_should_be_redirected_to_the_password_reset_page(scenario_context):
    marker = scenario_context.config["project"]["routes"]["forgotten_marker"]
    url = scenario_context.current_page().get_forgot_pwd_page_url()
    assert marker in url, f"expected '{marker}' in '{url}'"


@then('I should see the "Forgotten Password" link')
def i_should_see_the_forgotten_password_link(scenario_context):
    assert scenario_context.current_page().check_forgot_pwd_link() is True

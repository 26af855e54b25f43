def on_step_failed(item, session, screenshot_dir):
    """
    Scenario lifecycle hook (step failure)

    Current responsibilities:
    - take screenshot of the live browser, when the scenario has one
    """
    from framework.utils.logger import get_logger
    from framework.utils.screenshot import take_screenshot

    if session is None or not session.active:
        return None

    case_id = item.nodeid.replace("/", "_").replace("::", "__")
    try:
        return take_screenshot(session.driver, screenshot_dir, prefix=case_id)
    except Exception as e:
        get_logger().error(f"[SCREENSHOT] failed: {e}")
        return None

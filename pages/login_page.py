from framework.core.base_page import BasePage


class LoginPage(BasePage):
    """Author: taobo.zhou
    中文：OpenCart 登录页面对象，封装登录、忘记密码与登录结果检查。
    所有方法都假定浏览器当前停留在登录页，不做校验；元素不存在时抛出 ElementLookupError。
    English: OpenCart login page object.
    """

    page_name = "LoginPage"

    def __init__(self, driver, locator_loader, timeout=10):
        super().__init__(driver, locator_loader, timeout=timeout)

    def enter_email(self, email: str):
        self.input("email_input", email)

    def enter_password(self, password: str):
        self.input("password_input", password)

    def click_login_button(self):
        self.click("login_button")

    def click_forgotten_password_link(self):
        self.click("forgotten_password_link")

    def check_forgot_pwd_link(self) -> bool:
        return self.is_displayed("forgotten_password_link")

    def check_logout_link(self) -> bool:
        """Author: taobo.zhou
        中文：返回登出链接是否可见。
        找到但隐藏返回 False；完全找不到时抛出 ElementLookupError。
        """

        return self.is_displayed("logout_link")

    def has_logout_link(self) -> bool:
        """登出链接存在且可见；不存在时返回 False 而非抛异常。"""
        result = self.locate("logout_link")
        return result.found and result.element.is_displayed()

    def is_error_alert_displayed(self) -> bool:
        """错误提示出现在 DOM 后返回其可见性；隐藏返回 False，始终未出现抛出 ElementLookupError。"""
        return self.wait_present("error_alert").is_displayed()

    def get_error_alert_text(self) -> str:
        return self.get_text("error_alert")

    def login(self, email: str, password: str):
        """Author: taobo.zhou
        中文：输入邮箱与密码并点击登录，非原子操作。
        参数:
            email: 登录邮箱。
            password: 登录密码。
        """

        self._log.info(f"[LOGIN] {self._page_name} email={email}")
        self.enter_email(email)
        self.enter_password(password)
        self.click_login_button()

    def get_forgot_pwd_page_url(self) -> str:
        return self.current_url()

pytest_plugins = ["tests.pytest_hooks", "steps.login_steps"]

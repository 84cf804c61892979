pytest_plugins = ["enginemocks.pytest_plugin"]

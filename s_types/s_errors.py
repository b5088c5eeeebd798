class ConfigError(Exception):
    def __init__(self, message = "Invalid client configuration"):
        self.message = message
        super().__init__(self.message)


class UnexpectedConfigParam(Exception):
    def __init__(self, key):
        self.key = key
        super().__init__(self.key)

    def __str__(self):
        return repr(f'{self.key} is not a valid config parameter,please use Settings.get_available_params to confirm params')

class CsimError(Exception):
    pass


class ConfigError(CsimError, ValueError):
    pass


class TraceFormatError(CsimError, ValueError):
    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line

"""
Exceptions raised by circulist outside the cursor core.
Cursor operations themselves are total and never raise.
"""


class Error(Exception):
    def __init__(self, message: str, exitcode: int = 1):
        super().__init__(message)
        self.message = message
        self.exitcode = exitcode


class SettingsError(Error):
    pass


class PipelineError(Error):
    pass

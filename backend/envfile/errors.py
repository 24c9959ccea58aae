# Exceptions raised by the envfile package.
from typing import Optional


class EnvFileError(Exception):
    pass


# Raised when a .env source cannot be opened or fully read.
class EnvFileReadError(EnvFileError):
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


# Raised when the environment refuses a name or value, e.g. one with a NUL byte.
class EnvFileApplyError(EnvFileError):
    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key

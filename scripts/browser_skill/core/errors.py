# scripts/browser_skill/core/errors.py


class BrowserSkillError(Exception):
    """Base class for every failure the dispatcher turns into exit code 1"""


class UsageError(BrowserSkillError):
    """Bad command line; raised before any browser is contacted"""


class UnknownActionError(UsageError):
    def __init__(self, action_name: str):
        self.action_name = action_name
        super().__init__(f"Unknown action: {action_name}")


class MissingParameterError(UsageError):
    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"Missing required parameter: --{param_name}")


class TypeMismatchError(UsageError):
    def __init__(self, param_name: str, expected: str, value):
        self.param_name = param_name
        self.expected = expected
        self.value = value
        super().__init__(f"Parameter --{param_name} expects a {expected}, got {value!r}")


class BrowserConnectionError(BrowserSkillError):
    """Browser unreachable, or it exposes no contexts"""


class NoPagesAvailableError(BrowserSkillError):
    def __init__(self):
        super().__init__("No pages found in the browser context.")


class TabIndexOutOfRangeError(BrowserSkillError):
    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Tab index {index} out of bounds ({count} tabs open)")


class HandlerError(BrowserSkillError):
    """Anything raised from inside an action body"""

    def __init__(self, action_name: str, cause: BaseException):
        self.action_name = action_name
        super().__init__(f"Error executing action '{action_name}': {cause}")

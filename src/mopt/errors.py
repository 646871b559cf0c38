## mopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class MoptError(Exception):
    def __init__(self, message: str = "", *, flag=None):
        """Base class for errors raised when the option API itself is misused."""
        super().__init__(message)
        self.flag: str = flag

class MoptFlagError(MoptError, ValueError):
    """Option identity was not a single character."""
    pass

class MoptValueError(MoptError, ValueError):
    pass

from typing import Optional


class CmdLineInputError(Exception):
    """
    The command line cannot be understood

    Without a message, the usage is printed in place of an explanation. A
    hint is printed after either of them.
    """

    def __init__(
        self, message: Optional[str] = None, hint: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint

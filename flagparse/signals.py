# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the flagparse parser.

These signals interrupt parsing without being treated as traditional
exceptions. All signals inherit from `FlowSignal`, which is a subclass of
`BaseException` so they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: The reserved help flag was given; usage should be shown.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in flagparse.

    These are not errors. They stop parsing early and let the caller decide
    what to show and which exit code to use.
    """


class HelpSignal(FlowSignal):
    """Raised when the reserved help flag is found while parsing."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)

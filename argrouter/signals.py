# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Argrouter dispatcher.

These signals are raised to interrupt dispatch without being treated as
traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- SilentAbort: Stop dispatch after the problem has already been reported.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argrouter.

    These are not errors. They're used to stop a dispatch whose outcome
    has already been communicated to the user.
    """


class SilentAbort(FlowSignal):
    """Raised to abort dispatch without printing an additional error message."""

    def __init__(self, message: str = "Silent abort signal received."):
        super().__init__(message)

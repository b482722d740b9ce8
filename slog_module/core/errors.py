"""Exceptions raised by the logger facade"""


class RegistrationError(RuntimeError):
    """A constructor was registered twice or without an implementation."""


class UnknownLoggerError(ValueError):
    """No constructor is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"unknown logger: {name}")
        self.name = name


class LoggerPanic(Exception):
    """
    Raised by panic-level calls after the message has been emitted.

    Unlike fatal calls, which exit the process, a panic can be caught
    further up the stack.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

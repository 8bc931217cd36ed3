class NorError(Exception):
    """Base class for errors that abort an invocation."""


class MalformedStatusError(NorError):
    """Output of the control executable could not be parsed."""


class SubprocessFailure(NorError):
    """An external program failed to launch or exited with an error."""

# chatificial/core/errors.py


class ChatificialError(Exception): ...


class ScratchBufferError(ChatificialError):
    """Overflow content could not be written to the scratch file."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class OperationCancelled(ChatificialError):
    """The owning action was disposed while work was in flight."""


class ClipboardError(ChatificialError):
    """No usable system clipboard."""

"""I/O backends — the Input and Output collaborators of a conversion run.

A backend is chosen once at startup and its reader/writer pair is injected
into :class:`valuecast.services.convert.ConvertService`.
"""

from valuecast.backends.base import (
    Backend,
    InputPort,
    OutputPort,
    UnknownBackendError,
    select_backend,
)

__all__ = ["Backend", "InputPort", "OutputPort", "UnknownBackendError", "select_backend"]

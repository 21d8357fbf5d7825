"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .progress_sink import ProgressSink
from .transport import Transport

__all__ = ["ProgressSink", "Transport"]

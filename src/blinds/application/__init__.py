"""Application layer - use cases and orchestration."""

from .commands import GenerateBlindCommand
from .dtos import BlindOutput
from .records import FrameRecord
from .session import FrameEditor

__all__ = [
    "BlindOutput",
    "FrameEditor",
    "FrameRecord",
    "GenerateBlindCommand",
]

"""Provider call outcomes.

OperationResult is what a channel gets back from one Discord call;
classify_discord_error() builds it from a DiscordApiError or a transport
failure.
"""

from infrastructure.operations.classifiers import classify_discord_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_discord_error",
]

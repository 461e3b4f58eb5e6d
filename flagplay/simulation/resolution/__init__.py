"""Resolution layer - probabilistic outcomes."""

from .catch import CatchProbabilities, CatchResolution, CatchResolver, CatchResult
from .flag_pull import FlagPullAttempt, FlagPullResolver

__all__ = [
    "CatchProbabilities",
    "CatchResolution",
    "CatchResolver",
    "CatchResult",
    "FlagPullAttempt",
    "FlagPullResolver",
]

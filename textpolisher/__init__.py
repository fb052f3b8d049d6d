"""TextPolisher - grammar and spelling correction with a deterministic local fallback.

Corrections go to an OpenAI-compatible chat-completion endpoint when an API key
is configured. Without a key, or whenever the remote call fails, the text is
cleaned up by a fixed set of local normalization rules instead.
"""

__version__ = "1.0.0"
__author__ = "TextPolisher Project"
__license__ = "MIT"

from .local_normalizer import normalize
from .models import CorrectionRequest, CorrectionResult, Failure, Success
from .orchestrator import CorrectionOrchestrator

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "CorrectionOrchestrator",
    "CorrectionRequest",
    "CorrectionResult",
    "Failure",
    "Success",
    "normalize",
]

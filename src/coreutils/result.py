from dataclasses import dataclass
from typing import Any, Callable, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Outcome of a single remote operation that the caller may recover from"""

    description: str
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def to_dict(self) -> dict:
        return {"operation": self.description, "ok": self.ok, "error": self.reason}


def attempt(description: str, operation: Callable, *args, **kwargs) -> OperationResult:
    """
    Run operation and capture its outcome instead of raising

    Args:
        description: Human readable label used in logs and summaries
        operation: Callable to invoke with *args/**kwargs

    Returns:
        OperationResult: ok=True with the return value, or ok=False with the error
    """
    try:
        value = operation(*args, **kwargs)
    except Exception as e:
        logger.error(f"❌ {description} failed: {e}")
        return OperationResult(description=description, ok=False, error=e)

    return OperationResult(description=description, ok=True, value=value)

import logging
import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

_URL_CREDENTIALS_PATTERN = re.compile(r"(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*://)(?P<user>[^:/@\s]+):[^@/\s]+@")


class ProbeLogger:
    """Structured logger for health probe events with sensitive-data masking.

    Example:
        ```python
        probe = ProbeLogger()
        probe.log_degraded(reason="storage_mode_unavailable", context={"policy": "degraded"})
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("tradins_api.probe")
        self._clock = clock or (lambda: datetime.now(UTC))

    def log_storage_mode_unavailable(
        self,
        *,
        error: BaseException,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit an event when the storage mode provider fails."""
        base_context = dict(context or {})
        base_context["error_type"] = type(error).__name__
        base_context["detail"] = mask_secrets_in_text(str(error))
        self._emit(
            action="STORAGE_MODE_UNAVAILABLE",
            level=logging.ERROR,
            context=base_context,
        )

    def log_degraded(
        self,
        *,
        reason: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit an event when a degraded health report is served."""
        base_context = dict(context or {})
        base_context["reason"] = reason
        self._emit(action="HEALTH_DEGRADED", level=logging.WARNING, context=base_context)

    def _emit(self, *, action: str, level: int, context: Mapping[str, Any]) -> None:
        event = {
            "timestamp": self._clock().astimezone(UTC).isoformat(),
            "action": action,
            "context": self.mask_sensitive_data(dict(context)),
        }
        self._logger.log(level, "probe_event action=%s", action, extra={"probe_event": event})

    @classmethod
    def mask_sensitive_data(cls, value: Any, key: str | None = None) -> Any:
        """Recursively mask sensitive values based on key names."""
        if isinstance(value, dict):
            return {k: cls.mask_sensitive_data(v, key=k) for k, v in value.items()}
        if isinstance(value, list):
            return [cls.mask_sensitive_data(item, key=key) for item in value]
        if isinstance(value, tuple):
            return tuple(cls.mask_sensitive_data(item, key=key) for item in value)
        if isinstance(value, str):
            if cls._is_sensitive_key(key):
                return "***MASKED***"
            return mask_secrets_in_text(value)
        return value

    @staticmethod
    def _is_sensitive_key(key: str | None) -> bool:
        if not key:
            return False
        lowered = key.lower()
        sensitive_tokens = ("password", "secret", "token", "api_key", "apikey")
        return any(token in lowered for token in sensitive_tokens)


def mask_secrets_in_text(text: str) -> str:
    """Hide passwords embedded in connection URLs and `key=value` secrets."""
    masked = _URL_CREDENTIALS_PATTERN.sub(r"\g<scheme>\g<user>:***@", text)
    masked = re.sub(r"(?i)(password|token|secret|api_key)\s*[:=]\s*[^,\s&]+", r"\1=***", masked)
    return masked

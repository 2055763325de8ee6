from tradins_api.shared.logging.probe_logger import ProbeLogger, mask_secrets_in_text
from tradins_api.shared.logging.setup import configure_logging

__all__ = [
    "ProbeLogger",
    "configure_logging",
    "mask_secrets_in_text",
]

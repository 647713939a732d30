from .handlers import register_exception_handlers, status_code_for
from .responses import Envelope, ErrorEnvelope, ok, ok_list

__all__ = [
    "register_exception_handlers",
    "status_code_for",
    "Envelope",
    "ErrorEnvelope",
    "ok",
    "ok_list",
]

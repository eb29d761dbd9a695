"""Input-layer public API for key decoding and mode dispatch.

Exports are split between low-level terminal decoding (`read_key`)
and the pure key-to-action mapping used by the runtime loop.
"""

from .keys import Action, action_for_key, handle_key, is_text_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, MOUSE_TOKEN, UNKNOWN_TOKEN, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "MOUSE_TOKEN",
    "UNKNOWN_TOKEN",
    "Action",
    "action_for_key",
    "handle_key",
    "is_text_key",
]

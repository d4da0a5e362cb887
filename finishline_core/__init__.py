from .desk import RegistrationOutcome, ResultsView, show_results, submit_registration
from .names import format_name
from .registry import ParticipantRegistry
from .timecodec import decode_time, encode_time
from .types import DuplicateBibError, Participant, ResultRow
from .validation import RegistrationConfig, RegistrationForm, ResultsWindow

__all__ = [
    "DuplicateBibError",
    "Participant",
    "ParticipantRegistry",
    "RegistrationConfig",
    "RegistrationForm",
    "RegistrationOutcome",
    "ResultRow",
    "ResultsView",
    "ResultsWindow",
    "decode_time",
    "encode_time",
    "format_name",
    "show_results",
    "submit_registration",
]

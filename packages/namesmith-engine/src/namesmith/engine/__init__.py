__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .validator import C_RESERVED_WORDS, is_valid_identifier
from .parser import SUGGESTION_PATTERN, parse_suggestions
from .applicator import SuggestionApplicator, apply_suggestions
from .report import format_report
from .extract import extract_code_block
from .runner import run_pass

__all__ = [
    "C_RESERVED_WORDS",
    "is_valid_identifier",
    "SUGGESTION_PATTERN",
    "parse_suggestions",
    "SuggestionApplicator",
    "apply_suggestions",
    "format_report",
    "extract_code_block",
    "run_pass",
]

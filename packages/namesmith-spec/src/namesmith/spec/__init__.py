# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .models import (
    RenameDirective,
    SymbolKind,
    RenameDiagnostic,
    ApplyResult,
    PassResult,
)
from .protocols import SymbolProtocol, FunctionHandleProtocol
from .errors import (
    NamesmithError,
    RenameRejectedError,
    DuplicateNameError,
    InvalidInputError,
    FunctionDocumentError,
)

__all__ = [
    "RenameDirective",
    "SymbolKind",
    "RenameDiagnostic",
    "ApplyResult",
    "PassResult",
    "SymbolProtocol",
    "FunctionHandleProtocol",
    # Errors
    "NamesmithError",
    "RenameRejectedError",
    "DuplicateNameError",
    "InvalidInputError",
    "FunctionDocumentError",
]

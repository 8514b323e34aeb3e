from typing import Iterable, Optional, Sequence, Tuple

from namesmith.common import bus
from namesmith.needle import L
from namesmith.spec import (
    ApplyResult,
    FunctionHandleProtocol,
    RenameDiagnostic,
    RenameDirective,
    RenameRejectedError,
    SymbolKind,
    SymbolProtocol,
)


class SuggestionApplicator:
    """
    Applies rename directives to one function, in order.

    The symbol collections are fetched again for every directive, so a
    directive sees the names produced by the ones before it. Local variables
    are searched before parameters and only the first match is renamed.
    """

    def _find_symbol(
        self, function: FunctionHandleProtocol, old_name: str
    ) -> Optional[Tuple[SymbolKind, SymbolProtocol]]:
        scan_order: Sequence[Tuple[SymbolKind, Sequence[SymbolProtocol]]] = (
            (SymbolKind.LOCAL, function.get_local_variables()),
            (SymbolKind.PARAMETER, function.get_parameters()),
        )
        for kind, symbols in scan_order:
            for symbol in symbols:
                if symbol.name == old_name:
                    return kind, symbol
        return None

    def apply(
        self,
        function: FunctionHandleProtocol,
        directives: Iterable[RenameDirective],
    ) -> ApplyResult:
        result = ApplyResult()

        for directive in directives:
            found = self._find_symbol(function, directive.old_name)
            if found is None:
                result.skipped.append(directive)
                bus.debug(
                    L.apply.rename.skipped,
                    old_name=directive.old_name,
                    function=function.name,
                )
                continue

            kind, symbol = found
            try:
                symbol.set_name(directive.new_name, symbol.source)
            except RenameRejectedError as e:
                result.diagnostics.append(RenameDiagnostic(directive, kind, str(e)))
                bus.warning(
                    L.apply.rename.rejected,
                    old_name=directive.old_name,
                    new_name=directive.new_name,
                    reason=str(e),
                )
                continue

            result.applied.append(directive)
            result.applied_count += 1

        return result


def apply_suggestions(
    function: FunctionHandleProtocol, directives: Iterable[RenameDirective]
) -> int:
    """Applies `directives` to `function` and returns how many succeeded."""
    return SuggestionApplicator().apply(function, directives).applied_count

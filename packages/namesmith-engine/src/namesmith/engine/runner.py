from namesmith.common import bus
from namesmith.needle import L
from namesmith.spec import FunctionHandleProtocol, PassResult
from .applicator import SuggestionApplicator
from .parser import parse_suggestions
from .report import DEFAULT_WIDTH, format_report


def run_pass(
    function: FunctionHandleProtocol,
    response_text: str,
    report_width: int = DEFAULT_WIDTH,
) -> PassResult:
    """Parses `response_text`, applies it to `function` and renders the report."""
    function_name = function.name
    directives = parse_suggestions(response_text)
    bus.debug(L.apply.run.parsed, count=len(directives), function=function_name)

    if not directives:
        bus.warning(L.apply.run.no_directives, function=function_name)

    result = SuggestionApplicator().apply(function, directives)

    if result.diagnostics:
        bus.warning(
            L.apply.run.partial,
            rejected=len(result.diagnostics),
            function=function_name,
        )
    if directives:
        bus.success(
            L.apply.run.summary,
            applied=result.applied_count,
            total=len(directives),
            function=function_name,
        )

    report = format_report(
        function_name, directives, result.applied_count, width=report_width
    )
    return PassResult(function_name, directives, result, report)

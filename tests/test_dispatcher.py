"""Tests for ToolDispatcher.list / invoke."""

import pytest

from casey_legal_mcp.registry import (
    OperationContext,
    OperationDescriptor,
    OperationExecutionError,
    OperationNotFound,
    OperationRegistry,
    ToolDispatcher,
)
from casey_legal_mcp.registry.operations import create_registry


def _failing_handler(params, context):
    raise RuntimeError("formatter exploded")


def test_list_matches_registry(dispatcher, registry):
    assert dispatcher.list() == registry.list()
    assert dispatcher.list() == dispatcher.list()


def test_unknown_operation(dispatcher):
    """Unknown names fail with the not-found error carrying the name."""
    with pytest.raises(OperationNotFound) as exc_info:
        dispatcher.invoke("nonexistent_tool", {})

    assert exc_info.value.name == "nonexistent_tool"
    assert "nonexistent_tool" in str(exc_info.value)

    response = exc_info.value.to_response()
    assert response["ok"] is False
    assert response["error"]["code"] == "not_found"


def test_empty_operation_name(dispatcher):
    with pytest.raises(OperationNotFound):
        dispatcher.invoke("", {})


def test_handler_error_is_wrapped(context):
    """A raising handler surfaces as an execution error, not a raw exception."""
    registry = OperationRegistry([
        OperationDescriptor(
            name="broken_tool",
            description="Always fails",
            input_schema={"type": "object", "properties": {}},
            handler=_failing_handler,
        )
    ])
    dispatcher = ToolDispatcher(registry, context)

    with pytest.raises(OperationExecutionError) as exc_info:
        dispatcher.invoke("broken_tool", {})

    error = exc_info.value
    assert error.name == "broken_tool"
    assert error.code == "internal_error"
    assert str(error) == "Error executing broken_tool: formatter exploded"
    assert isinstance(error.__cause__, RuntimeError)


def test_unparseable_deadline_date(dispatcher):
    with pytest.raises(OperationExecutionError) as exc_info:
        dispatcher.invoke("monitor_deadlines", {
            "deadline_type": "filing_deadline",
            "date": "not-a-date",
            "description": "Response brief",
        })

    assert exc_info.value.name == "monitor_deadlines"
    assert "not-a-date" in exc_info.value.message


def test_missing_required_argument(dispatcher):
    with pytest.raises(OperationExecutionError) as exc_info:
        dispatcher.invoke("track_evidence", {"evidence_type": "photo"})

    assert "description" in exc_info.value.message


def test_none_arguments_treated_as_empty(dispatcher):
    """Missing required fields still fail cleanly when arguments is None."""
    with pytest.raises(OperationExecutionError):
        dispatcher.invoke("analyze_legal_case", None)


def test_dispatcher_survives_failures(dispatcher):
    """Errors do not poison later calls."""
    with pytest.raises(OperationNotFound):
        dispatcher.invoke("nonexistent_tool", {})

    result = dispatcher.invoke("analyze_legal_case", {"analysis_type": "bias_detection"})
    assert result.text.startswith("Legal Case Analysis Complete")


def test_successive_calls_differ_only_in_id():
    """With the real clock, ids differ while the rest of the report is identical."""
    context = OperationContext(
        case_id="1FDV-23-0001009",
        child_name="Kekoa",
        server_name="casey-legal-mcp-server",
    )
    dispatcher = ToolDispatcher(create_registry(context), context)
    args = {"evidence_type": "document", "description": "court filing"}

    first = dispatcher.invoke("track_evidence", args).text
    second = dispatcher.invoke("track_evidence", args).text

    def split_id(text):
        lines = text.splitlines()
        id_lines = [line for line in lines if line.startswith("Evidence ID: ")]
        rest = [line for line in lines if not line.startswith("Evidence ID: ")]
        return id_lines[0], rest

    first_id, first_rest = split_id(first)
    second_id, second_rest = split_id(second)

    assert first_id != second_id
    assert first_id.startswith("Evidence ID: evidence_")
    assert first_rest == second_rest

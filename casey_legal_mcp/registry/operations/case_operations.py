"""
Case operation registrations.

Case analysis, evidence tracking and deadline monitoring.
"""

import logging
from typing import Any, Dict, List

from ...core.clock import isoformat_millis
from ...core.deadlines import classify_urgency, days_until, parse_deadline
from ...core.findings import generate_findings, generate_next_steps, generate_recommendations
from ...models.legal_enums import (
    AnalysisType,
    DeadlineType,
    EvidenceType,
    FocusArea,
    Priority,
    Relevance,
    enum_values,
)
from ...models.records import (
    CaseAnalysis,
    CaseAnalysisArgs,
    DeadlineArgs,
    DeadlineRecord,
    EvidenceArgs,
    EvidenceRecord,
)
from ...utils.response import or_placeholder, render_report
from ..operation_registry import OperationContext, OperationDescriptor

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

def analyze_legal_case_handler(params: Dict[str, Any], context: OperationContext) -> str:
    """Render the static analysis tables for the requested analysis type."""
    args = CaseAnalysisArgs.model_validate(params)

    analysis = CaseAnalysis(
        case_id=args.case_id or context.case_id,
        analysis_type=args.analysis_type,
        focus_area=args.focus_area,
        timestamp=isoformat_millis(context.clock.now()),
        findings=generate_findings(args.analysis_type, args.focus_area),
        recommendations=generate_recommendations(args.analysis_type, args.focus_area),
        next_steps=generate_next_steps(args.analysis_type, args.focus_area, context.child_name),
    )

    return render_report(
        f"Legal Case Analysis Complete for {analysis.case_id}",
        fields=[
            ("Analysis Type", analysis.analysis_type),
            ("Focus Area", or_placeholder(analysis.focus_area, "General")),
        ],
        sections=[
            ("Key Findings", analysis.findings),
            ("Recommendations", analysis.recommendations),
            ("Next Steps", analysis.next_steps),
        ],
    )


def track_evidence_handler(params: Dict[str, Any], context: OperationContext) -> str:
    args = EvidenceArgs.model_validate(params)
    timestamp = isoformat_millis(context.clock.now())

    evidence = EvidenceRecord(
        **args.model_dump(),
        id=context.ids.new_id("evidence"),
        case_id=context.case_id,
        timestamp=timestamp,
        chain_of_custody=[f"Created by {context.server_name} at {timestamp}"],
    )

    return render_report(
        "Evidence Tracked Successfully",
        fields=[
            ("Evidence ID", evidence.id),
            ("Type", evidence.evidence_type),
            ("Description", evidence.description),
            ("Relevance", or_placeholder(evidence.relevance)),
            ("Date Collected", or_placeholder(evidence.date_collected)),
        ],
        closing=f"This evidence has been added to the Case {evidence.case_id} evidence database.",
    )


def monitor_deadlines_handler(params: Dict[str, Any], context: OperationContext) -> str:
    """Render a deadline with its day count and urgency band."""
    args = DeadlineArgs.model_validate(params)
    now = context.clock.now()

    remaining = days_until(parse_deadline(args.date), now)
    urgency = classify_urgency(remaining)

    deadline = DeadlineRecord(
        **args.model_dump(),
        id=context.ids.new_id("deadline"),
        case_id=context.case_id,
        created=isoformat_millis(now),
        days_until=remaining,
        urgency=urgency.value,
    )
    logger.debug(f"Deadline {deadline.id}: {remaining} days until, {urgency.value}")

    return render_report(
        "Deadline Monitoring Activated",
        fields=[
            ("Deadline ID", deadline.id),
            ("Type", deadline.deadline_type),
            ("Date", deadline.date),
            ("Days Until", deadline.days_until),
            ("Urgency", deadline.urgency),
            ("Priority", or_placeholder(deadline.priority)),
            ("Description", deadline.description),
        ],
        closing=(
            "Automatic alerts will be sent for this deadline. "
            f"Fighting for {context.child_name}'s future!"
        ),
    )


# ============================================================================
# Operation Descriptors
# ============================================================================

def case_operations(case_id: str) -> List[OperationDescriptor]:
    """Descriptors for the case tools, in listing order."""
    return [
        OperationDescriptor(
            name="analyze_legal_case",
            description=f"Analyze Case {case_id} for judicial bias and civil rights violations",
            input_schema={
                "type": "object",
                "properties": {
                    "case_id": {
                        "type": "string",
                        "description": "Federal case identifier",
                        "default": case_id
                    },
                    "analysis_type": {
                        "type": "string",
                        "enum": enum_values(AnalysisType),
                        "description": "Type of legal analysis to perform"
                    },
                    "focus_area": {
                        "type": "string",
                        "enum": enum_values(FocusArea),
                        "description": "Specific area to focus analysis on"
                    }
                },
                "required": ["analysis_type"]
            },
            handler=analyze_legal_case_handler,
        ),
        OperationDescriptor(
            name="track_evidence",
            description=f"Track and organize evidence for Case {case_id}",
            input_schema={
                "type": "object",
                "properties": {
                    "evidence_type": {
                        "type": "string",
                        "enum": enum_values(EvidenceType),
                        "description": "Type of evidence to track"
                    },
                    "description": {
                        "type": "string",
                        "description": "Description of the evidence"
                    },
                    "date_collected": {
                        "type": "string",
                        "description": "Date evidence was collected (ISO format)"
                    },
                    "relevance": {
                        "type": "string",
                        "enum": enum_values(Relevance),
                        "description": "Relevance level to the case"
                    }
                },
                "required": ["evidence_type", "description"]
            },
            handler=track_evidence_handler,
        ),
        OperationDescriptor(
            name="monitor_deadlines",
            description=f"Monitor court deadlines and important dates for Case {case_id}",
            input_schema={
                "type": "object",
                "properties": {
                    "deadline_type": {
                        "type": "string",
                        "enum": enum_values(DeadlineType),
                        "description": "Type of legal deadline"
                    },
                    "date": {
                        "type": "string",
                        "description": "Deadline date (ISO format)"
                    },
                    "description": {
                        "type": "string",
                        "description": "Description of what is due"
                    },
                    "priority": {
                        "type": "string",
                        "enum": enum_values(Priority),
                        "description": "Priority level of the deadline"
                    }
                },
                "required": ["deadline_type", "date", "description"]
            },
            handler=monitor_deadlines_handler,
        ),
    ]

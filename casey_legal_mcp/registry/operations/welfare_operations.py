"""
Welfare operation registrations.

Judicial bias documentation and child welfare assessment.
"""

import logging
from typing import Any, Dict, List

from ...core.clock import isoformat_millis
from ...models.legal_enums import BiasType, ConcernType, Impact, Severity, enum_values
from ...models.records import (
    BiasIncidentArgs,
    BiasIncidentRecord,
    WelfareAssessmentArgs,
    WelfareAssessmentRecord,
)
from ...utils.response import join_or_placeholder, or_placeholder, render_report
from ..operation_registry import OperationContext, OperationDescriptor

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

def document_judicial_bias_handler(params: Dict[str, Any], context: OperationContext) -> str:
    args = BiasIncidentArgs.model_validate(params)

    incident = BiasIncidentRecord(
        **args.model_dump(),
        id=context.ids.new_id("bias_incident"),
        case_id=context.case_id,
        documented=isoformat_millis(context.clock.now()),
    )
    logger.debug(f"Documented bias incident {incident.id} ({incident.bias_type})")

    return render_report(
        "Judicial Bias Incident Documented",
        fields=[
            ("Incident ID", incident.id),
            ("Date", or_placeholder(incident.incident_date)),
            ("Type", incident.bias_type),
            ("Impact", or_placeholder(incident.impact)),
            ("Description", incident.description),
            ("Witnesses", join_or_placeholder(incident.witnesses, "None specified")),
        ],
        closing=(
            f"This incident has been added to the judicial bias documentation for Case {incident.case_id}. "
            f"Justice for {context.child_name} - every instance of bias is documented "
            "and will be used to protect his future."
        ),
    )


def child_welfare_assessment_handler(params: Dict[str, Any], context: OperationContext) -> str:
    """Render a welfare assessment for the child named in the case."""
    args = WelfareAssessmentArgs.model_validate(params)

    assessment = WelfareAssessmentRecord(
        **args.model_dump(),
        id=context.ids.new_id("welfare"),
        case_id=context.case_id,
        child=context.child_name,
        assessed_by=context.server_name,
        timestamp=isoformat_millis(context.clock.now()),
    )

    return render_report(
        "Child Welfare Assessment Completed",
        fields=[
            ("Assessment ID", assessment.id),
            ("Child", assessment.child),
            ("Date", assessment.assessment_date),
            ("Concern Type", assessment.concern_type),
            ("Severity", assessment.severity),
            ("Evidence", or_placeholder(assessment.evidence, "To be gathered")),
            ("Recommended Action", or_placeholder(assessment.recommended_action, "Under review")),
        ],
        closing=(
            f"{assessment.child}'s welfare is our top priority. "
            "This assessment will be used to ensure his safety and well-being."
        ),
    )


# ============================================================================
# Operation Descriptors
# ============================================================================

def welfare_operations(case_id: str, child_name: str) -> List[OperationDescriptor]:
    """Descriptors for the welfare tools, in listing order."""
    return [
        OperationDescriptor(
            name="document_judicial_bias",
            description=f"Document instances of judicial bias in Case {case_id}",
            input_schema={
                "type": "object",
                "properties": {
                    "incident_date": {
                        "type": "string",
                        "description": "Date of bias incident (ISO format)"
                    },
                    "bias_type": {
                        "type": "string",
                        "enum": enum_values(BiasType),
                        "description": "Type of bias observed"
                    },
                    "description": {
                        "type": "string",
                        "description": "Detailed description of the bias incident"
                    },
                    "impact": {
                        "type": "string",
                        "enum": enum_values(Impact),
                        "description": "Impact on case and child welfare"
                    },
                    "witnesses": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Names of witnesses to the bias"
                    }
                },
                "required": ["bias_type", "description"]
            },
            handler=document_judicial_bias_handler,
        ),
        OperationDescriptor(
            name="child_welfare_assessment",
            description=f"Assess {child_name}'s welfare and document concerns",
            input_schema={
                "type": "object",
                "properties": {
                    "assessment_date": {
                        "type": "string",
                        "description": "Date of welfare assessment"
                    },
                    "concern_type": {
                        "type": "string",
                        "enum": enum_values(ConcernType),
                        "description": "Type of welfare concern"
                    },
                    "severity": {
                        "type": "string",
                        "enum": enum_values(Severity),
                        "description": "Severity of the concern"
                    },
                    "evidence": {
                        "type": "string",
                        "description": "Evidence supporting the welfare concern"
                    },
                    "recommended_action": {
                        "type": "string",
                        "description": "Recommended action to address the concern"
                    }
                },
                "required": ["assessment_date", "concern_type", "severity"]
            },
            handler=child_welfare_assessment_handler,
        ),
    ]

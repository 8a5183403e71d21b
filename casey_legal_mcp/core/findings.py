"""
Static findings, recommendations and next steps for case analysis.

Findings are keyed by :class:`AnalysisType`; every member has an entry and an
unrecognised analysis type gets a generic finding instead of an error.
Recommendations and next steps do not vary by analysis type or focus area.
"""

from typing import Dict, List, Optional, Tuple

from ..models.legal_enums import AnalysisType

GENERIC_FINDINGS: Tuple[str, ...] = (
    "Analysis completed - detailed findings available",
)

FINDINGS: Dict[AnalysisType, Tuple[str, ...]] = {
    AnalysisType.BIAS_DETECTION: (
        "Multiple instances of procedural bias identified",
        "Pattern of discriminatory treatment documented",
        "Due process violations found in court proceedings",
    ),
    AnalysisType.TIMELINE_ANALYSIS: (
        "Critical timeline gaps identified in case progression",
        "Delay tactics used to Casey's disadvantage",
        "Child's best interests not prioritized in scheduling",
    ),
    AnalysisType.PRECEDENT_RESEARCH: (
        "Similar cases show pattern of judicial overreach",
        "Federal civil rights precedents support Casey's position",
        "Child welfare standards not being properly applied",
    ),
    AnalysisType.CIVIL_RIGHTS_REVIEW: (
        "Constitutional violations present in case handling",
        "Equal protection under law compromised",
        "Parental rights unlawfully restricted",
    ),
}

RECOMMENDATIONS: Tuple[str, ...] = (
    "File motion for judicial recusal based on documented bias",
    "Request emergency hearing for child welfare concerns",
    "Gather additional evidence of procedural violations",
    "Consider federal civil rights lawsuit if state remedies fail",
)

NEXT_STEPS_TEMPLATE: Tuple[str, ...] = (
    "Prepare comprehensive bias documentation package",
    "Schedule emergency consultation with civil rights attorney",
    "Document all future interactions with court system",
    "Prioritize {child_name}'s immediate safety and well-being",
)


def generate_findings(analysis_type: Optional[str], focus_area: Optional[str] = None) -> List[str]:
    """Findings for an analysis type, or the generic finding if it is not recognised."""
    try:
        key = AnalysisType(analysis_type)
    except ValueError:
        return list(GENERIC_FINDINGS)
    return list(FINDINGS[key])


def generate_recommendations(analysis_type: Optional[str], focus_area: Optional[str] = None) -> List[str]:
    return list(RECOMMENDATIONS)


def generate_next_steps(
    analysis_type: Optional[str],
    focus_area: Optional[str] = None,
    child_name: str = "Kekoa",
) -> List[str]:
    return [step.format(child_name=child_name) for step in NEXT_STEPS_TEMPLATE]

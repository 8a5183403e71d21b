"""Enumerations and pydantic models for the legal case tools."""

from .legal_enums import (
    AnalysisType,
    BiasType,
    ConcernType,
    DeadlineType,
    EvidenceType,
    FocusArea,
    Impact,
    Priority,
    Relevance,
    Severity,
    UrgencyLevel,
    enum_values,
)
from .records import (
    BiasIncidentArgs,
    BiasIncidentRecord,
    CaseAnalysis,
    CaseAnalysisArgs,
    DeadlineArgs,
    DeadlineRecord,
    EvidenceArgs,
    EvidenceRecord,
    WelfareAssessmentArgs,
    WelfareAssessmentRecord,
)

__all__ = [
    # Enumerations
    "AnalysisType",
    "BiasType",
    "ConcernType",
    "DeadlineType",
    "EvidenceType",
    "FocusArea",
    "Impact",
    "Priority",
    "Relevance",
    "Severity",
    "UrgencyLevel",
    "enum_values",

    # Arguments
    "CaseAnalysisArgs",
    "EvidenceArgs",
    "DeadlineArgs",
    "BiasIncidentArgs",
    "WelfareAssessmentArgs",

    # Records
    "CaseAnalysis",
    "EvidenceRecord",
    "DeadlineRecord",
    "BiasIncidentRecord",
    "WelfareAssessmentRecord",
]

"""Enumerations for the categorical fields of the legal case tools.

The values double as the ``enum`` lists of the published input schemas, so
the schemas and the lookup tables in :mod:`casey_legal_mcp.core.findings`
cannot drift apart.
"""

from enum import Enum
from typing import List, Type


class AnalysisType(str, Enum):
    """Kinds of case analysis."""
    BIAS_DETECTION = "bias_detection"
    TIMELINE_ANALYSIS = "timeline_analysis"
    PRECEDENT_RESEARCH = "precedent_research"
    CIVIL_RIGHTS_REVIEW = "civil_rights_review"


class FocusArea(str, Enum):
    """Area an analysis concentrates on."""
    CHILD_WELFARE = "child_welfare"
    PARENTAL_RIGHTS = "parental_rights"
    DUE_PROCESS = "due_process"
    JUDICIAL_CONDUCT = "judicial_conduct"


class EvidenceType(str, Enum):
    DOCUMENT = "document"
    AUDIO_RECORDING = "audio_recording"
    PHOTO = "photo"
    WITNESS_STATEMENT = "witness_statement"
    COURT_TRANSCRIPT = "court_transcript"


class Relevance(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DeadlineType(str, Enum):
    FILING_DEADLINE = "filing_deadline"
    HEARING_DATE = "hearing_date"
    DISCOVERY_DEADLINE = "discovery_deadline"
    APPEAL_DEADLINE = "appeal_deadline"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    NORMAL = "normal"


class BiasType(str, Enum):
    GENDER_BIAS = "gender_bias"
    PROCEDURAL_BIAS = "procedural_bias"
    EVIDENCE_SUPPRESSION = "evidence_suppression"
    DUE_PROCESS_VIOLATION = "due_process_violation"


class Impact(str, Enum):
    SEVERE = "severe"
    MODERATE = "moderate"
    MINOR = "minor"


class ConcernType(str, Enum):
    NEGLECT = "neglect"
    EMOTIONAL_HARM = "emotional_harm"
    EDUCATIONAL_DISRUPTION = "educational_disruption"
    MEDICAL_NEGLECT = "medical_neglect"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    MINOR = "minor"


class UrgencyLevel(str, Enum):
    """Urgency band derived from the number of days until a deadline."""
    URGENT = "URGENT"
    IMPORTANT = "IMPORTANT"
    SCHEDULED = "SCHEDULED"


def enum_values(enum_cls: Type[Enum]) -> List[str]:
    """Return the string values of an enum in definition order."""
    return [member.value for member in enum_cls]

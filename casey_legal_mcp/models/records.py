"""Argument and record models for the legal case tools.

Each ``*Args`` model validates the arguments of one tool. Categorical fields
are plain strings: the published input schemas list the allowed values, but
handlers echo whatever the host sent. Each ``*Record`` model is the transient
record a handler builds by merging the arguments with the case id, a generated
id and a timestamp. Records are rendered to text and then discarded.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Tool arguments
# ============================================================================

class CaseAnalysisArgs(BaseModel):
    """Arguments of ``analyze_legal_case``."""

    case_id: Optional[str] = Field(None, description="Federal case identifier")
    analysis_type: str = Field(..., description="Type of legal analysis to perform")
    focus_area: Optional[str] = Field(None, description="Specific area to focus analysis on")


class EvidenceArgs(BaseModel):
    """Arguments of ``track_evidence``."""

    evidence_type: str = Field(..., description="Type of evidence to track")
    description: str = Field(..., description="Description of the evidence")
    date_collected: Optional[str] = Field(None, description="Date evidence was collected (ISO format)")
    relevance: Optional[str] = Field(None, description="Relevance level to the case")


class DeadlineArgs(BaseModel):
    """Arguments of ``monitor_deadlines``."""

    deadline_type: str = Field(..., description="Type of legal deadline")
    date: str = Field(..., description="Deadline date (ISO format)")
    description: str = Field(..., description="Description of what is due")
    priority: Optional[str] = Field(None, description="Priority level of the deadline")


class BiasIncidentArgs(BaseModel):
    """Arguments of ``document_judicial_bias``."""

    incident_date: Optional[str] = Field(None, description="Date of bias incident (ISO format)")
    bias_type: str = Field(..., description="Type of bias observed")
    description: str = Field(..., description="Detailed description of the bias incident")
    impact: Optional[str] = Field(None, description="Impact on case and child welfare")
    witnesses: Optional[List[str]] = Field(None, description="Names of witnesses to the bias")


class WelfareAssessmentArgs(BaseModel):
    """Arguments of ``child_welfare_assessment``."""

    assessment_date: str = Field(..., description="Date of welfare assessment")
    concern_type: str = Field(..., description="Type of welfare concern")
    severity: str = Field(..., description="Severity of the concern")
    evidence: Optional[str] = Field(None, description="Evidence supporting the welfare concern")
    recommended_action: Optional[str] = Field(None, description="Recommended action to address the concern")


# ============================================================================
# Records
# ============================================================================

class CaseAnalysis(CaseAnalysisArgs):
    case_id: str
    timestamp: str
    findings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)


class EvidenceRecord(EvidenceArgs):
    id: str
    case_id: str
    timestamp: str
    chain_of_custody: List[str] = Field(default_factory=list)


class DeadlineRecord(DeadlineArgs):
    id: str
    case_id: str
    created: str
    status: str = "active"
    days_until: int
    urgency: str


class BiasIncidentRecord(BiasIncidentArgs):
    id: str
    case_id: str
    documented: str
    status: str = "documented"


class WelfareAssessmentRecord(WelfareAssessmentArgs):
    id: str
    case_id: str
    child: str
    assessed_by: str
    timestamp: str

"""Tests for analyze_legal_case, track_evidence and monitor_deadlines."""

from datetime import timedelta

import pytest

from casey_legal_mcp.core.clock import isoformat_millis
from casey_legal_mcp.models import EvidenceArgs


class TestAnalyzeLegalCase:
    """Test case analysis rendering."""

    def test_known_analysis_type(self, dispatcher):
        text = dispatcher.invoke("analyze_legal_case", {
            "analysis_type": "timeline_analysis",
            "focus_area": "due_process",
        }).text

        assert text.startswith("Legal Case Analysis Complete for 1FDV-23-0001009\n\n")
        assert "Analysis Type: timeline_analysis" in text
        assert "Focus Area: due_process" in text
        assert "Key Findings:\nCritical timeline gaps identified in case progression" in text
        assert "Recommendations:\nFile motion for judicial recusal based on documented bias" in text
        assert "Next Steps:\nPrepare comprehensive bias documentation package" in text
        assert "Prioritize Kekoa's immediate safety and well-being" in text

    def test_defaults(self, dispatcher):
        """Case id falls back to the configured case and focus to General."""
        text = dispatcher.invoke("analyze_legal_case", {"analysis_type": "bias_detection"}).text

        assert "for 1FDV-23-0001009" in text
        assert "Focus Area: General" in text

    def test_explicit_case_id(self, dispatcher):
        text = dispatcher.invoke("analyze_legal_case", {
            "case_id": "OTHER-1",
            "analysis_type": "civil_rights_review",
        }).text

        assert text.startswith("Legal Case Analysis Complete for OTHER-1")
        assert "Parental rights unlawfully restricted" in text

    def test_unrecognised_analysis_type_falls_back(self, dispatcher):
        text = dispatcher.invoke("analyze_legal_case", {"analysis_type": "astrology"}).text

        assert "Analysis Type: astrology" in text
        assert "Key Findings:\nAnalysis completed - detailed findings available\n\n" in text


class TestTrackEvidence:
    """Test evidence tracking rendering."""

    def test_placeholders_for_missing_optionals(self, dispatcher):
        text = dispatcher.invoke("track_evidence", {
            "evidence_type": "document",
            "description": "court filing",
        }).text

        assert "Relevance: Not specified" in text
        assert "Date Collected: Not specified" in text
        assert "Type: document" in text
        assert "Description: court filing" in text

    def test_full_arguments(self, dispatcher):
        text = dispatcher.invoke("track_evidence", {
            "evidence_type": "audio_recording",
            "description": "hearing audio",
            "date_collected": "2024-05-02",
            "relevance": "critical",
        }).text

        assert text.startswith("Evidence Tracked Successfully\n\n")
        assert "Evidence ID: evidence_1" in text
        assert "Relevance: critical" in text
        assert "Date Collected: 2024-05-02" in text
        assert text.endswith("This evidence has been added to the Case 1FDV-23-0001009 evidence database.")

    def test_ids_increment(self, dispatcher):
        args = {"evidence_type": "photo", "description": "bruise photo"}

        first = dispatcher.invoke("track_evidence", args).text
        second = dispatcher.invoke("track_evidence", args).text

        assert "Evidence ID: evidence_1" in first
        assert "Evidence ID: evidence_2" in second


class TestMonitorDeadlines:
    """Test days-until and urgency bands."""

    @pytest.mark.parametrize("days,urgency", [
        (1, "URGENT"),
        (7, "URGENT"),
        (8, "IMPORTANT"),
        (30, "IMPORTANT"),
        (31, "SCHEDULED"),
    ])
    def test_urgency_bands(self, dispatcher, fixed_now, days, urgency):
        deadline = isoformat_millis(fixed_now + timedelta(days=days))

        text = dispatcher.invoke("monitor_deadlines", {
            "deadline_type": "hearing_date",
            "date": deadline,
            "description": "Custody hearing",
        }).text

        assert f"Days Until: {days}\n" in text
        assert f"Urgency: {urgency}\n" in text

    def test_date_only_rounds_up(self, dispatcher):
        """A bare date is midnight UTC; 6.5 days away rounds up to 7."""
        text = dispatcher.invoke("monitor_deadlines", {
            "deadline_type": "filing_deadline",
            "date": "2025-03-08",
            "description": "Motion for recusal",
            "priority": "critical",
        }).text

        assert "Days Until: 7" in text
        assert "Urgency: URGENT" in text
        assert "Priority: critical" in text
        assert "Date: 2025-03-08" in text

    def test_past_deadline(self, dispatcher):
        text = dispatcher.invoke("monitor_deadlines", {
            "deadline_type": "appeal_deadline",
            "date": "2025-02-01",
            "description": "Notice of appeal",
        }).text

        assert "Days Until: -28" in text
        assert "Urgency: URGENT" in text

    def test_missing_priority_placeholder(self, dispatcher):
        text = dispatcher.invoke("monitor_deadlines", {
            "deadline_type": "discovery_deadline",
            "date": "2025-06-01",
            "description": "Discovery responses",
        }).text

        assert "Priority: Not specified" in text
        assert "Deadline ID: deadline_1" in text
        assert text.endswith("Automatic alerts will be sent for this deadline. Fighting for Kekoa's future!")


def test_evidence_args_ignore_unknown_fields():
    args = EvidenceArgs.model_validate({
        "evidence_type": "photo",
        "description": "x",
        "unexpected": True,
    })
    assert args.relevance is None

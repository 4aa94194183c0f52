"""Tests for the end-to-end clause analysis pipeline."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from config.settings import settings
from services.clause_analyzer import ClauseAnalyzer
from services.data_models import Document
from utils.validators import InvalidInputError


SAMPLE_TERMS = (
    "Welcome to ExampleApp! By using the service you agree to these terms. "
    "We collect personal data such as your name, email and device identifiers. "
    "We may share your information with third parties and business partners. "
    "We use cookies, analytics and advertising technologies to track your activity. "
    "Location tracking is enabled by default on mobile devices. "
    "Your subscription renews through automatic renewal unless cancelled. "
    "There is no refund for partial months. A cancellation fee applies to early termination. "
    "We are not liable for any damages arising from use of the service. "
    "You waive your rights to participate in a class action. "
    "Any dispute will be resolved through binding arbitration. "
    "These terms are subject to the governing law of Delaware. "
    "We may modify these terms at any time without notice at our sole discretion. "
    "Thanks for reading. Short one. OK?!"
)


@pytest.fixture(scope="module")
def analyzer() -> ClauseAnalyzer:
    return ClauseAnalyzer()


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_sale_of_information_is_high_risk(analyzer):
    text = "We may sell your personal information to third parties at any time without notice."

    clauses = analyzer.analyze("doc-a", text)

    assert len(clauses) == 1
    clause = clauses[0]
    assert clause.clause_text == "We may sell your personal information to third parties at any time without notice"
    assert clause.category == "Data Collection"
    assert clause.risk_score >= 0.95
    assert clause.suggestion.startswith("HIGH RISK:")
    assert clause.document_id == "doc-a"
    assert "Sells user information" in clause.risk_indicators


def test_opt_out_restriction_reaches_override_floor(analyzer):
    clauses = analyzer.analyze("doc-b", "You cannot opt out of this feature.")

    assert len(clauses) == 1
    assert clauses[0].risk_score >= 0.85
    assert clauses[0].clause_text == "You cannot opt out of this feature"


def test_harmless_sentence_produces_no_clause(analyzer):
    text = "This is a short sentence about the weather today in general."

    assert analyzer.analyze("doc-c", text) == []


def test_multiple_patterns_escalate_score(analyzer):
    text = "We use cookies for marketing and arbitration. " * 3

    clauses = analyzer.analyze("doc-d", text)

    assert len(clauses) == 3
    for clause in clauses:
        assert clause.risk_score == pytest.approx(0.8)
        assert clause.category == "Tracking & Analytics"
        assert clause.suggestion.startswith("HIGH RISK:")


def test_output_is_capped_with_ties_in_document_order(analyzer):
    sentences = []
    for i in range(40):
        if i % 2 == 0:
            sentences.append(f"Clause number {i} allows biometric scanning.")
        else:
            sentences.append(f"Clause number {i} mentions cookies only.")

    clauses = analyzer.analyze("doc-e", " ".join(sentences))

    expected = [f"Clause number {i} allows biometric scanning" for i in range(0, 40, 2)]
    expected += [f"Clause number {i} mentions cookies only" for i in (1, 3, 5, 7, 9)]

    assert len(clauses) == 25
    assert [c.clause_text for c in clauses] == expected
    assert [c.risk_score for c in clauses[:20]] == [pytest.approx(0.9)] * 20
    assert [c.risk_score for c in clauses[20:]] == [pytest.approx(0.6)] * 5


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        SAMPLE_TERMS,
        SAMPLE_TERMS * 3,
        "We collect personal data. " * 30,
        "",
        "...!!!???",
    ],
)
def test_output_invariants(analyzer, text):
    clauses = analyzer.analyze("doc", text)

    assert len(clauses) <= 25
    for clause in clauses:
        assert 0.15 < clause.risk_score <= 1.0
        assert len(clause.clause_text) >= 15
        assert clause.suggestion
    scores = [c.risk_score for c in clauses]
    assert scores == sorted(scores, reverse=True)


def test_analysis_is_idempotent(analyzer):
    assert analyzer.analyze("doc", SAMPLE_TERMS) == analyzer.analyze("doc", SAMPLE_TERMS)


def test_short_fragments_never_appear_even_with_keywords(analyzer):
    assert analyzer.analyze("doc", "Biometric. Cookies! Tracking? Uses biometric.") == []


def test_fifteen_character_fragment_is_kept(analyzer):
    clauses = analyzer.analyze("doc", "Uses biometrics.")

    assert [c.clause_text for c in clauses] == ["Uses biometrics"]


def test_input_case_does_not_change_result(analyzer):
    text = "We may sell your personal information to third parties at any time without notice."

    assert analyzer.analyze("doc", text.upper()) == analyzer.analyze("doc", text)


def test_clauses_are_immutable(analyzer):
    clause = analyzer.analyze("doc", "You cannot opt out of this feature.")[0]

    with pytest.raises(AttributeError):
        clause.risk_score = 0.0


# ---------------------------------------------------------------------------
# Boundary errors
# ---------------------------------------------------------------------------


def test_none_text_is_rejected(analyzer):
    with pytest.raises(InvalidInputError):
        analyzer.analyze("doc", None)


def test_non_string_text_is_rejected(analyzer):
    with pytest.raises(ValueError):
        analyzer.analyze("doc", 42)


# ---------------------------------------------------------------------------
# Reports and high-risk query
# ---------------------------------------------------------------------------


REPORT_TEXT = (
    "We may sell your personal information to third parties at any time without notice. "
    "We use cookies for marketing and arbitration. "
    "The weather is pleasant in the spring season."
)


def test_analyze_document_report(analyzer):
    document = Document.from_pasted_text("doc-r", REPORT_TEXT)

    report = analyzer.analyze_document(document)

    assert report.document_id == "doc-r"
    assert report.filename == "Pasted Text"
    assert report.clauses_found == 2
    assert report.high_risk_clauses == 2
    assert report.content_length == len(REPORT_TEXT)
    assert [c.risk_score for c in report.clauses] == [1.0, pytest.approx(0.8)]


def test_report_to_dict_is_serializable(analyzer):
    report = analyzer.analyze_document(Document("doc-s", "terms.txt", REPORT_TEXT))

    data = report.to_dict()

    assert data["filename"] == "terms.txt"
    assert data["clauses_found"] == 2
    assert data["clauses"][0]["risk_score"] == 1.0
    assert data["clauses"][0]["category"] == "Data Collection"
    assert isinstance(data["clauses"][0]["risk_indicators"], list)


def test_high_risk_count_follows_settings(analyzer, monkeypatch):
    monkeypatch.setattr(settings, "HIGH_RISK_THRESHOLD", 0.9)

    report = analyzer.analyze_document(Document.from_pasted_text("doc-t", REPORT_TEXT))

    assert report.high_risk_clauses == 1


def test_find_high_risk_clauses_across_documents(analyzer):
    first = analyzer.analyze("doc-1", "We use cookies for marketing and arbitration.")
    second = analyzer.analyze("doc-2", REPORT_TEXT)

    everything = first + second

    default = ClauseAnalyzer.find_high_risk_clauses(everything)
    strict = ClauseAnalyzer.find_high_risk_clauses(everything, min_risk=0.85)

    assert [c.document_id for c in default] == ["doc-2", "doc-1", "doc-2"]
    assert [c.document_id for c in strict] == ["doc-2"]
    assert ClauseAnalyzer.find_high_risk_clauses(everything, min_risk=1.01) == []

"""
Tests for pairwise score disambiguation
"""
import pytest

from ticket_triage.classification.disambiguator import disambiguate
from ticket_triage.classification.matcher import MatchResult
from ticket_triage.models.schemas import Category


def make_match(scores=None, keywords=None, structural=False):
    """Build a MatchResult with every keyed category present"""
    keyed = [
        Category.ACCOUNT_ACCESS,
        Category.TECHNICAL_ISSUE,
        Category.BILLING_QUESTION,
        Category.FEATURE_REQUEST,
        Category.BUG_REPORT,
    ]
    scores = scores or {}
    keywords = keywords or {}
    return MatchResult(
        scores={c: scores.get(c, 0.0) for c in keyed},
        keywords={c: list(keywords.get(c, [])) for c in keyed},
        has_structural_signal=structural,
    )


class TestBugVsTechnical:

    def test_structural_signal_halves_technical(self):
        match = make_match({Category.BUG_REPORT: 4.0, Category.TECHNICAL_ISSUE: 2.0}, structural=True)
        scores = disambiguate(match)
        assert scores[Category.TECHNICAL_ISSUE] == pytest.approx(1.0)
        assert scores[Category.BUG_REPORT] == pytest.approx(4.0)

    def test_no_structural_signal_halves_bug(self):
        match = make_match({Category.BUG_REPORT: 4.0, Category.TECHNICAL_ISSUE: 2.0})
        scores = disambiguate(match)
        assert scores[Category.BUG_REPORT] == pytest.approx(2.0)
        assert scores[Category.TECHNICAL_ISSUE] == pytest.approx(2.0)

    def test_requires_both_positive(self):
        match = make_match({Category.BUG_REPORT: 4.0}, structural=True)
        assert disambiguate(match)[Category.BUG_REPORT] == pytest.approx(4.0)


class TestBugVsFeature:

    def test_defect_halves_feature(self):
        match = make_match(
            {Category.BUG_REPORT: 2.0, Category.FEATURE_REQUEST: 1.2},
            {Category.BUG_REPORT: ["defect"], Category.FEATURE_REQUEST: ["feature"]},
        )
        scores = disambiguate(match)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(0.6)
        assert scores[Category.BUG_REPORT] == pytest.approx(2.0)

    def test_regression_halves_feature(self):
        match = make_match(
            {Category.BUG_REPORT: 2.5, Category.FEATURE_REQUEST: 1.0},
            {Category.BUG_REPORT: ["regression"], Category.FEATURE_REQUEST: ["suggestion"]},
        )
        assert disambiguate(match)[Category.FEATURE_REQUEST] == pytest.approx(0.5)

    def test_other_bug_keywords_leave_feature(self):
        match = make_match(
            {Category.BUG_REPORT: 1.0, Category.FEATURE_REQUEST: 1.2},
            {Category.BUG_REPORT: ["expected"], Category.FEATURE_REQUEST: ["feature"]},
        )
        assert disambiguate(match)[Category.FEATURE_REQUEST] == pytest.approx(1.2)


class TestFeatureVsBilling:

    def test_fewer_billing_hits_halves_billing(self):
        match = make_match(
            {Category.FEATURE_REQUEST: 2.2, Category.BILLING_QUESTION: 1.2},
            {Category.FEATURE_REQUEST: ["feature", "suggestion"], Category.BILLING_QUESTION: ["invoice"]},
        )
        scores = disambiguate(match)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(2.2)
        assert scores[Category.BILLING_QUESTION] == pytest.approx(0.6)

    def test_fewer_feature_hits_halves_feature(self):
        match = make_match(
            {Category.FEATURE_REQUEST: 0.5, Category.BILLING_QUESTION: 2.7},
            {Category.FEATURE_REQUEST: ["request"], Category.BILLING_QUESTION: ["refund", "payment"]},
        )
        scores = disambiguate(match)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(0.25)
        assert scores[Category.BILLING_QUESTION] == pytest.approx(2.7)

    def test_counts_not_scores_decide(self):
        # billing scores higher but has fewer hits
        match = make_match(
            {Category.FEATURE_REQUEST: 1.3, Category.BILLING_QUESTION: 1.5},
            {Category.FEATURE_REQUEST: ["request", "wish"], Category.BILLING_QUESTION: ["refund"]},
        )
        scores = disambiguate(match)
        assert scores[Category.BILLING_QUESTION] == pytest.approx(0.75)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(1.3)

    def test_tie_leaves_both(self):
        match = make_match(
            {Category.FEATURE_REQUEST: 1.2, Category.BILLING_QUESTION: 1.2},
            {Category.FEATURE_REQUEST: ["feature"], Category.BILLING_QUESTION: ["invoice"]},
        )
        scores = disambiguate(match)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(1.2)
        assert scores[Category.BILLING_QUESTION] == pytest.approx(1.2)


class TestRuleSequence:

    def test_rules_fire_independently(self):
        match = make_match(
            {
                Category.BUG_REPORT: 5.0,
                Category.TECHNICAL_ISSUE: 1.0,
                Category.FEATURE_REQUEST: 1.2,
                Category.BILLING_QUESTION: 1.0,
            },
            {
                Category.BUG_REPORT: ["defect", "regression"],
                Category.TECHNICAL_ISSUE: ["error"],
                Category.FEATURE_REQUEST: ["feature"],
                Category.BILLING_QUESTION: ["charge"],
            },
        )
        scores = disambiguate(match)
        assert scores[Category.BUG_REPORT] == pytest.approx(2.5)
        assert scores[Category.TECHNICAL_ISSUE] == pytest.approx(1.0)
        assert scores[Category.FEATURE_REQUEST] == pytest.approx(0.6)
        # rule 3 tie on hit counts
        assert scores[Category.BILLING_QUESTION] == pytest.approx(1.0)

    def test_input_scores_untouched(self):
        match = make_match({Category.BUG_REPORT: 4.0, Category.TECHNICAL_ISSUE: 2.0})
        disambiguate(match)
        assert match.scores[Category.BUG_REPORT] == 4.0

    def test_key_order_preserved(self):
        match = make_match({Category.BUG_REPORT: 4.0, Category.TECHNICAL_ISSUE: 2.0})
        assert list(disambiguate(match)) == list(match.scores)

import itertools

import pytest

from docvalidator.analysis.models import MatchResult
from docvalidator.categories.models import DocumentCategory
from docvalidator.categories.presets import DRIVERS_LICENSE, UTILITY_BILL
from docvalidator.scoring.engine import HARD_REJECTION_CAP, is_hard_rejection, score

FULL_MATCH = MatchResult(
    keyword_match=True,
    matched_keyword_groups=(("driver", "license"),),
    pattern_match=True,
    matched_patterns=(r"[A-Z]\d{3,}",),
)
NO_MATCH = MatchResult()
KEYWORDS_ONLY = MatchResult(keyword_match=True, matched_keyword_groups=(("utility", "bill"),))

LOOSE = DocumentCategory(
    name="Loose Form",
    id="loose_form",
    expects_document_edges=False,
    minimum_text_density=0.5,
)


class TestScenarios:
    def test_full_positive_signals(self) -> None:
        result = score(DRIVERS_LICENSE, 0.85, 0.3, True, FULL_MATCH, True, 0.45)
        assert result.is_valid is True
        assert result.confidence > 0.7
        assert result.confidence == pytest.approx(0.35 + 0.20 + 0.15 * 0.85 + 0.15 + 0.10 + 0.05)
        assert result.reason == (
            "Document appears to be a valid Driver's License. "
            "Text contains expected keywords. "
            "Expected patterns detected (dates, IDs, etc.)."
        )

    def test_all_negative_signals(self) -> None:
        result = score(DRIVERS_LICENSE, 0.0, 0.0, False, NO_MATCH, False, 0.45)
        assert result.is_valid is False
        assert result.confidence < 0.2
        assert result.confidence == 0.0
        assert result.reason == (
            "Does not appear to be a valid Driver's License. "
            "No expected keywords found in text. "
            "No document edges detected."
        )


class TestRules:
    def test_edge_threshold_is_exclusive(self) -> None:
        at = score(UTILITY_BILL, 0.3, 0.0, False, KEYWORDS_ONLY, True, 0.45)
        above = score(UTILITY_BILL, 0.31, 0.0, False, KEYWORDS_ONLY, True, 0.45)
        assert at.confidence == pytest.approx(0.35 + 0.10 + 0.05)
        assert above.confidence == pytest.approx(0.35 + 0.10 + 0.05 + 0.15 * 0.31)

    def test_half_edge_credit_when_edges_not_expected(self) -> None:
        result = score(LOOSE, 0.0, 0.1, False, NO_MATCH, False, 0.9)
        assert result.confidence == pytest.approx(0.15 * 0.5 + 0.10)

    def test_full_face_credit_when_face_not_expected(self) -> None:
        with_face = score(UTILITY_BILL, 0.9, 0.3, True, NO_MATCH, False, 0.45)
        without_face = score(UTILITY_BILL, 0.9, 0.3, False, NO_MATCH, False, 0.45)
        assert with_face.confidence == without_face.confidence

    def test_missing_face_is_penalized_when_expected(self) -> None:
        result = score(DRIVERS_LICENSE, 0.9, 0.3, False, FULL_MATCH, False, 0.99)
        assert result.is_valid is False
        assert result.reason == (
            "Does not appear to be a valid Driver's License. Expected face/photo not found."
        )
        assert result.confidence == pytest.approx(0.35 + 0.20 + 0.15 * 0.9 + 0.15)

    def test_text_density_saturates(self) -> None:
        low = score(UTILITY_BILL, 0.0, 0.15, False, NO_MATCH, False, 0.45)
        high = score(UTILITY_BILL, 0.0, 0.9, False, NO_MATCH, False, 0.45)
        assert low.confidence == pytest.approx(0.15 * 0.5 + 0.10)
        assert high.confidence == pytest.approx(0.15 + 0.10)

    def test_density_between_near_zero_and_minimum_is_neutral(self) -> None:
        result = score(UTILITY_BILL, 0.0, 0.1, False, NO_MATCH, False, 0.45)
        assert "Almost no text" not in result.reason
        assert result.confidence == pytest.approx(0.10)

    def test_no_keyword_penalty_without_keyword_groups(self) -> None:
        result = score(LOOSE, 0.0, 0.0, False, NO_MATCH, False, 0.45)
        assert "No expected keywords" not in result.reason


class TestHardRejection:
    def test_caps_confidence(self) -> None:
        result = score(UTILITY_BILL, 0.05, 0.0, False, KEYWORDS_ONLY, False, 0.45)
        assert result.confidence == HARD_REJECTION_CAP
        assert result.is_valid is False

    def test_barcode_lifts_rejection(self) -> None:
        result = score(UTILITY_BILL, 0.05, 0.0, False, KEYWORDS_ONLY, True, 0.45)
        assert result.confidence == pytest.approx(0.35 + 0.10 + 0.05)
        assert result.is_valid is True

    def test_rejection_penalty_appended_last(self) -> None:
        result = score(LOOSE, 0.0, 0.0, False, NO_MATCH, False, 0.45)
        assert result.confidence == pytest.approx(0.1)
        assert result.reason == (
            "Does not appear to be a valid Loose Form. "
            "Almost no text detected in image. "
            "Image does not appear to contain a document."
        )

    @pytest.mark.parametrize(
        ("density", "edge", "barcodes", "expected"),
        [
            (0.0, 0.0, False, True),
            (0.019, 0.099, False, True),
            (0.02, 0.0, False, False),
            (0.0, 0.1, False, False),
            (0.0, 0.0, True, False),
        ],
    )
    def test_condition(self, density: float, edge: float, barcodes: bool, expected: bool) -> None:
        assert is_hard_rejection(density, edge, barcodes) is expected


class TestReason:
    def test_low_confidence_without_penalties(self) -> None:
        category = DocumentCategory(name="Receipt", id="receipt", minimum_text_density=0.05)
        result = score(category, 0.5, 0.05, False, NO_MATCH, False, 0.45)
        assert result.confidence == pytest.approx(0.15 * 0.5 + 0.15 * (0.05 / 0.3) + 0.10)
        assert result.is_valid is False
        assert result.reason == "Low confidence that this is a valid Receipt."

    def test_valid_without_reasons_has_headline_only(self) -> None:
        result = score(LOOSE, 0.0, 0.1, False, NO_MATCH, False, 0.1)
        assert result.is_valid is True
        assert result.reason == "Document appears to be a valid Loose Form."

    def test_at_most_two_clauses(self) -> None:
        result = score(DRIVERS_LICENSE, 0.85, 0.3, True, FULL_MATCH, True, 0.45)
        assert "Document edges detected" not in result.reason
        assert result.reason.count(". ") == 2

    def test_threshold_is_inclusive(self) -> None:
        first = score(LOOSE, 0.0, 0.1, False, NO_MATCH, False, 0.9)
        again = score(LOOSE, 0.0, 0.1, False, NO_MATCH, False, first.confidence)
        assert first.is_valid is False
        assert again.is_valid is True


class TestProperties:
    def test_confidence_always_in_range(self) -> None:
        grid = itertools.product(
            (DRIVERS_LICENSE, UTILITY_BILL, LOOSE),
            (0.0, 0.3, 1.0),
            (0.0, 0.05, 1.0),
            (False, True),
            (NO_MATCH, FULL_MATCH),
            (False, True),
        )
        for category, edge, density, face, content, barcodes in grid:
            result = score(category, edge, density, face, content, barcodes, 0.45)
            assert 0.0 <= result.confidence <= 1.0
            assert result.is_valid is (result.confidence >= 0.45)

    def test_identical_inputs_give_identical_results(self) -> None:
        first = score(DRIVERS_LICENSE, 0.6, 0.2, True, FULL_MATCH, False, 0.45)
        second = score(DRIVERS_LICENSE, 0.6, 0.2, True, FULL_MATCH, False, 0.45)
        assert first == second

"""Tests for LibraryCopyNameGenerator domain service."""

from itertools import islice

from mediashelf.domain.library.services.library_name_generator import LibraryCopyNameGenerator


class TestLibraryCopyNameGenerator:
    def test_candidate_order(self) -> None:
        candidates = list(islice(LibraryCopyNameGenerator().candidates("Base"), 4))
        assert candidates == ["Base", "Base (copy)", "Base (copy 2)", "Base (copy 3)"]

    def test_free_name_is_kept(self) -> None:
        assert LibraryCopyNameGenerator().generate("Base", lambda name: False) == "Base"

    def test_skips_taken_names(self) -> None:
        taken = {"Base", "Base (copy)", "Base (copy 2)"}
        result = LibraryCopyNameGenerator().generate("Base", taken.__contains__)
        assert result == "Base (copy 3)"

    def test_truncates_base_to_fit_suffix(self) -> None:
        generator = LibraryCopyNameGenerator(max_length=12)
        taken = {"Long library"}

        result = generator.generate("Long library", taken.__contains__)

        assert result == "Long (copy)"
        assert len(result) <= 12

    def test_truncated_candidates_stay_distinct(self) -> None:
        generator = LibraryCopyNameGenerator(max_length=20)
        base = "y" * 20
        candidates = list(islice(generator.candidates(base), 12))

        assert len(set(candidates)) == len(candidates)
        assert all(len(name) <= 20 for name in candidates)

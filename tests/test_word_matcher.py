from __future__ import annotations

from meeting_bingo.services.word_matcher import WORD_ALIASES, detect, detect_with_aliases

WORDS = ["sprint", "standup", "backlog", "agile"]


class TestDetect:
    def test_single_word(self) -> None:
        assert detect("We had a sprint planning today", WORDS) == ["sprint"]

    def test_multiple_words_in_candidate_order(self) -> None:
        assert detect("standup first, then the sprint", WORDS) == ["sprint", "standup"]

    def test_case_insensitive(self) -> None:
        assert detect("SPRINT planning STANDUP", WORDS) == ["sprint", "standup"]

    def test_skips_already_found_case_insensitively(self) -> None:
        assert detect("sprint and standup", WORDS, {"SPRINT"}) == ["standup"]

    def test_no_partial_word_match(self) -> None:
        assert detect("we are sprinting", ["sprint"]) == []
        assert detect("the backlogs grew", ["backlog"]) == []

    def test_phrase_match(self) -> None:
        detected = detect("we have a daily standup meeting", ["stand up", "daily standup"])
        assert detected == ["daily standup"]

    def test_phrase_needs_whole_words(self) -> None:
        assert detect("our lead timeline slipped", ["lead time"]) == []

    def test_phrase_with_punctuation_in_between(self) -> None:
        assert detect("story... points!", ["story points"]) == ["story points"]

    def test_returns_original_casing(self) -> None:
        assert detect("sprint and standup", ["Sprint", "STANDUP"]) == ["Sprint", "STANDUP"]

    def test_regex_special_characters_are_literal(self) -> None:
        assert detect("we use node.js daily", ["node.js", "C++"]) == ["node.js"]
        assert detect("node-js", ["node.js"]) == ["node.js"]
        assert detect("anything at all", ["(.*)"]) == []

    def test_punctuated_candidates(self) -> None:
        words = ["CI/CD", "A/B test", "Says Y'all", "self-organizing"]
        assert detect("the ci cd pipeline", words) == ["CI/CD"]
        assert detect("an a/b test ran", words) == ["A/B test"]
        assert detect("he says y'all again", words) == ["Says Y'all"]
        assert detect("a self organizing team", words) == ["self-organizing"]

    def test_empty_inputs(self) -> None:
        assert detect("", WORDS) == []
        assert detect("some transcript", []) == []


class TestDetectWithAliases:
    def test_direct_match(self) -> None:
        assert detect_with_aliases("we discussed ci/cd", ["ci/cd", "mvp"]) == ["ci/cd"]

    def test_alias_match(self) -> None:
        assert detect_with_aliases("we need continuous integration", ["ci/cd"]) == ["ci/cd"]

    def test_mvp_alias(self) -> None:
        assert detect_with_aliases("we need a minimum viable product", ["MVP"]) == ["MVP"]

    def test_roi_alias(self) -> None:
        assert detect_with_aliases("what is the return on investment", ["ROI"]) == ["ROI"]

    def test_reported_once_when_literal_and_alias_both_present(self) -> None:
        detected = detect_with_aliases("ci cd continuous integration", ["ci/cd"])
        assert detected == ["ci/cd"]

    def test_alias_skipped_when_already_found(self) -> None:
        assert detect_with_aliases("continuous integration is important", ["ci/cd"], {"ci/cd"}) == []

    def test_direct_matches_come_before_alias_matches(self) -> None:
        detected = detect_with_aliases("sprint with continuous deployment", ["CI/CD", "sprint"])
        assert detected == ["sprint", "CI/CD"]

    def test_alias_needs_whole_words(self) -> None:
        assert detect_with_aliases("the cicds are green", ["ci/cd"]) == []

    def test_words_without_aliases(self) -> None:
        assert detect_with_aliases("sprint planning", ["sprint", "backlog"]) == ["sprint"]


class TestAliasTable:
    def test_keys_are_normalised(self) -> None:
        assert "continuous integration" in WORD_ALIASES["ci cd"]
        assert "cicd" in WORD_ALIASES["ci cd"]
        assert "minimum viable product" in WORD_ALIASES["mvp"]
        assert "return on investment" in WORD_ALIASES["roi"]

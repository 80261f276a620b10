from todoapp.ml import (
    categorize_task,
    estimate_completion_time,
    priority_label,
    priority_level,
    suggest_priority,
)


class TestCategorize:
    def test_most_keyword_hits_wins(self):
        assert categorize_task("Prepare presentation for client meeting") == "work"

    def test_description_is_considered(self):
        assert categorize_task("Friday", "pay the electricity bill") == "finance"

    def test_tie_goes_to_first_declared_category(self):
        # "gym" is both a personal and a health keyword
        assert categorize_task("Go to the gym") == "personal"

    def test_keywords_match_whole_words_only(self):
        # "homework" must not count as "work"
        assert categorize_task("Finish homework") == "education"

    def test_no_match_is_uncategorized(self):
        assert categorize_task("Water the plants") == "uncategorized"


class TestPriority:
    def test_high_priority_words(self):
        assert suggest_priority("URGENT: fix the login bug") == 1

    def test_medium_priority_phrase(self):
        assert suggest_priority("Renew passport", "needs doing next week") == 2

    def test_default_is_low(self):
        assert suggest_priority("Water the plants") == 3

    def test_label_mapping(self):
        assert priority_label(1) == "high"
        assert priority_label(2) == "medium"
        assert priority_label(3) == "low"
        assert priority_label(None) == "low"
        assert priority_level("HIGH") == 1
        assert priority_level("medium") == 2
        assert priority_level(None) == 3


class TestEstimate:
    def test_quick_task(self):
        assert estimate_completion_time("Quick reply to Tom") == 15

    def test_complex_task(self):
        assert estimate_completion_time("Implement login flow") == 60

    def test_medium_words_keep_the_base_estimate(self):
        assert estimate_completion_time("Review document") == 30

    def test_explicit_minutes_override_keywords(self):
        assert estimate_completion_time("Quick standup", "takes 45 min") == 45

    def test_hours_are_converted(self):
        assert estimate_completion_time("Design workshop 2 hours") == 120
        assert estimate_completion_time("Gardening 3hr") == 180

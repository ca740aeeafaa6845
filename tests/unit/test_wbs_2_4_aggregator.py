"""
WBS 2.4: Aggregator Tests

- Retrieved bodies are joined in order, each followed by a newline
- Skipped items leave no placeholder
- Nothing retrieved yields the "No detailed content available." sentinel
"""

from confluence_bridge.pipeline.aggregator import NO_DETAILED_CONTENT, aggregate
from confluence_bridge.pipeline.models import Content, SkippedFailure


class TestAggregate:
    """Tests for aggregate()."""

    def test_single_content_ends_with_newline(self) -> None:
        assert aggregate([Content("A", "<p>X</p>")]) == "<p>X</p>\n"

    def test_contents_joined_in_input_order(self) -> None:
        outcomes = [Content("B", "second"), Content("A", "first")]

        assert aggregate(outcomes) == "second\nfirst\n"

    def test_skipped_items_are_absent(self) -> None:
        outcomes = [
            Content("A", "a"),
            SkippedFailure("B", 404, "Not Found"),
            Content("C", "c"),
        ]

        assert aggregate(outcomes) == "a\nc\n"

    def test_empty_sequence_returns_sentinel(self) -> None:
        assert aggregate([]) == NO_DETAILED_CONTENT

    def test_all_skipped_returns_sentinel(self) -> None:
        outcomes = [
            SkippedFailure("A", 500, "boom"),
            SkippedFailure("B", None, "empty content"),
        ]

        assert aggregate(outcomes) == "No detailed content available."

    def test_sentinel_is_not_empty_string(self) -> None:
        assert aggregate([]) != ""

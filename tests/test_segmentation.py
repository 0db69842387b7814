"""
Tests for the block segmenter.
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


def make_lines(*specs):
    """Lines from (text, indent) pairs with consecutive indices."""
    from syllabus_parser.preprocessing import Line
    return [Line(text=text, original_index=i, indent=indent) for i, (text, indent) in enumerate(specs)]


class TestSegmentBlocks:
    """Tests for segment_blocks."""

    def test_empty(self):
        from syllabus_parser.segmentation import segment_blocks

        assert segment_blocks([]) == []

    def test_first_line_opens_block_even_if_indented(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("  Quiz 1", 4)))

        assert len(blocks) == 1
        assert blocks[0].source_line_indices == (0,)

    def test_trailing_comma_joins(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Homework 3: read chapters 4,", 0), ("5 and 6", 0)))

        assert len(blocks) == 1
        assert blocks[0].text == "Homework 3: read chapters 4, 5 and 6"
        assert blocks[0].source_line_indices == (0, 1)

    @pytest.mark.parametrize("ending", [";", "-"])
    def test_other_trailing_joiners(self, ending):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Reading" + ending, 0), ("pages 10-20", 0)))

        assert len(blocks) == 1

    def test_indented_line_joins(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Project proposal", 0), ("due Oct 1", 4)))

        assert blocks[0].text == "Project proposal due Oct 1"

    def test_one_space_indent_does_not_join(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Quiz 1", 0), ("Quiz 2", 1)))

        assert len(blocks) == 2

    @pytest.mark.parametrize("text", ["(worth 10%)", ": submit online"])
    def test_leading_joiner_joins(self, text):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Essay 1", 0), (text, 0)))

        assert len(blocks) == 1

    def test_unrelated_lines_split(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(("Quiz 1 Sept 2", 0), ("Quiz 2 Sept 9", 0)))

        assert [b.source_line_indices for b in blocks] == [(0,), (1,)]

    @pytest.mark.parametrize("text", ["- Quiz 2", "* Quiz 2", "• Quiz 2", "b) Quiz 2", "(b) Quiz 2", "2. Quiz 2"])
    def test_list_item_beats_continuation(self, text):
        from syllabus_parser.segmentation import segment_blocks

        # trailing comma and deep indent would both join, but a list item always starts a block
        blocks = segment_blocks(make_lines(("Quiz 1 on limits,", 0), (text, 6)))

        assert len(blocks) == 2
        assert blocks[1].text == text

    def test_continuation_checks_last_member_line(self):
        from syllabus_parser.segmentation import segment_blocks

        blocks = segment_blocks(make_lines(
            ("Lab 1 writeup,", 0),
            ("submit online", 4),
            ("Lab 2 writeup", 0),
        ))

        assert [b.source_line_indices for b in blocks] == [(0, 1), (2,)]


class TestIsContinuation:
    """Tests for the continuation predicate."""

    def test_plain_line_is_not_continuation(self):
        from syllabus_parser.preprocessing import Line
        from syllabus_parser.segmentation import is_continuation

        assert not is_continuation("Quiz 1", Line("Quiz 2", 1, 0))

    def test_bullet_is_never_continuation(self):
        from syllabus_parser.preprocessing import Line
        from syllabus_parser.segmentation import is_continuation

        assert not is_continuation("Quiz 1,", Line("- Quiz 2", 1, 8))

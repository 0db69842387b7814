"""
Block Segmenter - Merges wrapped syllabus lines into candidate assignment blocks.

A block is one logical paragraph: a line plus any continuation lines that
follow it. Segmentation is a fold over the filtered lines whose single
accumulator is the open block; it knows nothing about dates or types.
"""
import re
from functools import reduce
from typing import List, Sequence, Tuple
from dataclasses import dataclass

from ..preprocessing import Line


# Starts a new list item: bullet, lettered sub-item "a)", tag "(word)", "1."
NEW_ITEM_PATTERN = re.compile(r'^(?:[-*•]|[a-z]\)|\(\w+\)|\d+\.)')
TRAILING_JOINER_PATTERN = re.compile(r'[,;-]$')
LEADING_JOINER_PATTERN = re.compile(r'^[(:]')
MIN_CONTINUATION_INDENT = 2


@dataclass(frozen=True)
class Block:
    """One or more merged source lines treated as a single candidate."""
    text: str
    source_line_indices: Tuple[int, ...]


def starts_new_item(line: Line) -> bool:
    return bool(NEW_ITEM_PATTERN.match(line.text))


def is_continuation(previous_text: str, line: Line) -> bool:
    """
    Decide whether ``line`` continues the block ending in ``previous_text``.

    List-item starts always open a new block, ahead of every joining rule.
    """
    if starts_new_item(line):
        return False
    if TRAILING_JOINER_PATTERN.search(previous_text):
        return True
    if line.indent >= MIN_CONTINUATION_INDENT:
        return True
    if LEADING_JOINER_PATTERN.match(line.text):
        return True
    return False


def _close(open_lines: Tuple[Line, ...]) -> Block:
    return Block(
        text=" ".join(line.text for line in open_lines),
        source_line_indices=tuple(line.original_index for line in open_lines)
    )


def _step(state, line: Line):
    blocks, open_lines = state
    if open_lines and is_continuation(open_lines[-1].text, line):
        return blocks, open_lines + (line,)
    if open_lines:
        blocks.append(_close(open_lines))
    return blocks, (line,)


def segment_blocks(lines: Sequence[Line]) -> List[Block]:
    """Fold filtered lines into blocks. The first line always opens a block."""
    blocks, open_lines = reduce(_step, lines, ([], ()))
    if open_lines:
        blocks.append(_close(open_lines))
    return blocks

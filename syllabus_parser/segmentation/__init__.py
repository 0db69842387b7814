"""
Segmentation Module - Groups continuation lines into candidate blocks.
"""
from .segmenter import Block, segment_blocks, is_continuation, starts_new_item

__all__ = ['Block', 'segment_blocks', 'is_continuation', 'starts_new_item']

"""Utility functions for ydt."""

from .text_utils import contains_cjk_ideograph, flatten_text, is_cjk_ideograph

__all__ = [
    "contains_cjk_ideograph",
    "flatten_text",
    "is_cjk_ideograph",
]

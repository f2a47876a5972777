# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter steps: the opaque ``text -> text`` capabilities a chain is built from."""

from __future__ import annotations

from paddedcell.steps.base import BaseStep, FunctionStep
from paddedcell.steps.command import CommandError, CommandStep
from paddedcell.steps.contracts import Step, TextTransform
from paddedcell.steps.generic import (
    IndentStep,
    IndentStyle,
    JsonStep,
    ReplaceRegexStep,
    ReplaceStep,
    TrimTrailingWhitespaceStep,
)
from paddedcell.steps.registry import StepRegistry

__all__ = [
    "BaseStep",
    "CommandError",
    "CommandStep",
    "FunctionStep",
    "IndentStep",
    "IndentStyle",
    "JsonStep",
    "ReplaceRegexStep",
    "ReplaceStep",
    "Step",
    "StepRegistry",
    "TextTransform",
    "TrimTrailingWhitespaceStep",
]

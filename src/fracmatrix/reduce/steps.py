"""Step sinks: where the reduction engines report elementary operations."""
from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable
from typing import Any

from fracmatrix.config import TRANSCRIPT_STYLES, default_transcript_style


REF_HEADER = "------- REF -------"
RREF_HEADER = "------- RREF -------"
HEADERS = (REF_HEADER, RREF_HEADER)


@dataclass(frozen=True)
class Step:
    """
    One elementary row operation.

    op:      "+" | "-" | "*" | "/"
    target:  0-based logical row that is rewritten
    operand: source row index for "+" / "-", scalar factor for "*" / "/"
    """

    op: str
    target: int
    operand: Any


def _render_factor(factor: Any, style: str) -> str:
    if style == "debug":
        return repr(factor)
    text = str(factor)
    return f"({text})" if " " in text else text


def format_step(step: Step, style: str = "display") -> str:
    """``R2 - R1 → R2`` / ``R1 * 3 → R1``; rows are numbered from 1."""
    row = step.target + 1
    if step.op in ("+", "-"):
        rhs = f"R{step.operand + 1}"
    else:
        rhs = _render_factor(step.operand, style)
    return f"R{row} {step.op} {rhs} → R{row}"


class StepSink:
    """Receives phase headers and steps in the order they are applied."""

    def header(self, phase: str) -> None:
        pass

    def record(self, op: str, target: int, operand: Any) -> None:
        pass


class NullSink(StepSink):
    """Discards everything; used by the silent engine variants."""


class TranscriptSink(StepSink):
    """Collects a human-readable transcript (``lines``) and the raw ``steps``."""

    def __init__(self, style: str | None = None):
        if style is None:
            style = default_transcript_style()
        if style not in TRANSCRIPT_STYLES:
            raise ValueError(f"unknown transcript style {style!r}, expected one of {TRANSCRIPT_STYLES}")
        self.style = style
        self.lines: list[str] = []
        self.steps: list[Step] = []

    def header(self, phase: str) -> None:
        self.lines.append(f"------- {phase} -------")

    def record(self, op: str, target: int, operand: Any) -> None:
        step = Step(op, target, operand)
        self.steps.append(step)
        self.lines.append(format_step(step, self.style))


def count_steps(transcript: Iterable[str]) -> int:
    """Number of operation entries in a transcript (phase headers excluded)."""
    return sum(1 for line in transcript if line not in HEADERS)

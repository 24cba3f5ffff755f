"""
Step Tracer
============

Builder that a cipher fills in while it computes, producing the ordered
list of :class:`~cipherstep.core.models.StepInfo` records shown to
students.

Ciphers run their real transform with a tracer attached, so the final step
of a trace always matches the untraced result.
"""

from __future__ import annotations

from typing import Optional

from cipherstep.core.models import StepInfo


class StepTracer:
    """Accumulates numbered steps for one trace.

    Usage::

        tracer = StepTracer()
        tracer.add("Initialization", "Plain Text", text, "Starting encryption")
        ...
        tracer.finish(text, result, "Encryption complete")
        return tracer.steps
    """

    def __init__(self) -> None:
        self._steps: list[StepInfo] = []

    def add(
        self,
        description: str,
        input: str,
        output: str,
        explanation: Optional[str] = None,
    ) -> StepInfo:
        """Append a step numbered after the previous one and return it."""
        step = StepInfo(
            step_number=len(self._steps) + 1,
            description=description,
            input=input,
            output=output,
            explanation=explanation,
        )
        self._steps.append(step)
        return step

    def finish(
        self, source: str, result: str, explanation: str = "Complete"
    ) -> StepInfo:
        """Append the closing ``Final Result`` step."""
        return self.add("Final Result", source, result, explanation)

    @property
    def steps(self) -> list[StepInfo]:
        """A new list of the steps recorded so far."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

"""Registry mapping Given/When/Then step text to Python callables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import parse

from searchprobe.core.exceptions import AmbiguousOrUnboundStepError

logger = logging.getLogger(__name__)

STEP_TYPES = ("given", "when", "then", "step")
"""``step`` bindings match regardless of the keyword used in the scenario."""


@dataclass
class StepBinding:
    """One step pattern and the function it runs.

    Patterns use the ``parse`` syntax behave uses by default, e.g.
    ``I search for "{query}"``. Named fields become keyword arguments.
    """

    step_type: str
    pattern: str
    func: Callable[..., Any]
    _parser: parse.Parser = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.step_type not in STEP_TYPES:
            raise ValueError(
                f"Unknown step type: {self.step_type}. Expected one of {list(STEP_TYPES)}"
            )
        self._parser = parse.compile(self.pattern)

    def match(self, text: str) -> parse.Result | None:
        return self._parser.parse(text)

    @property
    def location(self) -> str:
        code = getattr(self.func, "__code__", None)
        if code is None:
            return getattr(self.func, "__qualname__", repr(self.func))
        return f"{code.co_filename}:{code.co_firstlineno}"


@dataclass
class ResolvedStep:
    """A binding together with the arguments extracted from the step text."""

    binding: StepBinding
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    def run(self, context: Any) -> Any:
        return self.binding.func(context, *self.args, **self.kwargs)


class StepRegistry:
    """Collection of step bindings with exact-one-match resolution."""

    def __init__(self) -> None:
        self._bindings: list[StepBinding] = []

    def __iter__(self) -> Iterator[StepBinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def add(self, step_type: str, pattern: str, func: Callable[..., Any]) -> StepBinding:
        """Register a binding.

        Parameters
        ----------
        step_type : str
            given, when, then or step
        pattern : str
            ``parse`` pattern matched against the full step text
        func : Callable[..., Any]
            Callable invoked with the scenario context and extracted arguments

        Returns
        -------
        StepBinding
            The registered binding
        """
        binding = StepBinding(step_type=step_type, pattern=pattern, func=func)
        self._bindings.append(binding)
        logger.debug("Registered %s binding %r", step_type, pattern)
        return binding

    def _decorator(self, step_type: str, pattern: str) -> Callable:
        def wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add(step_type, pattern, func)
            return func

        return wrapper

    def given(self, pattern: str) -> Callable:
        return self._decorator("given", pattern)

    def when(self, pattern: str) -> Callable:
        return self._decorator("when", pattern)

    def then(self, pattern: str) -> Callable:
        return self._decorator("then", pattern)

    def step(self, pattern: str) -> Callable:
        return self._decorator("step", pattern)

    def resolve(self, step_type: str, text: str) -> ResolvedStep:
        """Find the single binding matching a step.

        Parameters
        ----------
        step_type : str
            Step type of the scenario line (given, when, then)
        text : str
            Step text without its keyword

        Returns
        -------
        ResolvedStep
            Matching binding with the extracted arguments

        Raises
        ------
        AmbiguousOrUnboundStepError
            If no binding or more than one binding matches
        """
        matches: list[tuple[StepBinding, parse.Result]] = []

        for binding in self._bindings:
            if binding.step_type not in (step_type, "step"):
                continue

            result = binding.match(text)
            if result is not None:
                matches.append((binding, result))

        if len(matches) != 1:
            raise AmbiguousOrUnboundStepError(
                step_type, text, [binding.pattern for binding, _ in matches]
            )

        binding, result = matches[0]
        return ResolvedStep(
            binding=binding, args=tuple(result.fixed), kwargs=dict(result.named)
        )

"""Expose searchprobe step bindings to behave.

Each registered binding becomes a behave step that calls the binding with
the scenario's :class:`~searchprobe.lifecycle.ScenarioContext`.
"""

from behave import given, step, then, when
from behave.runner import Context

from searchprobe.bindings import registry
from searchprobe.bindings.registry import StepBinding

BEHAVE_DECORATORS = {"given": given, "when": when, "then": then, "step": step}


def _behave_step(binding: StepBinding):
    def run_binding(context: Context, **kwargs) -> None:
        binding.func(context.probe, **kwargs)

    run_binding.__name__ = binding.func.__name__
    run_binding.__doc__ = binding.func.__doc__
    return run_binding


for _binding in registry:
    BEHAVE_DECORATORS[_binding.step_type](_binding.pattern)(_behave_step(_binding))

"""
Some helpers for functional programming with cursors
"""
from typing import Callable, Iterable, Tuple, Union

from circulist.errors import PipelineError

PipelineStep = Union[Callable, str, Tuple]


def _resolve_step(subject, step: PipelineStep) -> Callable:
    if callable(step):
        return step

    if isinstance(step, str):
        name, args = step, ()
    elif isinstance(step, tuple) and step and isinstance(step[0], str):
        name, args = step[0], step[1:]
    else:
        raise PipelineError(f"Unsupported pipeline step: {step!r}")

    method = getattr(subject, name, None)
    if name.startswith("_") or not callable(method):
        raise PipelineError(
            f"'{type(subject).__name__}' has no operation '{name}'"
        )
    return lambda s: getattr(s, name)(*args)


def apply_pipeline(
    subject,
    functions: Iterable[PipelineStep],
):
    """
    Applies pipeline of functions to some subject.
    Besides plain callables, a step can be given as operation name,
    or as a tuple of operation name and its arguments, e.g.
    ```
    apply_pipeline(init([1, 2, 3]), ["next", ("insert", "x"), ("prev", 2)])
    ```
    :param subject: contents we about to pass through the pipeline
    :param functions: functions pipeline
    :return: result of the last step
    """

    res = subject
    for f in functions:
        res = _resolve_step(res, f)(res)
    return res

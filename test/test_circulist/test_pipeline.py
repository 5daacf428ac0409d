import pytest

from circulist import PipelineError, apply_pipeline, init


def test_apply_pipeline():
    res = apply_pipeline(
        init([1, 2, 3, 4, 5]),
        ["next", ("next", 2), ("insert", "foo"), lambda c: c.prev(-1)],
    )
    assert res.to_list() == [1, 2, 3, "foo", 4, 5]
    assert res.value() == 5


def test_apply_pipeline_to_value():
    assert apply_pipeline(init([1, 2, 3]), [("prev", 2), "value"]) == 2


def test_apply_empty_pipeline():
    cll = init([1])
    assert apply_pipeline(cll, []) is cll


@pytest.mark.parametrize("step", ["jump", "_derive", ("sideways", 1), 42, ()])
def test_unknown_step(step):
    with pytest.raises(PipelineError):
        apply_pipeline(init([1, 2]), [step])

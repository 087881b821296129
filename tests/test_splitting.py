import pytest

from blockrows.splitting import MAX_POSTGRESQL_PARAMS, split_by_params

THREE_PER_SLICE = MAX_POSTGRESQL_PARAMS // 3


def test_empty_gives_single_empty_batch():
    assert split_by_params([], 5) == [[]]


def test_three_items_leave_trailing_empty_batch():
    assert split_by_params([0, 1, 2], THREE_PER_SLICE) == [[0, 1, 2], []]


@pytest.mark.parametrize("count", [1, 2, 5, 9, 11, 30])
def test_order_is_preserved(count):
    items = list(range(count))
    batches = split_by_params(items, THREE_PER_SLICE)
    assert [item for batch in batches for item in batch] == items


@pytest.mark.parametrize("count", [5, 11, 30])
def test_batch_sizes(count):
    batches = split_by_params(range(count), THREE_PER_SLICE)
    assert len(batches[0]) == 3
    assert all(len(batch) <= 2 for batch in batches[1:])


def test_small_inputs_fit_one_batch():
    items = list(range(100))
    batches = split_by_params(items, 3)
    assert batches[0] == items


def test_zero_params_rejected():
    with pytest.raises(ValueError):
        split_by_params([1], 0)


def test_too_many_params_rejected():
    with pytest.raises(ValueError):
        split_by_params([1], MAX_POSTGRESQL_PARAMS + 1)


def test_one_item_per_batch_with_many_items_rejected():
    with pytest.raises(ValueError):
        split_by_params([1, 2], MAX_POSTGRESQL_PARAMS)
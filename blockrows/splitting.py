"""Splitting of rows into batches that fit PostgreSQL's parameter limit."""

from __future__ import annotations

from typing import Iterable, TypeVar

MAX_POSTGRESQL_PARAMS = 65535

T = TypeVar("T")


def split_by_params(items: Iterable[T], params_number: int) -> list[list[T]]:
    """Split items into batches so that each insert stays under the parameter limit.

    The first batch holds up to the maximum number of items per batch and each
    following one holds one less; batches planned up front that stay unused are
    returned empty.
    """
    if params_number <= 0:
        raise ValueError(f"params number must be positive, got {params_number}")
    per_slice = MAX_POSTGRESQL_PARAMS // params_number
    if per_slice == 0:
        raise ValueError(f"too many params per item: {params_number}")

    items = list(items)
    slices: list[list[T]] = [[] for _ in range(len(items) // per_slice + 1)]
    current = 0
    for index, item in enumerate(items):
        while current >= len(slices):
            slices.append([])
        slices[current].append(item)
        if index > 0:
            if per_slice == 1:
                raise ValueError(f"too many params per item: {params_number}")
            if index % (per_slice - 1) == 0:
                current += 1
    return slices
#!/usr/bin/env python3
"""
Basic usage examples for lazyiterate.
"""

import logging
from lazyiterate import (
    Seq,
    Seq2,
    NotFoundError,
    LazyIterateConfig,
    find2,
    zip_,
)


def example_pipeline():
    """Example: Chain transformers, nothing runs until collect()."""
    print("\n=== Pipeline Example ===")

    data = [
        {'name': 'Alice', 'age': 25, 'score': 85},
        {'name': 'Bob', 'age': 30, 'score': 90},
        {'name': 'Charlie', 'age': 25, 'score': 78},
        {'name': 'David', 'age': 30, 'score': 92},
        {'name': 'Eve', 'age': 25, 'score': 88},
    ]

    result = Seq.from_iterable(data) \
        .filter(lambda x: x['age'] == 25) \
        .map(lambda x: {'name': x['name'], 'grade': 'A' if x['score'] >= 85 else 'B'}) \
        .collect()

    print(f"Age 25 grades: {result}")


def example_infinite_source():
    """Example: take() stops an infinite producer."""
    print("\n=== Infinite Source Example ===")

    def fibonacci(step):
        a, b = 0, 1
        while step(a):
            a, b = b, a + b

    print(f"First 10 Fibonacci numbers: {Seq(fibonacci).take(10).collect()}")
    print(f"First even one above 1000: {Seq(fibonacci).find(lambda n: n > 1000 and n % 2 == 0)}")


def example_pairs():
    """Example: Key/value sequences keep production order and duplicates."""
    print("\n=== Paired Sequence Example ===")

    readings = Seq2.from_pairs([("kitchen", 21.5), ("hall", 19.0), ("kitchen", 22.1)])
    print(f"Readings, newest first: {readings.reverse().collect()}")
    print(f"Kitchen total: {readings.filter(lambda room, t: room == 'kitchen').reduce(lambda acc, room, t: acc + t, 0.0)}")

    try:
        find2(readings, lambda room, t: room == "attic", default_value=float('nan'))
    except NotFoundError as e:
        print(f"No attic reading, zero value: {e.zero}")


def example_zip():
    """Example: Zip pulls both sides in lockstep."""
    print("\n=== Zip Example ===")

    names = Seq.from_iterable(["ada", "grace", "linus", "guido"])
    ranks = Seq.range(1, 4)
    for name, rank in zip_(names, ranks):
        print(f"  {rank}. {name}")


def main():
    logging.basicConfig(level=logging.INFO)
    LazyIterateConfig.set_defaults(memory_check_interval=1000)

    example_pipeline()
    example_infinite_source()
    example_pairs()
    example_zip()


if __name__ == "__main__":
    main()

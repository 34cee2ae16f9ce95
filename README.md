# loutils

Small helpers with no dependencies outside the standard library, for working
with lists, numbers, strings, timing and retries.

## Install

```
pip install loutils
```

To run the test suite:

```
pip install "loutils[test]"
pytest
```

## Modules

- `loutils.transform` builds new lists and dicts: `filter_items`,
  `map_items`, `uniq_map`, `filter_map`, `flat_map`, `reduce`, `reduce_right`,
  `for_each`, `for_each_while`, `times`, `uniq`, `uniq_by`, `group_by`,
  `group_by_map`, `chunk`, `partition_by`, `flatten`, `interleave`, `shuffle`,
  `reverse`, `fill`, `repeat`, `repeat_by`, `key_by`, `associate`,
  `slice_to_map`, `filter_slice_to_map` and `keyify` (which returns a set).
  Index-aware callbacks receive `(item, index)`.
- `loutils.selection` picks, drops and counts: `drop`, `drop_right`,
  `drop_while`, `drop_right_while`, `drop_by_index`, `reject`, `reject_map`,
  `filter_reject`, `count`, `count_by`, `count_values`, `count_values_by`,
  `subset`, `slice_between`, `replace`, `replace_all`, `compact` (drops falsy
  items), `is_sorted`, `is_sorted_by_key`, `splice`, `any_match` and
  `all_match`. Out-of-range offsets and indexes are clamped rather than raised.
- `loutils.mutable` changes a list in place: `filter_in_place`,
  `filter_in_place_indexed`, `map_in_place`, `map_in_place_indexed`,
  `shuffle`, `reverse` and `fill`.
- `loutils.parallel` runs callbacks concurrently on a thread pool, keeping
  results in input order: `map_items`, `for_each`, `times`, `group_by` and
  `partition_by`.
- `loutils.numeric` has `int_range`, `range_from`, `range_with_steps`,
  `clamp`, `sum_values`, `sum_by`, `product`, `product_by`, `mean` and
  `mean_by`. `product` of an empty collection is 1. `mean` of integers
  truncates toward zero, and an empty collection gives 0.
- `loutils.text` has `random_string`, `substring`, `chunk_string`,
  `rune_length`, `words`, `capitalize`, `pascal_case`, `camel_case`,
  `kebab_case`, `snake_case` and `ellipsis`, plus charset constants such as
  `LOWER_CASE_LETTERS_CHARSET` and `ALPHANUMERIC_CHARSET`.
- `loutils.timing` has `duration(callback)`, which returns the elapsed seconds,
  and `duration_with_result(callback)`, which returns `(result, seconds)`.
- `loutils.retry` has `attempt`, `attempt_with_delay`, `attempt_while` and
  `attempt_while_with_delay`, and the classes `Debounce`, `DebounceBy`,
  `Throttle`, `ThrottleBy`, `Transaction` and `TransactionError`.

Functions raise `ValueError` for invalid sizes and counts: a chunk size of 0, a
negative length, or an empty charset.

## Examples

```python
from loutils.transform import chunk, group_by
from loutils.selection import drop_by_index, subset
from loutils.text import snake_case, words
from loutils.numeric import range_with_steps

chunk([0, 1, 2, 3, 4, 5, 6], 2)            # [[0, 1], [2, 3], [4, 5], [6]]
group_by([0, 1, 2, 3, 4, 5], lambda i: i % 3)
# {0: [0, 3], 1: [1, 4], 2: [2, 5]}
drop_by_index([0, 1, 2, 3, 4], -4, -2, -3)  # [0, 4]
subset([0, 1, 2, 3, 4], -2, 4)              # [3, 4]

words("HTTPStatusCode")                     # ['HTTP', 'Status', 'Code']
snake_case("LogRouterS3BucketName")         # 'log_router_s3_bucket_name'

range_with_steps(0, 20, 6)                  # [0, 6, 12, 18]
```

### Retrying

`attempt(max_iteration, fn)` calls `fn(index)` until a call returns without
raising, and returns the number of calls made. When every call raises, the
last exception propagates. A `max_iteration` below 1 retries without limit.

```python
from loutils.retry import attempt

def flaky(index):
    if index < 2:
        raise ValueError("failed")

attempt(5, flaky)  # 3
```

`attempt_with_delay` sleeps `delay` seconds between calls and passes the
elapsed seconds to `fn`. It returns `(calls, elapsed_seconds)`.
`attempt_while` and `attempt_while_with_delay` take a `fn` that returns
`(error, should_continue)` instead of raising. They stop at the first call
whose error is `None`. They also stop at once when `should_continue` is false,
and raise that call's error if it has one.

### Transactions

```python
from loutils.retry import Transaction, TransactionError

tx = (
    Transaction()
    .then(lambda s: s + 100, lambda s: s - 100)
    .then(lambda s: s + 21, lambda s: s - 21)
)
tx.process(21)  # 142
```

When a step raises, `process` runs the rollbacks of the steps that completed,
in reverse order. It then raises `TransactionError`, whose `state` attribute
holds the rolled-back state and whose `__cause__` is the original exception. A
step can raise `TransactionError(message, state=...)` to fail with an updated
state. Rollback then starts from that state.

### Debouncing and throttling

```python
from loutils.retry import Debounce, Throttle

save = Debounce(0.05, lambda: print("saved"))
for _ in range(10):
    save()          # prints once, 50 ms after the last call
save.cancel()       # drops the pending run and ignores later calls

ping = Throttle(0.01, lambda: print("ping"), count=1)
for _ in range(100):
    ping()          # prints once in the current 10 ms window
```

`DebounceBy` and `ThrottleBy` do the same separately for each key.
`DebounceBy` callbacks receive `(key, call_count)`, and `ThrottleBy` callbacks
receive the key. Timers run on daemon threads.
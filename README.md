# dsakit

A small collection of classic data structures and algorithms with plain,
predictable behaviour. It has no dependencies outside the standard library.

## Contents

- `dsakit.circular_queue.CircularQueue(capacity)`: a first-in, first-out
  queue that holds at most `capacity` elements (`capacity` must be at least 1).
  `enqueue` raises `QueueFullError` when the queue is full, and `dequeue`
  removes and returns the front element or raises `QueueEmptyError` when the
  queue is empty. It supports `is_full()`, `is_empty()`, `len()` and iteration
  from front to rear. `display()` returns the elements joined by spaces, or
  the text `queue is empty`.
- `dsakit.stack.Stack(size)`: a last-in, first-out stack holding at most
  `size` elements. `push` raises `StackOverflowError` when the stack is full;
  `pop` (which returns the removed element) and `peek` raise
  `StackUnderflowError` when the stack is empty. It supports `is_empty()`
  and `len()`.
- `dsakit.counting_sort.counting_sort(values, max_value)`: returns a new
  ascending list of integers. Every value must lie in `0..max_value`;
  otherwise, or when `max_value` is negative, it raises `ValueError`.
- `dsakit.quicksort.quicksort(items)`: returns a new sorted list, leaving the
  input untouched. `partition(items, low, high)` partitions
  `items[low:high + 1]` in place around its first element and returns the
  pivot's final index; it raises `ValueError` for an invalid range.
- `dsakit.search.binary_search(items, element)` and
  `dsakit.search.ternary_search(items, element)`: search a sorted sequence and
  return a 0-based index of `element`, or `None` when it is not present.

## Installation

```
pip install .
```

## Usage

```python
from dsakit.circular_queue import CircularQueue
from dsakit.counting_sort import counting_sort
from dsakit.quicksort import quicksort
from dsakit.search import binary_search, ternary_search
from dsakit.stack import Stack

q = CircularQueue(3)
q.enqueue(1)
q.enqueue(2)
print(list(q))          # [1, 2]
print(q.dequeue())      # 1
print(q.display())      # 2

s = Stack(2)
s.push(10)
s.push(12)
print(s.peek())         # 12
print(s.pop())          # 12

print(counting_sort([3, 1, 2, 1], 3))   # [1, 1, 2, 3]
print(quicksort([5, 2, 9, 1]))          # [1, 2, 5, 9]

print(binary_search([1, 3, 5, 7], 5))   # 2
print(ternary_search([1, 3, 5, 7], 4))  # None
```

## Command line

The `dsakit` command sorts or searches integers. Values are taken from the
arguments, or, when none are given, read from standard input separated by
whitespace.

```
dsakit count-sort --range 3 3 1 2 1     # prints: 1 1 2 3
dsakit quicksort 5 2 9 1                # prints: 1 2 5 9
dsakit binary-search 5 1 3 5 7          # prints: position of element is 3
dsakit ternary-search 4 1 3 5 7         # prints: element not found
echo "4 2 8" | dsakit quicksort         # prints: 2 4 8
```

For the search commands the first number is the element to find and the
rest must already be sorted; the reported position is 1-based. A value out of
range for `count-sort`, or input that is not an integer, prints an error to
standard error and exits with status 1.

The queue and the stack are available only from Python; the command line
does not expose them.

## Tests

```
pip install ".[test]"
pytest
```
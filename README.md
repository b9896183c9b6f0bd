# tideflow

Reactive building blocks for user-interface state. It has computed values that can be
watched, two-way bindings, observable arrays and simple records for visual filters.

## Install

```
pip install tideflow
```

## Watchers and guards

`tideflow.watcher` holds the notification machinery. A `Watcher` wraps a callback that
receives a value and a `Metadata`. `Watcher.simple` wraps a callback that wants only the
value. A `WatcherManager` keeps registered watchers and notifies them in the order they
were registered.

Registering a watcher returns a `WatcherGuard`. The watcher stays registered as long as
the guard is alive. Call `release()` or leave a `with` block to stop it. A guard that is
garbage-collected also releases. `leak()` keeps the watcher registered for good.

`watch(source, watcher)` accepts a `Watcher` or any one-argument callable.

## Computations

`tideflow.compute` defines `Compute`. Anything that derives from it can be read with
`compute()` and watched with `add_watcher()` or `watch()`.

```python
from tideflow.compute import constant

tax_rate = constant(0.08)
print(tax_rate.compute())  # 0.08
```

- `map(func)` returns a `Map`. It caches its result until the source changes.
- `zip(other)` returns a `Zip` that yields a pair. `Zip.flatten_map` passes the values of
  nested zips to a function as separate arguments.
- `with_metadata(value)` returns a `WithMetadata`. Its watchers find `value` in the
  notification's `Metadata`, keyed by its type.
- `computed()` wraps the computation in a `Computed`.

The functions `constant`, `map_compute`, `zip_compute` and `into_compute` build the same
objects. `into_compute` turns a plain value into a `Constant`.

`tideflow.computed` provides `Computed`, `Computed.constant`, `into_computed` and
`add(first, second)`. Adding a `Computed` to another computation, or to a plain value,
with `+` gives a new `Computed` that follows both sides.

## Bindings

A `Binding` holds a value you can change. Every watcher of the binding is told about
each change.

```python
from tideflow.binding import binding

age = binding(30)
guard = age.watch(lambda value: print("age is now", value))
age.increment(1)        # prints "age is now 31"
age.set(31)             # same value: watchers are not told
guard.release()         # stop watching

adult = age.range(18, 130)   # ignores writes outside 18..=130
is_active = binding(True)
is_active.toggle()
```

Other helpers:

- `Binding.mapping(source, getter, setter)` gives a two-way view of a binding as another
  type.
- `filter(predicate)` ignores writes that fail the predicate.
- `push` and `clear` work on list bindings. `append` and `clear` work on string bindings.
  `increment` and `decrement` work on numbers. `toggle` works on booleans.
- `handle(func)` applies `func` to the value. `func` may change the value in place and
  return None, or it may return a replacement. A binding backed by a `Container` always
  notifies after `handle`.
- `+=` updates the value in place, and `+` gives a `Computed` sum.
- `get_mut()` returns a `BindingMutGuard`. Use it as a context manager, edit
  `guard.value`, and the binding takes the edited value when the block ends.

```python
from tideflow.binding import binding

names = binding(["ada"])
with names.get_mut() as guard:
    guard.value.append("grace")
print(names.get())  # ['ada', 'grace']
```

To back a binding with your own storage, subclass `CustomBinding` and pass an instance
to `Binding.custom`.

## Collections

`tideflow.collection.Array` is a list that tells its watchers when items are pushed,
removed or cleared. Watchers are called with `None`. `get` returns `None` for an index out
of range, and `remove` ignores one.

```python
from tideflow.collection import Array

items = Array(["a", "b"])
items.get(0)      # "a"
items.remove(0)
len(items)        # 1
items.is_empty()  # False
```

## Visual filters

`tideflow.filter` holds plain dataclass records for visual effects: `Blur`,
`Brightness`, `Contrast`, `Saturation`, `Grayscale`, `HueRotation` and `Invert`.

## What tideflow does not do

- Everything runs at once, in the caller's thread. Nothing here schedules work on an
  event loop or in the background. There are no timers.
- Values are not guarded for use from several threads. Nothing here passes a binding
  safely to another thread.
- Nothing renders views or applies the filter records. They only describe an effect.

## Tests

```
pip install "tideflow[test]"
pytest
```
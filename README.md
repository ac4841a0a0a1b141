# risp

The runtime core of a small Clojure-flavoured Lisp, in pure Python with no
dependencies. It provides the value types, the builtin functions and the
environments that an evaluator works with.

## What is in the package

- `risp.collections`: `RispList` is an immutable cons list whose tails are
  shared between lists. Build one with `RispList.empty()` and `cons`, with
  `RispList.from_iterable`, or with `RispList(iterable)`. It has `first`,
  `last`, `rest`, `is_empty`, `nth`/`get`, `len()`, iteration and equality.
  `nth` outside the list raises `CollectionError` (an `IndexError`).
- `risp.values`: the language's values. nil is `None`, booleans are `bool`,
  longs are `int`, doubles are `float`, strings are `str`. `Keyword`,
  `Symbol`, `Vector`, `Map` (ordered key/value pairs, with `get`), `Set`
  (ordered distinct values), `ClosureArity`, `Closure` (with `with_name`) and
  `Builtin` complete the set. The helpers are `type_name`, `is_truthy` (only
  nil and false are falsy), `values_equal` (a list equals a vector with the
  same elements; a long never equals a double; callables equal nothing),
  `display` (the printed form) and `debug_repr`.
- `risp.errors`: `RispError` and its subclasses `UndefinedVariable`,
  `NotCallable`, `WrongArity`, `TypeMismatch`, `UnsupportedType`,
  `IndexOutOfBounds`, `DivisionByZero`, `ParseError`, `AnalyzeError` and
  `RecurOutsideLoop`. Their messages are s-expressions such as
  `(division-by-zero)`, and most carry the `span` they were raised with.
- `risp.builtins`: the builtin functions.
  - `arithmetic`: `+`, `-`, `*`, `/`, `mod`. Longs stay longs until a double
    appears; long division and `mod` truncate toward zero; dividing by zero
    raises `DivisionByZero`.
  - `comparison`: `=`, `not=`, `>`, `>=`, `<`, `<=`; the orderings chain over
    any number of arguments.
  - `structures`: `list`, `vector`, `hash-map`.
  - `sequences`: `count`, `first`, `rest`, `second`, `last`, `nth`, `conj`,
    `empty?`, `cons`.
  - `stdio`: `write` prints one string to standard output without a newline;
    `str` joins the printed forms of its arguments.
  - `registry.all_builtins()` returns every builtin as `(name, Builtin)` pairs.
- `risp.env`: `Namespace`, `NamespaceRegistry` and `Env`. An `Env` holds local
  bindings keyed by integer ids and chained to a parent scope, over a registry
  of namespaces shared by all scopes. A namespace may refer to others, whose
  definitions it then sees. Lookups of unknown names raise `KeyError`.
  `Env.current_namespace` names the namespace `set_global` defines into
  (`"user"` at first).

## Installation

```
pip install .
```

## Example

```python
from risp.collections import RispList
from risp.env import Env
from risp.builtins.registry import all_builtins

items = RispList.from_iterable([1, 2, 3])
print(items)            # (1 2 3)
print(items.rest())     # (2 3)

env = Env()
env.load_builtins("risp.internal", all_builtins())
env.create_ns("user", ["risp.internal"])

add = env.get_global("+")
print(add([(1, None), (2.5, None)], None))   # 3.5
```

Builtins take a sequence of `(value, span)` pairs and a span for the whole
call. A span is whatever the caller uses to point at source locations; it is
only stored on the errors that get raised.

## What it does not do

The package does not read or run programs: it has no lexer, parser, analyser
or evaluator, and no interactive prompt or command-line tool. `ParseError`,
`AnalyzeError` and `RecurOutsideLoop` are defined for an evaluator to raise,
but nothing in the package raises them. Closures are plain records of their
arities and environment; calling them is left to the evaluator.

## Running the tests

```
pip install .[test]
pytest
```
"""Runtime core of a small Clojure-flavoured Lisp: collections, values, errors, builtins and environments."""

__version__ = "0.1.0"
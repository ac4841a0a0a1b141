"""Builtin functions: arithmetic, comparison, structures, sequences and stdio, gathered by registry."""
from risp.builtins import arithmetic, comparison, sequences, stdio, structures
from risp.builtins.registry import all_builtins


def test_contains_every_module_builtin():
    expected = {
        name
        for module in (arithmetic, stdio, structures, sequences, comparison)
        for name, _ in module.builtins()
    }
    assert {name for name, _ in all_builtins()} == expected


def test_names_are_unique():
    names = [name for name, _ in all_builtins()]
    assert len(names) == len(set(names))


def test_entry_names_match_builtin_names():
    for name, builtin in all_builtins():
        assert builtin.name == name


def test_arithmetic_comes_first():
    assert all_builtins()[0][0] == "+"
import pytest

from risp.env import Env, Namespace, NamespaceRegistry


def test_namespace_get_and_names():
    ns = Namespace("things")
    ns.defs["a"] = 1
    assert ns.get("a") == 1
    assert list(ns.global_names()) == ["a"]
    with pytest.raises(KeyError):
        ns.get("b")


def test_registry_default_current_is_user():
    assert NamespaceRegistry().current == "user"


def test_registry_set_creates_current_namespace():
    registry = NamespaceRegistry()
    registry.set("x", 42)
    assert registry.get("x") == 42
    assert registry.get_in_ns("user", "x") == 42


def test_registry_stores_nil_distinct_from_missing():
    registry = NamespaceRegistry()
    registry.set("x", None)
    assert registry.get("x") is None
    with pytest.raises(KeyError):
        registry.get("y")


def test_registry_lookup_through_referred():
    registry = NamespaceRegistry()
    registry.load("base", [("+", "plus")])
    registry.create("core", ["base"])
    assert registry.get_in_ns("core", "+") == "plus"


def test_registry_referral_is_not_transitive():
    registry = NamespaceRegistry()
    registry.load("base", [("+", "plus")])
    registry.create("core", ["base"])
    registry.create("user", ["core"])
    with pytest.raises(KeyError):
        registry.get("+")


def test_registry_own_definition_shadows_referred():
    registry = NamespaceRegistry()
    registry.load("base", [("f", 1)])
    registry.create("user", ["base"])
    registry.set("f", 2)
    assert registry.get("f") == 2


def test_registry_unknown_namespace():
    with pytest.raises(KeyError):
        NamespaceRegistry().get_in_ns("nonexistent", "foo")


def test_registry_create_keeps_existing():
    registry = NamespaceRegistry()
    registry.load("core", [("a", 1)])
    registry.create("core", ["other"])
    assert registry.get_in_ns("core", "a") == 1
    assert registry.namespaces["core"].referred == []


def test_registry_public_names_include_referred():
    registry = NamespaceRegistry()
    registry.load("base", [("a", 1), ("b", 2)])
    registry.create("user", ["base"])
    registry.set("c", 3)
    assert sorted(registry.public_names()) == ["a", "b", "c"]


def test_registry_public_names_without_current_namespace():
    assert NamespaceRegistry().public_names() == []


def test_env_local_lookup_through_parent():
    parent = Env()
    parent.set_local(1, "outer")
    child = Env.with_parent(parent)
    child.set_local(2, "inner")
    assert child.get_local(1) == "outer"
    assert child.get_local(2) == "inner"
    with pytest.raises(KeyError):
        parent.get_local(2)


def test_env_local_shadowing():
    parent = Env()
    parent.set_local(1, "outer")
    child = Env.with_parent(parent)
    child.set_local(1, "inner")
    assert child.get_local(1) == "inner"
    assert parent.get_local(1) == "outer"


def test_env_missing_local():
    with pytest.raises(KeyError):
        Env().get_local(7)


def test_env_set_global_from_child_is_shared():
    root = Env()
    child = Env.with_parent(root)
    child.set_global("x", 99)
    assert root.get_global("x") == 99
    assert child.get_in_ns("user", "x") == 99


def test_env_builtins_and_namespaces():
    env = Env()
    env.load_builtins("internal", [("+", "plus")])
    env.create_ns("core", ["internal"])
    env.create_ns("user", ["core"])
    assert env.get_in_ns("core", "+") == "plus"
    env.current_namespace = "core"
    env.set_global("inc", "increment")
    assert env.current_namespace == "core"
    assert sorted(env.public_names()) == ["+", "inc"]
    env.current_namespace = "user"
    assert env.get_global("inc") == "increment"


def test_child_shares_registry():
    root = Env()
    child = Env.with_parent(root)
    child.current_namespace = "other"
    assert root.current_namespace == "other"
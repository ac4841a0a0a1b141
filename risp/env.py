"""Namespaces of global definitions and chained scopes of local bindings."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple


class Namespace:
    """A named table of global definitions and the namespaces it refers to."""

    def __init__(self, name: str = "core", referred: Iterable[str] = ()) -> None:
        self.name = name
        self.defs: Dict[str, Any] = {}
        self.referred: List[str] = list(referred)

    def get(self, name: str) -> Any:
        """Return the definition of ``name``; raise KeyError when undefined."""
        return self.defs[name]

    def global_names(self) -> Iterator[str]:
        """Names defined directly in this namespace."""
        return iter(self.defs)


class NamespaceRegistry:
    """Every namespace, and which one new definitions go to."""

    def __init__(self) -> None:
        self.namespaces: Dict[str, Namespace] = {}
        self.current = "user"

    def get(self, name: str) -> Any:
        """Look ``name`` up in the current namespace."""
        return self.get_in_ns(self.current, name)

    def get_in_ns(self, ns: str, name: str) -> Any:
        """Look ``name`` up in ``ns``, then in the namespaces it refers to.

        Raises KeyError when the namespace or the name is unknown.
        """
        namespace = self.namespaces[ns]
        if name in namespace.defs:
            return namespace.defs[name]
        for referred in namespace.referred:
            other = self.namespaces.get(referred)
            if other is not None and name in other.defs:
                return other.defs[name]
        raise KeyError(name)

    def public_names(self) -> List[str]:
        """Names visible from the current namespace."""
        current = self.namespaces.get(self.current)
        if current is None:
            return []
        names = list(current.global_names())
        for referred in current.referred:
            other = self.namespaces.get(referred)
            if other is not None:
                names.extend(other.global_names())
        return names

    def set(self, name: str, value: Any) -> None:
        """Define ``name`` in the current namespace, creating it if needed."""
        namespace = self.namespaces.setdefault(self.current, Namespace(self.current))
        namespace.defs[name] = value

    def load(self, ns_name: str, values: Iterable[Tuple[str, Any]]) -> None:
        """Define every (name, value) pair in ``ns_name``, creating it if needed."""
        namespace = self.namespaces.setdefault(ns_name, Namespace(ns_name))
        namespace.defs.update(values)

    def create(self, ns_name: str, referred: Iterable[str]) -> None:
        """Create ``ns_name`` referring to ``referred``; an existing one is kept."""
        if ns_name not in self.namespaces:
            self.namespaces[ns_name] = Namespace(ns_name, referred)


class Env:
    """A scope of local bindings, chained to its parent, over shared namespaces."""

    def __init__(
        self,
        registry: Optional[NamespaceRegistry] = None,
        parent: Optional["Env"] = None,
    ) -> None:
        self.locals: Dict[int, Any] = {}
        self.registry = registry if registry is not None else NamespaceRegistry()
        self.parent = parent

    @classmethod
    def with_parent(cls, parent: "Env") -> "Env":
        """A child scope sharing the parent's namespaces."""
        return cls(registry=parent.registry, parent=parent)

    def get_local(self, ident: int) -> Any:
        """Value bound to ``ident`` here or in an enclosing scope.

        Raises KeyError when it is bound nowhere.
        """
        env: Optional[Env] = self
        while env is not None:
            if ident in env.locals:
                return env.locals[ident]
            env = env.parent
        raise KeyError(ident)

    def set_local(self, ident: int, value: Any) -> None:
        self.locals[ident] = value

    def get_global(self, name: str) -> Any:
        """Global ``name`` as seen from the current namespace; KeyError if absent."""
        return self.registry.get(name)

    def get_in_ns(self, ns: str, name: str) -> Any:
        """Global ``name`` as seen from ``ns``; KeyError if absent."""
        return self.registry.get_in_ns(ns, name)

    def public_names(self) -> List[str]:
        return self.registry.public_names()

    def set_global(self, name: str, value: Any) -> None:
        """Define ``name`` in the current namespace."""
        root = self
        while root.parent is not None:
            root = root.parent
        root.registry.set(name, value)

    def load_builtins(self, ns_name: str, values: Iterable[Tuple[str, Any]]) -> None:
        self.registry.load(ns_name, values)

    def create_ns(self, ns_name: str, referred: Iterable[str]) -> None:
        self.registry.create(ns_name, referred)

    @property
    def current_namespace(self) -> str:
        """Name of the namespace new definitions go to."""
        return self.registry.current

    @current_namespace.setter
    def current_namespace(self, ns: str) -> None:
        self.registry.current = ns
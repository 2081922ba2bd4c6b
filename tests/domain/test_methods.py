from __future__ import annotations

import pytest

from lib_console_rich.domain.methods import ALIAS_TABLE, Primitive, bind_aliases


class _Target:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def log(self, *args) -> None:
        self.calls.append(("log", args))

    def error(self, *args) -> None:
        self.calls.append(("error", args))

    def group(self, *args) -> None:
        self.calls.append(("group", args))

    def empty(self, *args) -> None:
        return None


def test_every_primitive_names_a_method() -> None:
    assert {primitive.method_name for primitive in Primitive} == {"log", "error", "group", "empty"}


@pytest.mark.parametrize(
    "alias, primitive",
    [
        ("info", Primitive.LOG),
        ("warn", Primitive.LOG),
        ("debug", Primitive.LOG),
        ("dirxml", Primitive.LOG),
        ("table", Primitive.LOG),
        ("group_collapsed", Primitive.GROUP),
        ("profile", Primitive.EMPTY),
        ("profile_end", Primitive.EMPTY),
        ("time_stamp", Primitive.EMPTY),
    ],
)
def test_alias_table_entries(alias: str, primitive: Primitive) -> None:
    assert ALIAS_TABLE[alias] is primitive


def test_alias_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ALIAS_TABLE["info"] = Primitive.ERROR  # type: ignore[index]


def test_bind_aliases_installs_bound_methods() -> None:
    target = _Target()
    resolved = bind_aliases(target)
    target.warn("w")
    target.group_collapsed("g")
    target.profile("ignored")
    assert target.calls == [("log", ("w",)), ("group", ("g",))]
    assert set(resolved) == set(ALIAS_TABLE)


def test_bind_aliases_keeps_instances_separate() -> None:
    first, second = _Target(), _Target()
    bind_aliases(first)
    bind_aliases(second)
    first.info("a")
    assert second.calls == []


def test_bind_aliases_accepts_custom_table() -> None:
    target = _Target()
    bind_aliases(target, {"fatal": Primitive.ERROR})
    target.fatal("x")
    assert target.calls == [("error", ("x",))]

from __future__ import annotations

import sys
import threading
from pathlib import Path
from types import SimpleNamespace

from loguru import logger

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from enumkit import RichEnum, member  # noqa: E402
from enumkit.core import REGISTRY_ENUM, EnumRegistry, EnumSlot  # noqa: E402


class _TokenA:
    pass


class _TokenB:
    pass


def _item(value: object, name: str) -> SimpleNamespace:
    return SimpleNamespace(value=value, name=name)


def test_slot_is_created_lazily() -> None:
    reg = EnumRegistry()
    assert reg.select_slot(_TokenA) is None
    assert not reg.contains_class(_TokenA)

    cls_one = _item(1, "ONE")
    reg.register(_TokenA, cls_one)  # type: ignore[arg-type]

    cls_slot = reg.select_slot(_TokenA)
    assert isinstance(cls_slot, EnumSlot)
    assert cls_slot.instances == [cls_one]
    assert cls_slot.by_value == {1: cls_one}
    assert cls_slot.by_name == {"ONE": cls_one}
    assert reg.list_classes() == [_TokenA]


def test_slots_are_keyed_by_class_identity() -> None:
    reg = EnumRegistry()
    cls_a = _item(1, "ONE")
    cls_b = _item(1, "ONE")
    reg.register(_TokenA, cls_a)  # type: ignore[arg-type]
    reg.register(_TokenB, cls_b)  # type: ignore[arg-type]

    assert reg.select_slot(_TokenA).by_value[1] is cls_a  # type: ignore[union-attr]
    assert reg.select_slot(_TokenB).by_value[1] is cls_b  # type: ignore[union-attr]
    assert reg.list_classes() == [_TokenA, _TokenB]


def test_duplicate_keys_last_write_wins_and_warns() -> None:
    l_messages: list[str] = []
    handler_id = logger.add(l_messages.append, level="WARNING", format="{message}")
    try:
        cls_slot = EnumSlot.new()
        cls_first = _item(1, "SAME")
        cls_second = _item(1, "SAME")
        cls_slot.add(cls_first)  # type: ignore[arg-type]
        cls_slot.add(cls_second)  # type: ignore[arg-type]
    finally:
        logger.remove(handler_id)

    assert cls_slot.instances == [cls_first, cls_second]
    assert cls_slot.by_value[1] is cls_second
    assert cls_slot.by_name["SAME"] is cls_second
    assert any("Duplicate enum value" in _m for _m in l_messages)
    assert any("Duplicate enum name" in _m for _m in l_messages)


def test_rich_enum_registers_into_default_registry() -> None:
    class Signal(RichEnum[str]):
        GO = member("go")
        STOP = member("stop")

    assert REGISTRY_ENUM.contains_class(Signal)
    assert REGISTRY_ENUM.select_slot(Signal).instances == [  # type: ignore[union-attr]
        Signal.GO,
        Signal.STOP,
    ]
    assert not REGISTRY_ENUM.contains_class(RichEnum)


def test_concurrent_registration_keeps_every_instance() -> None:
    class Counter(RichEnum[int]):
        pass

    n_threads, n_per_thread = 8, 50

    def _worker(offset: int) -> None:
        for i in range(n_per_thread):
            c_idx = offset * n_per_thread + i
            Counter(c_idx, f"N{c_idx}")

    l_threads = [threading.Thread(target=_worker, args=(t,)) for t in range(n_threads)]
    for _t in l_threads:
        _t.start()
    for _t in l_threads:
        _t.join()

    l_values = Counter.values()
    assert len(l_values) == n_threads * n_per_thread
    assert {_i.value for _i in l_values} == set(range(n_threads * n_per_thread))
    assert all(Counter.from_value(_i.value) is _i for _i in l_values)

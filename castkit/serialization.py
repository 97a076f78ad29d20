"""Turn a live object into an integer handle and back."""

from __future__ import annotations

import weakref
from dataclasses import dataclass

_live: weakref.WeakValueDictionary[int, object] = weakref.WeakValueDictionary()


@dataclass
class Data:
    """A small record to pass around by handle."""

    id: int
    name: str


def serialize(obj: object) -> int:
    """Return an integer handle that identifies ``obj`` while it lives."""
    raw = id(obj)
    try:
        _live[raw] = obj
    except TypeError as exc:
        raise TypeError(f"cannot serialize object of type {type(obj).__name__}") from exc
    return raw


def deserialize(raw: int) -> object:
    """Return the live object a handle from :func:`serialize` refers to."""
    try:
        return _live[raw]
    except KeyError:
        raise ValueError(f"no live object for handle {raw:#x}") from None


def main(argv: list[str] | None = None) -> int:
    """Serialize a record, restore it and print both."""
    data = Data(42, "Pierre")
    raw = serialize(data)
    restored = deserialize(raw)
    print(f"Original: {id(data):#x}")
    print(f"Restored: {id(restored):#x}")
    print(f"ID: {restored.id}, Name: {restored.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
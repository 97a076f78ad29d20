"""Create a random subtype and identify objects by their real type."""

from __future__ import annotations

import random


class Base:
    """Common base of the identifiable types."""


class A(Base):
    """First concrete type."""


class B(Base):
    """Second concrete type."""


class C(Base):
    """Third concrete type."""


_KINDS: tuple[type[Base], ...] = (A, B, C)


def generate(rng=None) -> Base:
    """Create an A, B or C at random and report which."""
    source = random if rng is None else rng
    kind = _KINDS[source.randrange(len(_KINDS))]
    print(f"{kind.__name__} got instantiated")
    return kind()


def _identify(p: object) -> type[Base] | None:
    return next((kind for kind in _KINDS if isinstance(p, kind)), None)


def identify_pointer(p: Base | None) -> type[Base] | None:
    """Report the type of ``p`` (which may be None); return it or None."""
    print("Identifying from pointer")
    kind = _identify(p)
    print(f"p -> {kind.__name__ if kind else 'WTF'}")
    return kind


def identify_reference(p: Base) -> type[Base] | None:
    """Report the type of the object ``p``; return it or None."""
    print("Identifying from reference")
    kind = _identify(p)
    print(f"p = {kind.__name__ if kind else 'WTF'}")
    return kind


def main(argv: list[str] | None = None) -> int:
    """Generate a random object and identify a known one both ways."""
    generated = generate()
    known = A()
    identify_pointer(known)
    identify_reference(known)
    for _ in (generated, known):
        print("Base default Destructor called")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
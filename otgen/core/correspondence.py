"""Element-to-element correspondence relations.

Lookup is by object identity, not structural equality: two
phonologically identical elements may coexist in the same form, even
within one morpheme.
"""

from typing import Iterator, Optional

from otgen.core.contracts import IElement


class Correspondence:
    """Ordered relation of (left, right) element pairs with inverse lookup.

    Used for IO correspondence (input, output) and UI correspondence
    (underlying, input).
    """

    def __init__(self):
        self._pairs: list[tuple[IElement, IElement]] = []
        self._right_of: dict[int, IElement] = {}
        self._left_of: dict[int, IElement] = {}

    def add(self, left: IElement, right: IElement) -> "Correspondence":
        self._pairs.append((left, right))
        # First pair listed wins on lookup
        self._right_of.setdefault(id(left), right)
        self._left_of.setdefault(id(right), left)
        return self

    def right_of(self, left: IElement) -> Optional[IElement]:
        return self._right_of.get(id(left))

    def left_of(self, right: IElement) -> Optional[IElement]:
        return self._left_of.get(id(right))

    def copy(self) -> "Correspondence":
        """Copy of the relation; the elements themselves are shared."""
        dup = Correspondence()
        dup._pairs = list(self._pairs)
        dup._right_of = dict(self._right_of)
        dup._left_of = dict(self._left_of)
        return dup

    def __iter__(self) -> Iterator[tuple[IElement, IElement]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

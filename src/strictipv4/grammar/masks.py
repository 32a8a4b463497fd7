"""Contiguous subnet masks and inverted (ACE) masks.

A contiguous mask has a single transition between its run of ones and
its run of zeros. Which octet holds that transition fixes every other
octet: before it they are all 255 (subnet) or 0 (ACE), after it the
opposite. Recognition therefore tries one shape per transition octet,
last octet first, and the first shape that fits wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from strictipv4.errors import Diagnostic
from strictipv4.grammar.scanner import Scanner
from strictipv4.models.addressing import Address

# Octet values with a single 1->0 (subnet) or 0->1 (ACE) transition.
SUBNET_BOUNDARIES = frozenset({0, 128, 192, 224, 240, 248, 252, 254, 255})
ACE_BOUNDARIES = frozenset({0, 1, 3, 7, 15, 31, 63, 127, 255})


@dataclass(frozen=True)
class MaskShape:
    """Mask layout with the transition inside octet ``transition``.

    Attributes:
        transition: Index (0-3) of the octet holding the transition.
        before: Required value of every octet left of the transition.
        boundaries: Values the transition octet may take.
        after: Required value of every octet right of the transition.
    """

    transition: int
    before: int
    boundaries: frozenset[int]
    after: int

    def matches(self, octets: Address) -> bool:
        """Check whether four octets have this shape.

        >>> SUBNET_SHAPES[1].matches((255, 255, 128, 0))
        True
        >>> SUBNET_SHAPES[0].matches((255, 255, 128, 0))
        False
        """
        for index, octet in enumerate(octets):
            if index < self.transition:
                if octet != self.before:
                    return False
            elif index == self.transition:
                if octet not in self.boundaries:
                    return False
            elif octet != self.after:
                return False
        return True


def _shapes(before: int, boundaries: frozenset[int], after: int) -> tuple[MaskShape, ...]:
    return tuple(MaskShape(i, before, boundaries, after) for i in (3, 2, 1, 0))


SUBNET_SHAPES = _shapes(255, SUBNET_BOUNDARIES, 0)
ACE_SHAPES = _shapes(0, ACE_BOUNDARIES, 255)


def match_shape(octets: Address, shapes: tuple[MaskShape, ...]) -> MaskShape | None:
    """Return the first shape the octets fit, or None.

    >>> match_shape((255, 255, 255, 0), SUBNET_SHAPES).transition
    3
    >>> match_shape((0, 0, 0, 254), ACE_SHAPES) is None
    True
    """
    for shape in shapes:
        if shape.matches(octets):
            return shape
    return None


def _mask(scanner: Scanner, shapes: tuple[MaskShape, ...]) -> Address:
    start = scanner.pos
    octets = scanner.dotted()
    if match_shape(octets, shapes) is None:
        scanner.pos = start
        raise scanner.fail(Diagnostic.NO_MATCH, start)
    return octets


def subnet_mask(scanner: Scanner) -> Address:
    """Consume a contiguous subnet mask such as 255.255.240.0."""
    return _mask(scanner, SUBNET_SHAPES)


def ace_mask(scanner: Scanner) -> Address:
    """Consume an inverted (ACE wildcard) mask such as 0.0.15.255."""
    return _mask(scanner, ACE_SHAPES)

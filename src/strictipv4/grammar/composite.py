"""Address pairs: CIDR, address + mask, address + ACE mask, filters.

The conforming forms (cidr, subnet, acenet) require every host bit of
the address to be zero. The station forms (cidrsta, substa, acesta)
describe interface addresses and skip that check, as does filter, which
pairs two arbitrary addresses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from strictipv4.errors import Diagnostic
from strictipv4.grammar.masks import ace_mask, subnet_mask
from strictipv4.grammar.scanner import Scanner
from strictipv4.models.addressing import ALL_ONES, Address, address_to_int, host_mask


def conforms_to_prefix(address: Address, prefix_length: int) -> bool:
    """Check that the host bits outside the prefix are zero.

    >>> conforms_to_prefix((192, 0, 2, 0), 25)
    True
    >>> conforms_to_prefix((203, 0, 113, 1), 24)
    False
    """
    return address_to_int(address) & host_mask(prefix_length) == 0


def conforms_to_mask(address: Address, mask: Address) -> bool:
    """Check that the address has no bits outside a subnet mask.

    >>> conforms_to_mask((10, 1, 0, 0), (255, 255, 0, 0))
    True
    >>> conforms_to_mask((10, 1, 0, 1), (255, 255, 0, 0))
    False
    """
    return address_to_int(address) & (~address_to_int(mask) & ALL_ONES) == 0


def conforms_to_ace_mask(address: Address, ace: Address) -> bool:
    """Check that the address has no bits where the ACE mask has ones.

    >>> conforms_to_ace_mask((10, 1, 0, 0), (0, 0, 255, 255))
    True
    >>> conforms_to_ace_mask((10, 1, 2, 0), (0, 0, 255, 255))
    False
    """
    return address_to_int(address) & address_to_int(ace) == 0


@dataclass(frozen=True)
class CompositeForm:
    """An address, a separator, then a second component.

    Attributes:
        name: Rule name; also selects the separator from the config.
        second: Recognizer for the component after the separator.
        conforms: Consistency check between address and second component,
            or None when the form waives it.
        diagnostic: Reported when the consistency check fails.
    """

    name: str
    second: Callable[[Scanner], Any]
    conforms: Optional[Callable[[Address, Any], bool]] = None
    diagnostic: Diagnostic = Diagnostic.NO_MATCH

    def __call__(self, scanner: Scanner) -> tuple[Address, Any]:
        start = scanner.pos
        address = scanner.dotted()
        scanner.separator(scanner.config.separator_for(self.name))
        second = self.second(scanner)
        if self.conforms is not None and not self.conforms(address, second):
            scanner.pos = start
            raise scanner.fail(self.diagnostic, start)
        return address, second


CIDR = CompositeForm(
    "cidr", Scanner.prefix_length, conforms_to_prefix,
    Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_PREFIX,
)
SUBNET = CompositeForm(
    "subnet", subnet_mask, conforms_to_mask,
    Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_MASK,
)
ACENET = CompositeForm(
    "acenet", ace_mask, conforms_to_ace_mask,
    Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_MASK,
)
CIDRSTA = CompositeForm("cidrsta", Scanner.prefix_length)
SUBSTA = CompositeForm("substa", subnet_mask)
ACESTA = CompositeForm("acesta", ace_mask)
FILTER = CompositeForm("filter", Scanner.dotted)

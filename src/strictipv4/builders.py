"""Result builders: turn a rule match into the caller's value type.

A builder is called once per successful parse with the rule name and
the raw match (integers and 4-tuples). tuple_builder hands the raw
match back; ipaddress_builder converts it to standard library types.
"""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING, Any, Callable

from strictipv4.models.addressing import address_to_int, mask_to_prefix

if TYPE_CHECKING:
    from strictipv4.parser import RuleName

Builder = Callable[["RuleName", Any], Any]


def tuple_builder(rule: RuleName, value: Any) -> Any:
    """Return the match unchanged.

    octet and prefix rules give an int, address and mask rules a 4-tuple,
    cidr/cidrsta a (4-tuple, int) pair and the remaining composites a
    pair of 4-tuples.
    """
    return value


def _ipv4(address) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(address_to_int(address))


def ipaddress_builder(rule: RuleName, value: Any) -> Any:
    """Build ``ipaddress`` objects.

    Conforming cidr and subnet matches become IPv4Network, their station
    forms IPv4Interface. ACE forms and filter have no ipaddress
    counterpart and become a pair of IPv4Address.
    """
    name = str(rule)
    if name in ("octet", "prefix_length", "prefix"):
        return value
    if name in ("dotted", "subnet_mask", "acenet_mask"):
        return _ipv4(value)

    address, second = value
    if name in ("cidr", "cidrsta"):
        prefix_length = second
    elif name in ("subnet", "substa"):
        prefix_length = mask_to_prefix(second)
    else:
        return _ipv4(address), _ipv4(second)

    network = (address_to_int(address), prefix_length)
    if name in ("cidr", "subnet"):
        return ipaddress.IPv4Network(network)
    return ipaddress.IPv4Interface(network)

import ipaddress
from enum import Enum


class AddressClass(Enum):
    PRIVATE = "private"
    PUBLIC = "public"


# RFC1918 + IPv6 unique-local / link-local
PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
)


def classify(address) -> AddressClass:
    """Private if inside one of PRIVATE_NETWORKS, otherwise public."""
    if isinstance(address, str):
        address = ipaddress.ip_address(address)
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        address = address.ipv4_mapped
    for net in PRIVATE_NETWORKS:
        if address.version == net.version and address in net:
            return AddressClass.PRIVATE
    return AddressClass.PUBLIC


def is_private(address) -> bool:
    return classify(address) is AddressClass.PRIVATE

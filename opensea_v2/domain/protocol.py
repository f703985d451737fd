"""
Domain Layer: Seaport Protocol Versions
"""
from enum import Enum
from typing import Dict

SEAPORT_V1_1 = "0x00000000006c3852cbEf3e08E8dF289169EdE581"
SEAPORT_V1_4 = "0x00000000000001ad428e4906aE43D8F9852d0dD6"
SEAPORT_V1_5 = "0x00000000000000ADc04C56Bf30aC9d3c0aAF14dC"
SEAPORT_V1_6 = "0x0000000000000068f116a894984e2db1123eb395"


class ProtocolVersion(Enum):
    """Seaport revision; the value is the protocol tag OpenSea reports"""

    V1_1 = "seaport1.1"
    V1_4 = "seaport1.4"
    V1_5 = "seaport1.5"
    V1_6 = "seaport1.6"

    @property
    def address(self) -> str:
        """Deployed contract address, emitted verbatim"""
        return _ADDRESSES[self]


_ADDRESSES: Dict[ProtocolVersion, str] = {
    ProtocolVersion.V1_1: SEAPORT_V1_1,
    ProtocolVersion.V1_4: SEAPORT_V1_4,
    ProtocolVersion.V1_5: SEAPORT_V1_5,
    ProtocolVersion.V1_6: SEAPORT_V1_6,
}


def protocol_address(version: ProtocolVersion) -> str:
    return version.address

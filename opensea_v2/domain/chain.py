"""
Domain Layer: Chain Registry
Every blockchain the OpenSea API serves, with its wire name.
"""
from enum import Enum
from typing import Dict, FrozenSet


class Chain(str, Enum):
    """
    Supported chains.
    The value is the canonical name emitted on the wire; a few members also
    accept a legacy alias when decoding.
    """

    # Mainnet chains
    ETHEREUM = "ethereum"
    POLYGON = "matic"
    KLAYTN = "klaytn"
    BASE = "base"
    BSC = "bsc"
    ARBITRUM = "arbitrum"
    ARBITRUM_NOVA = "arbitrum_nova"
    AVALANCHE = "avalanche"
    OPTIMISM = "optimism"
    SOLANA = "solana"
    ZORA = "zora"

    # Testnet chains (keep _TEST_CHAINS in sync)
    GOERLI = "goerli"
    SEPOLIA = "sepolia"
    MUMBAI = "mumbai"
    BOABAB = "boabab"
    BASE_GOERLI = "base_goerli"
    BSC_TESTNET = "bsc_testnet"
    ARBITRUM_GOERLI = "arbitrum_goerli"
    AVALANCHE_FUJI = "avalanche_fuji"
    OPTIMISM_GOERLI = "optimism_goerli"
    SOLANA_DEVNET = "solana_devnet"
    ZORA_TESTNET = "zora_testnet"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "Chain | None":
        if isinstance(value, str):
            canonical = _ALIASES.get(value)
            if canonical is not None:
                return cls(canonical)
        return None

    @classmethod
    def parse(cls, name: str) -> "Chain":
        """Parses a canonical name or alias. Raises ValueError for unknown chains."""
        return cls(name)

    @classmethod
    def default(cls) -> "Chain":
        return cls.ETHEREUM

    def is_test(self) -> bool:
        return self in _TEST_CHAINS

    def is_live(self) -> bool:
        return not self.is_test()


# alias -> canonical name, decode only
_ALIASES: Dict[str, str] = {
    "mainnet": Chain.ETHEREUM.value,
    "polygon": Chain.POLYGON.value,
    "fuji": Chain.AVALANCHE_FUJI.value,
}

_TEST_CHAINS: FrozenSet[Chain] = frozenset({
    Chain.GOERLI,
    Chain.SEPOLIA,
    Chain.MUMBAI,
    Chain.BOABAB,
    Chain.BASE_GOERLI,
    Chain.BSC_TESTNET,
    Chain.ARBITRUM_GOERLI,
    Chain.AVALANCHE_FUJI,
    Chain.OPTIMISM_GOERLI,
    Chain.SOLANA_DEVNET,
    Chain.ZORA_TESTNET,
})

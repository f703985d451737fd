import pytest
from pydantic import BaseModel

from opensea_v2 import Chain

TEST_CHAINS = {
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
}


class ChainHolder(BaseModel):
    chain: Chain


@pytest.mark.parametrize("chain", list(Chain))
def test_chain_round_trip(chain):
    """Test that every chain parses back from its emitted name."""
    assert Chain.parse(str(chain)) is chain
    assert str(Chain.parse(str(chain))) == chain.value


def test_chain_display():
    """Test the canonical names of renamed chains."""
    assert str(Chain.POLYGON) == "matic"
    assert str(Chain.default()) == "ethereum"
    assert str(Chain.AVALANCHE_FUJI) == "avalanche_fuji"
    assert str(Chain.BSC_TESTNET) == "bsc_testnet"
    assert f"{Chain.ARBITRUM_NOVA}" == "arbitrum_nova"


@pytest.mark.parametrize(
    "alias,expected",
    [
        ("mainnet", Chain.ETHEREUM),
        ("polygon", Chain.POLYGON),
        ("fuji", Chain.AVALANCHE_FUJI),
        ("matic", Chain.POLYGON),
        ("ethereum", Chain.ETHEREUM),
    ],
)
def test_chain_aliases(alias, expected):
    """Test that aliases are accepted on decode."""
    assert Chain.parse(alias) is expected
    assert ChainHolder.model_validate({"chain": alias}).chain is expected


def test_chain_serializes_canonical_name():
    """Test that aliases never leak into serialized output."""
    holder = ChainHolder.model_validate({"chain": "polygon"})
    assert holder.model_dump(mode="json") == {"chain": "matic"}
    assert ChainHolder(chain=Chain.ETHEREUM).model_dump_json() == '{"chain":"ethereum"}'


def test_chain_rejects_unknown_names():
    """Test that unknown chains are a parse error."""
    with pytest.raises(ValueError):
        Chain.parse("dogechain")
    with pytest.raises(ValueError):
        Chain.parse("Ethereum")


def test_is_test_chain():
    """Test the production / test network split."""
    for chain in Chain:
        assert chain.is_test() == (chain in TEST_CHAINS)
        assert chain.is_live() == (chain not in TEST_CHAINS)
    assert not Chain.default().is_test()

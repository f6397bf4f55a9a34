"""Fund Me contract descriptor - deployed address and ABI for the web client"""
from typing import Dict, Optional

from utils.constants import CONTRACT_ADDRESS, CONTRACT_ADDRESSES, DEFAULT_NETWORK, get_active_network
from .fund_me_abi import FUND_ME_ABI
from .models import (
    AbiParameter,
    ConstructorEntry,
    ContractDescriptor,
    ErrorEntry,
    FallbackEntry,
    FunctionEntry,
    ReceiveEntry,
)


class UnknownNetworkError(KeyError):
    """Raised when no Fund Me deployment is known for a network"""

    def __init__(self, network: str):
        self.network = network
        known = ", ".join(sorted(CONTRACT_ADDRESSES))
        super().__init__(f"No Fund Me deployment for network '{network}' (known: {known})")

    def __str__(self) -> str:
        return self.args[0]


# Built once from the literal; later edits to FUND_ME_ABI or ABI don't reach them
_DESCRIPTORS = {
    network: ContractDescriptor(network=network, address=address, abi=FUND_ME_ABI)
    for network, address in CONTRACT_ADDRESSES.items()
}

ABI = tuple(_DESCRIPTORS[DEFAULT_NETWORK].to_abi())


def _resolve_network(network: Optional[str] = None) -> str:
    key = (network or "").strip().lower() or get_active_network()
    if key not in _DESCRIPTORS:
        raise UnknownNetworkError(key)
    return key


def list_networks() -> Dict[str, str]:
    """Network key -> deployed address"""
    return {network: d.address for network, d in _DESCRIPTORS.items()}


def get_contract_address(network: Optional[str] = None) -> str:
    return _DESCRIPTORS[_resolve_network(network)].address


def get_contract_descriptor(network: Optional[str] = None) -> ContractDescriptor:
    """Get the descriptor for a network, or the active one when not given"""
    return _DESCRIPTORS[_resolve_network(network)]


__all__ = [
    "ABI",
    "CONTRACT_ADDRESS",
    "AbiParameter",
    "ConstructorEntry",
    "ContractDescriptor",
    "ErrorEntry",
    "FallbackEntry",
    "FunctionEntry",
    "ReceiveEntry",
    "UnknownNetworkError",
    "get_contract_address",
    "get_contract_descriptor",
    "list_networks",
]

"""Constants for the application"""
import os
from dotenv import load_dotenv

load_dotenv()

# Fund Me contract deployments.
# Only one address is active at a time; the others are kept for redeploying
# the front-end against a different network.
DEFAULT_NETWORK = "default"

CONTRACT_ADDRESS = "0xd0896c97b14158109c1def74c6547a1b732f011f"

# Inactive alternates
ANVIL_CONTRACT_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"  # local anvil node
ZKSYNC_CONTRACT_ADDRESS = "0x4B5DF730c2e6b28E17013A1485E5d9BC41Efe021"

CONTRACT_ADDRESSES = {
    DEFAULT_NETWORK: CONTRACT_ADDRESS,
    "anvil": ANVIL_CONTRACT_ADDRESS,
    "zksync": ZKSYNC_CONTRACT_ADDRESS,
}

ADDRESS_PATTERN = r"^0x[0-9a-fA-F]{40}$"

def get_active_network() -> str:
    """Network served when a caller doesn't ask for one (FUND_ME_NETWORK)"""
    return os.getenv("FUND_ME_NETWORK", DEFAULT_NETWORK).strip().lower() or DEFAULT_NETWORK

AGENT_NAME = os.getenv("AGENT_NAME", "FundMeAgent")

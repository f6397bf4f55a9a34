from typing import Optional, List, Dict, Any
from uagents import Model

# ==================== CONTRACT REST MODELS ====================

class ContractRESTRequest(Model):
    network: Optional[str] = None  # Defaults to FUND_ME_NETWORK

class ContractRESTResponse(Model):
    success: bool
    network: Optional[str] = None
    address: Optional[str] = None
    abi: List[Dict[str, Any]] = []
    error: Optional[str] = None

class ContractNetworksRESTResponse(Model):
    success: bool
    active: Optional[str] = None
    networks: Dict[str, str] = {}  # network key -> contract address
    error: Optional[str] = None

# ==================== HEALTH REST MODELS ====================

class HealthRESTResponse(Model):
    status: str
    agent_name: str
    timestamp: int

from typing import Optional, List, Dict, Any
from uagents import Model

# ==================== CONTRACT PROTOCOL ====================

class ContractDescriptorRequest(Model):
    network: Optional[str] = None

class ContractDescriptorResponse(Model):
    network: Optional[str] = None
    address: Optional[str] = None
    abi: List[Dict[str, Any]] = []
    error: Optional[str] = None

"""Fund Me contract REST handlers - serve address and ABI to the web client"""
from typing import Optional
from uagents import Context
from rest_models import (
    ContractRESTRequest,
    ContractRESTResponse,
    ContractNetworksRESTResponse,
)
from contracts import get_contract_descriptor, list_networks
from utils.constants import get_active_network

def _descriptor_response(ctx: Context, network: Optional[str] = None) -> ContractRESTResponse:
    try:
        descriptor = get_contract_descriptor(network)
        ctx.logger.info(f"Serving Fund Me descriptor for {descriptor.network} ({descriptor.address})")
        return ContractRESTResponse(
            success=True,
            network=descriptor.network,
            address=descriptor.address,
            abi=descriptor.to_abi(),
        )
    except Exception as e:
        ctx.logger.error(f"Contract descriptor lookup failed: {e}")
        return ContractRESTResponse(success=False, network=network, error=str(e))

def register_contract_handlers(agent):
    """Register Fund Me contract REST handlers"""

    @agent.on_rest_get("/api/contract", ContractRESTResponse)
    async def handle_get_contract(ctx: Context) -> ContractRESTResponse:
        """Get address and ABI for the active network"""
        return _descriptor_response(ctx)

    @agent.on_rest_post("/api/contract", ContractRESTRequest, ContractRESTResponse)
    async def handle_contract_for_network(ctx: Context, req: ContractRESTRequest) -> ContractRESTResponse:
        """Get address and ABI for a specific network"""
        return _descriptor_response(ctx, req.network)

    @agent.on_rest_get("/api/contract/networks", ContractNetworksRESTResponse)
    async def handle_contract_networks(ctx: Context) -> ContractNetworksRESTResponse:
        """List known deployments"""
        try:
            return ContractNetworksRESTResponse(
                success=True,
                active=get_active_network(),
                networks=list_networks(),
            )
        except Exception as e:
            ctx.logger.error(f"Failed to list contract networks: {e}")
            return ContractNetworksRESTResponse(success=False, error=str(e))

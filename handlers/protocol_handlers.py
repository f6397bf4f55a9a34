"""Protocol message handlers"""
from enum import Enum
from uagents import Context, Model
from uagents.experimental.quota import QuotaProtocol, RateLimit
from protocol import (
    ContractDescriptorRequest,
    ContractDescriptorResponse,
)
from contracts import get_contract_descriptor

def register_protocol_handlers(agent):
    """Register all protocol message handlers"""

    # ==================== CONTRACT PROTOCOL ====================
    contract_protocol = QuotaProtocol(
        storage_reference=agent.storage,
        name="FundMe-Contract-Protocol",
        version="0.1.0",
        default_rate_limit=RateLimit(window_size_minutes=60, max_requests=100),
    )

    @contract_protocol.on_message(ContractDescriptorRequest, replies={ContractDescriptorResponse})
    async def handle_contract_descriptor(ctx: Context, sender: str, msg: ContractDescriptorRequest):
        try:
            descriptor = get_contract_descriptor(msg.network)
            response = ContractDescriptorResponse(
                network=descriptor.network,
                address=descriptor.address,
                abi=descriptor.to_abi(),
            )
        except Exception as e:
            ctx.logger.error(f"Contract descriptor request from {sender} failed: {e}")
            response = ContractDescriptorResponse(network=msg.network, error=str(e))
        await ctx.send(sender, response)

    agent.include(contract_protocol, publish_manifest=True)

def register_health_protocol(agent, agent_name):
    """Register health check protocol"""

    class HealthCheck(Model):
        pass

    class HealthStatus(str, Enum):
        HEALTHY = "healthy"
        UNHEALTHY = "unhealthy"

    class AgentHealth(Model):
        agent_name: str
        status: HealthStatus

    def agent_is_healthy() -> bool:
        # Healthy as long as the descriptor still loads
        get_contract_descriptor()
        return True

    health_protocol = QuotaProtocol(
        storage_reference=agent.storage,
        name="HealthProtocol",
        version="0.1.0"
    )

    @health_protocol.on_message(HealthCheck, replies={AgentHealth})
    async def handle_health_check(ctx: Context, sender: str, msg: HealthCheck):
        status = HealthStatus.UNHEALTHY
        try:
            if agent_is_healthy():
                status = HealthStatus.HEALTHY
        except Exception as err:
            ctx.logger.error(f"Health check failed: {err}")
        finally:
            await ctx.send(sender, AgentHealth(agent_name=agent_name, status=status))

    agent.include(health_protocol, publish_manifest=True)

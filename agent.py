"""
Fund Me Agent - serves the Fund Me contract descriptor

The web client fetches the deployed contract address and ABI from here
instead of embedding its own copy.
"""

import os
import time
from typing import Dict, Any
from uagents import Agent, Context
from dotenv import load_dotenv

from rest_models import (
    HealthRESTResponse,
)
from contracts import get_contract_descriptor
from handlers.contract_handlers import register_contract_handlers
from handlers.protocol_handlers import register_protocol_handlers, register_health_protocol
from utils.constants import AGENT_NAME, get_active_network

load_dotenv()

agent = Agent(
    name=AGENT_NAME,
    mailbox=True,
    port=int(os.getenv("PORT", "8023")),
    seed=os.getenv("AGENT_SEED", "0000000000000000000000000000000000000000000000000000000000000000--"),
)

# ==================== PROTOCOL HANDLERS ====================
register_protocol_handlers(agent)
register_health_protocol(agent, AGENT_NAME)

# ==================== REST ENDPOINTS ====================

@agent.on_rest_get("/api/health", HealthRESTResponse)
async def handle_health_rest(ctx: Context) -> Dict[str, Any]:
    """Health check via REST"""
    return {
        "status": "healthy",
        "agent_name": AGENT_NAME,
        "timestamp": int(time.time()),
    }

register_contract_handlers(agent)

# ==================== AGENT STARTUP ====================

@agent.on_event("startup")
async def startup_handler(ctx: Context):
    """Load the descriptor once so a broken ABI shows up at boot"""
    descriptor = get_contract_descriptor()
    ctx.logger.info(
        f"Fund Me contract on {descriptor.network}: {descriptor.address} "
        f"({len(descriptor.functions)} functions)"
    )

if __name__ == "__main__":
    print(f"Starting {AGENT_NAME} (network: {get_active_network()})")
    agent.run()

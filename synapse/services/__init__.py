"""
Core services for Synapse.

Services encapsulate business logic and coordinate between
repositories and the matching engine.
"""

from .synapse_service import SynapseService

__all__ = [
    "SynapseService",
]

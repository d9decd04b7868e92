"""PANELSEED

Idempotent provisioning and node-agent configuration rendering for a
game-server management panel deployment. Seeds the admin account, location,
node and port allocations into the panel store, and emits the node agent's
YAML configuration from the stored node record.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

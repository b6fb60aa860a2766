"""Transport-side providers.

    - ServerPool       -- ordered mirror list with round-robin rotation
    - TransportGateway -- one GET + decode per call against the active mirror
"""

from tunefetch.providers.gateway import Attempt, TransportGateway
from tunefetch.providers.server_pool import ServerPool

__all__ = ["Attempt", "ServerPool", "TransportGateway"]

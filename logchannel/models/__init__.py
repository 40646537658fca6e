"""logchannel data models — all Pydantic v2, all frozen (immutable)."""

from logchannel.models.priority import DEFAULT_PRIORITY, Priority, to_logging_level
from logchannel.models.routing import ChannelSpec, RoutingProfile, SinkSpec
from logchannel.models.status import ChannelStatus, RegistrySnapshot

__all__ = [
    # priority
    "DEFAULT_PRIORITY",
    "Priority",
    "to_logging_level",
    # routing
    "SinkSpec",
    "ChannelSpec",
    "RoutingProfile",
    # status
    "ChannelStatus",
    "RegistrySnapshot",
]

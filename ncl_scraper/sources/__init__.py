"""Source registry."""

from .nclonline import NCLOnlineSource

ALL_SOURCES = {
    "nclonline": NCLOnlineSource,
}

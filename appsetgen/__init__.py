"""appsetgen — ApplicationSet parameter generators."""

__version__ = "0.1.0"

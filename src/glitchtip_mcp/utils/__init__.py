from glitchtip_mcp.utils.timing import timed

__all__ = ["timed"]

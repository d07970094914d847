from glitchtip_mcp.logging.logger import setup_logger

__all__ = ["setup_logger"]

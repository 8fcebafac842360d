"""Small socket programs: address lookup, time server, TCP/UDP tools, upper-case echo servers and interface listing."""

__version__ = "0.1.0"
__all__ = [
    "addresses",
    "interfaces",
    "tcp_client",
    "time_server",
    "timeinfo",
    "toupper_server",
    "udp_tools",
]
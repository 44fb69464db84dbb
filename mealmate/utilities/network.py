"""Network helpers for the MealMate service startup banner."""
import socket
from typing import Optional

LOOPBACK_HOSTS = ("127.0.0.1", "localhost")


def get_local_ip() -> str:
    """Return the LAN address other devices can reach, or '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only makes the OS choose the
    outbound interface.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def get_lan_url(port: int) -> Optional[str]:
    """URL other devices on the network can open, or None when only loopback is available."""
    local_ip = get_local_ip()
    if local_ip in LOOPBACK_HOSTS:
        return None
    return f"http://{local_ip}:{port}"

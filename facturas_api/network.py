import socket

FALLBACK_IP = "127.0.0.1"


def get_local_ip_address() -> str:
    """
    IPv4 address of the interface holding the default route.

    Falls back to the first non-loopback address bound to the hostname, then
    to 127.0.0.1.
    """
    # A UDP connect sends nothing; it only makes the OS pick the outbound interface
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError:
        address = None
    finally:
        sock.close()

    if address and not address.startswith("127."):
        return address

    try:
        candidates = socket.gethostbyname_ex(socket.gethostname())[2]
    except OSError:
        candidates = []
    for candidate in candidates:
        if not candidate.startswith("127."):
            return candidate
    return FALLBACK_IP


def server_address(port: int) -> str:
    return f"http://{get_local_ip_address()}:{port}/"

"""
Port Manager - Finds a free port for the form server
"""
import socket


class PortManager:
    """Port lookup for regexform servers"""

    @staticmethod
    def is_port_available(port: int, host: str = "127.0.0.1") -> bool:
        """Check if a port can be bound on host"""
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
                sock.bind((host, port))
                return True
        except OSError:
            return False

    @staticmethod
    def find_available_port(start_port: int = 8080, host: str = "127.0.0.1", span: int = 100) -> int:
        """First free port in [start_port, start_port + span)"""
        for port in range(start_port, start_port + span):
            if PortManager.is_port_available(port, host):
                return port
        raise RuntimeError(f"No available port in {start_port}-{start_port + span - 1}")

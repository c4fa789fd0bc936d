"""
regexform Core - Application object tying patterns, port and server together
"""
import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from loguru import logger as log

from .form_server import FormServer
from .patterns import FormPattern
from .port_manager import PortManager


@dataclass
class RegexFormConfig:
    """Configuration for a regexform application"""
    port: int
    host: str = "127.0.0.1"
    heading: str = "Simple Form"
    patterns: FormPattern = field(default_factory=FormPattern.permissive)


class RegexForm:
    """
    Main regexform application class
    Serves the validated form on a free port
    """

    def __init__(self, patterns: Optional[FormPattern] = None, port: int = 8080, host: str = "127.0.0.1",
                 heading: str = "Simple Form", alias: Optional[str] = None, verbose: Optional[bool] = False):
        self.verbose = verbose
        self.id = alias or str(uuid.uuid4())[:8]

        self.config = RegexFormConfig(
            port=PortManager.find_available_port(port, host),
            host=host,
            heading=heading,
            patterns=patterns or FormPattern.permissive(),
        )
        if verbose: log.debug(f"{self}: Initialized config: {self.config}")

        self.form_server = FormServer(
            self.config.patterns,
            self.config.port,
            host=self.config.host,
            heading=self.config.heading,
            verbose=bool(verbose),
        )

        if verbose: log.success(f"{self}: Successfully initialized!")

    def __repr__(self):
        return f"RegexForm.{self.id}"

    @property
    def url(self) -> str:
        return self.form_server.url

    async def start(self, attempts: int = 30) -> bool:
        """Start the server and wait until it answers its health check"""
        for i in range(attempts):
            if await self.form_server.is_running():
                log.success(f"{self}: Serving form at {self.url}")
                return True
            if self.verbose: log.debug(f"{self}: Waiting for server... ({i + 1}/{attempts})")
            await asyncio.sleep(0.5)

        log.error(f"{self}: Server failed to start on {self.url}")
        return False

    async def stop(self):
        """Stop the server"""
        await self.form_server.stop()

    def status(self) -> Dict[str, Any]:
        """Get application status"""
        return {
            "id": self.id,
            "patterns": self.config.patterns.sources,
            "server": self.form_server.get_status(),
            "urls": {
                "form": f"{self.url}/",
                "health": f"{self.url}/health",
            },
        }

    async def __aenter__(self):
        """Async context manager entry"""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.stop()


# Factory function - main API entry point
def regexform(patterns: Optional[FormPattern] = None, port: int = 8080, host: str = "127.0.0.1",
              heading: str = "Simple Form", alias: Optional[str] = None, verbose: Optional[bool] = False) -> RegexForm:
    """
    Create regexform application instance

    Usage:
        app = regexform(FormPattern.strict())
        await app.start()
    """
    return RegexForm(patterns, port, host, heading, alias, verbose)

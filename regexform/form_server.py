import asyncio
import threading
from functools import cached_property
from typing import Optional, Dict, Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger as log

from .patterns import FormPattern
from .rendering import render_form
from .validator import FormSubmission, ValidationResult, validate


def create_app(patterns: Optional[FormPattern] = None, heading: str = "Simple Form", verbose: bool = False) -> FastAPI:
    """Build the FastAPI app serving the form on a single route."""
    patterns = patterns or FormPattern.permissive()
    app = FastAPI(title="regexform")
    app.state.patterns = patterns

    # health endpoint
    @app.get("/health")
    def health():
        if verbose: log.debug("Serving health check")
        return JSONResponse({"status": "ok"})

    @app.get("/", response_class=HTMLResponse)
    def show_form():
        return render_form(FormSubmission(), ValidationResult.empty(), title=heading)

    @app.post("/", response_class=HTMLResponse)
    async def submit_form(request: Request):
        submission = FormSubmission.from_form(await request.form())
        if submission.save:
            result = validate(submission, patterns, verbose=verbose)
            if verbose: log.debug(f"Validated submission, errors={result.errors}")
        else:
            # posted without the save marker: echo values only
            result = ValidationResult.empty()
        return render_form(submission, result, title=heading)

    return app


class FormServer:
    """Runs the form app under uvicorn in a background thread."""

    def __init__(self, patterns: FormPattern, port: int, host: str = "127.0.0.1",
                 heading: str = "Simple Form", verbose: bool = False):
        self.patterns = patterns
        self.port = port
        self.host = host
        self.heading = heading
        self.verbose = verbose
        self.url = f"http://{self.host}:{self.port}"

        self._server: Optional[uvicorn.Server] = None
        self._started = False
        if self.verbose: log.debug(f"FormServer config: url={self.url}, patterns={self.patterns}")

    def __repr__(self) -> str:
        return f"<FormServer url={self.url}>"

    @cached_property
    def app(self) -> FastAPI:
        return create_app(self.patterns, heading=self.heading, verbose=self.verbose)

    @cached_property
    def thread(self) -> threading.Thread:
        # built before the thread starts so stop() can always reach it
        cfg = uvicorn.Config(self.app, host=self.host, port=self.port, log_level="info")
        server = self._server = uvicorn.Server(cfg)

        def run():
            self._started = True
            if self.verbose: log.debug(f"Starting FormServer on {self.url}")
            server.run()
            self._started = False
            if self.verbose: log.debug("FormServer shutdown")

        t = threading.Thread(target=run, daemon=True)
        if self.verbose: log.debug("FormServer thread launched")
        return t

    async def is_running(self) -> bool:
        if not self.thread.is_alive():
            if self.thread.ident is not None:
                # a finished thread cannot be restarted
                del self.__dict__["thread"]
            self.thread.start()

        try:
            import aiohttp
            async with aiohttp.ClientSession() as s:
                async with s.get(f"{self.url}/health", timeout=aiohttp.ClientTimeout(total=2)) as r:
                    ok = r.status < 500
                    if self.verbose: log.debug(f"Health check at {self.url}/health: {r.status}")
                    return ok
        except Exception as err:
            log.warning(f"Health check error: {err}")
            return False

    async def stop(self, timeout: float = 5.0) -> None:
        if self._server is None or self.thread.ident is None:
            return
        if self.verbose: log.debug("Stopping FormServer")
        # also covers a server still in startup, which exits once serving begins
        self._server.should_exit = True
        if self.thread.is_alive():
            await asyncio.to_thread(self.thread.join, timeout)
        self._started = self.thread.is_alive()
        if not self._started:
            log.success("FormServer stopped")
        else:
            log.warning(f"FormServer still running after {timeout}s")

    def get_status(self) -> Dict[str, Any]:
        status = {
            "host": self.host,
            "port": self.port,
            "url": self.url,
            "running": self._started,
        }
        if self.verbose: log.debug(f"Status: {status}")
        return status

"""Server entry point for the ``contact-extractor`` console script.

Integrated mode serves the API and the upload page from one uvicorn process.
Separate mode runs the API and a standalone NiceGUI process side by side,
with the UI pointed at the API through ``API_BASE_URL``.
"""

import logging
import os
import subprocess
import sys
import time
from dataclasses import dataclass

from dotenv import load_dotenv

from contact_extractor.config import get_config

logger = logging.getLogger(__name__)

RUN_MODES = ("integrated", "separate")
WILDCARD_HOSTS = frozenset({"", "0.0.0.0", "::"})


@dataclass(frozen=True)
class ServerOptions:
    """Process-level settings read from the environment."""

    host: str
    port: int
    ui_port: int
    log_level: str
    mode: str

    @classmethod
    def from_env(cls) -> "ServerOptions":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            ui_port=get_config().ui_port,
            log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
            mode=os.getenv("RUN_MODE", "integrated").lower(),
        )

    @property
    def api_base_url(self) -> str:
        """URL a local UI process uses to reach the API."""
        host = "localhost" if self.host in WILDCARD_HOSTS else self.host
        return f"http://{host}:{self.port}"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def ui_process_env(options: ServerOptions) -> dict[str, str]:
    """Environment for the standalone UI process in separate mode."""
    env = dict(os.environ)
    env["API_BASE_URL"] = options.api_base_url
    env["UI_PORT"] = str(options.ui_port)
    return env


def run_integrated(options: ServerOptions) -> None:
    """Serve the API and mount the NiceGUI page on the same app."""
    import uvicorn
    from nicegui import ui

    from contact_extractor.api.app import create_app
    from contact_extractor.ui.upload_page import upload_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="Contact Extractor",
        favicon="📱",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "contact-extractor-secret"),
    )

    logger.info(f"Serving API and upload page on {options.api_base_url}")
    uvicorn.run(app, host=options.host, port=options.port, log_level=options.log_level)


def run_separate(options: ServerOptions) -> None:
    """Run the API and the UI as two child processes until either exits."""
    api_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "contact_extractor.api.app:app",
            "--host",
            options.host,
            "--port",
            str(options.port),
            "--log-level",
            options.log_level,
        ]
    )
    ui_proc = subprocess.Popen(
        [sys.executable, "-m", "contact_extractor.ui.upload_page"],
        env=ui_process_env(options),
    )
    logger.info(
        f"API on {options.api_base_url}, upload page on port {options.ui_port}"
    )

    try:
        while api_proc.poll() is None and ui_proc.poll() is None:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in (api_proc, ui_proc):
            proc.terminate()
        for proc in (api_proc, ui_proc):
            proc.wait()


def main() -> None:
    """Start the server in the mode named by ``RUN_MODE``."""
    load_dotenv()
    options = ServerOptions.from_env()
    configure_logging(options.log_level)

    if options.mode not in RUN_MODES:
        raise SystemExit(
            f"Unknown RUN_MODE {options.mode!r}; expected one of {', '.join(RUN_MODES)}"
        )

    logger.info(f"Starting Contact Extractor in {options.mode} mode")
    if options.mode == "separate":
        run_separate(options)
    else:
        run_integrated(options)


if __name__ == "__main__":
    main()

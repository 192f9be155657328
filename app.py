import logging
import os
import socket

from neuropal_lens.logging_config import configure_logging
from neuropal_lens.ui.dash_app import DEFAULT_CONFIG_ROOT, create_dash_app

configure_logging()
logger = logging.getLogger("neuropal_lens.app")

app = create_dash_app(DEFAULT_CONFIG_ROOT)
server = app.server

PORT_SEARCH_LIMIT = 100


def find_free_port(start_port: int, host: str = "localhost") -> int:
    """First port from start_port that nothing is listening on, else start_port."""
    for port in range(start_port, start_port + PORT_SEARCH_LIMIT):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8051"))
    host = os.getenv("HOST", "0.0.0.0")
    debug = os.getenv("DEBUG", "0") == "1"

    final_port = find_free_port(preferred_port)
    if final_port != preferred_port:
        logger.warning(
            "Port taken, using the next free one",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    logger.info(
        "Starting NeuroPAL Lens",
        extra={"host": host, "port": final_port, "debug": debug, "config_root": str(DEFAULT_CONFIG_ROOT)},
    )
    app.run(host=host, port=final_port, debug=debug)


if __name__ == "__main__":
    main()

import logging
import ssl
import sys
from pathlib import Path
from typing import Dict

import uvicorn

from app import config

logger = logging.getLogger(__name__)

KEY_FILE = "localhost-key.pem"
CERT_FILE = "localhost.pem"


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def resolve_ssl_options(use_https: bool, cert_dir: Path) -> Dict[str, str]:
    """Return uvicorn TLS options, or an empty dict to serve plain HTTP.

    HTTPS is attempted when asked for or when both certificate files exist.
    A pair that cannot be loaded falls back to HTTP.
    """
    key_path = cert_dir / KEY_FILE
    cert_path = cert_dir / CERT_FILE
    if not (use_https or (key_path.is_file() and cert_path.is_file())):
        return {}
    try:
        ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER).load_cert_chain(str(cert_path), str(key_path))
    except OSError as exc:
        logger.error("Failed to load TLS certificates from %s, falling back to HTTP: %s", cert_dir, exc)
        return {}
    return {"ssl_keyfile": str(key_path), "ssl_certfile": str(cert_path)}


def main() -> None:
    setup_logging()
    ssl_options = resolve_ssl_options(config.USE_HTTPS, config.CERT_DIR)
    scheme = "https" if ssl_options else "http"
    logger.info("Starting %s server on %s://localhost:%s", scheme.upper(), scheme, config.PORT)
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT, **ssl_options)


if __name__ == "__main__":
    main()

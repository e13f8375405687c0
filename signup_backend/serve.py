"""Run the signup API with uvicorn.

Usage:
    python -m signup_backend.serve
"""
import logging
import sys

import uvicorn

from signup_backend.core.config import load_settings
from signup_backend.main import create_app


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

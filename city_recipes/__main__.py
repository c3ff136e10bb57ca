from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_SERVER_CONFIG, ServerConfig


def main(config: ServerConfig = DEFAULT_SERVER_CONFIG) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "city_recipes.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()

from loguru import logger

from dendron_nav.cli import app


def main() -> None:
    logger.debug("dendron-nav started")
    app()


if __name__ == "__main__":
    main()

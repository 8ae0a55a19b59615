# chatificial/__main__.py

from chatificial.cli import main
from chatificial.utils.logger import logger


def run() -> int:
    logger.info("Application started.")
    try:
        return main()
    finally:
        logger.info("Application terminated.")


if __name__ == "__main__":
    raise SystemExit(run())

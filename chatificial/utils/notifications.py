# chatificial/utils/notifications.py

import sys
from typing import TextIO

from chatificial.utils.logger import logger


class ConsoleNotifier:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def notify(self, message: str) -> None:
        logger.info(message)
        print(message, file=self.stream or sys.stdout)

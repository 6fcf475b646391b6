#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
from typing import Optional

from anotherday.config import AppConfig

logger = logging.getLogger(__name__)


class DayLogStore:
    """
    One plain-text file per day: <store_dir>/<yyyy-mm-dd>.txt
    Append-only. No locking: concurrent writers race at the filesystem level.
    """

    def __init__(self, cfg: Optional[AppConfig] = None):
        self.cfg = cfg or AppConfig()
        self.store_dir = self.cfg.store_dir

    def path_for(self, day: str) -> str:
        return os.path.join(self.store_dir, f"{day}.txt")

    def ensure_dir(self) -> None:
        if not os.path.isdir(self.store_dir):
            os.makedirs(self.store_dir, exist_ok=True)
            logger.debug("created store directory %s", self.store_dir)

    def read_day_text(self, day: str) -> str:
        # FileNotFoundError for a day with no records is left to the caller
        with open(self.path_for(day), "r", encoding="utf-8") as f:
            return f.read()

    def append_line(self, day: str, line: str) -> None:
        self.ensure_dir()
        path = self.path_for(day)
        # binary append so os.linesep is written as-is on every platform
        with open(path, "ab") as f:
            f.write((line + os.linesep).encode("utf-8"))
        logger.debug("appended to %s: %s", path, line)

# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import List

from anotherday.core.entry_codec import EntryCodec
from anotherday.domain.models import Entry
from anotherday.storage.day_log import DayLogStore


class EntryRepo:
    def __init__(self, store: DayLogStore, codec: EntryCodec):
        self.store = store
        self.codec = codec

    def append(self, day: str, entry: Entry) -> None:
        self.store.append_line(day, self.codec.encode(entry))

    def list_for_day(self, day: str) -> List[Entry]:
        # a fresh list per call; nothing is carried between days
        return self.codec.decode_lines(self.store.read_day_text(day))

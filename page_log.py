# pylint: disable=C0114,C0116,C0115
from collections.abc import MutableMapping
from typing import Iterator


class PageLog(MutableMapping[str, list[str]]):
    """Build warnings grouped by page path.

    Warnings noted while a page is being rendered stay pending until the page
    is written, then `flush(path)` files them under that path.
    """

    def __init__(self) -> None:
        self.pages: dict[str, list[str]] = {}
        self.pending: list[str] = []

    def __setitem__(self, key: str, value: list[str]) -> None:
        self.pages[key] = value

    def __getitem__(self, key: str) -> list[str]:
        return self.pages[key]

    def __delitem__(self, key: str) -> None:
        del self.pages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def note(self, message: str):
        self.pending.append(message)

    def flush(self, path: str):
        self.pages.setdefault(path, []).extend(self.pending)
        self.pending = []

    def report_lines(self) -> list[str]:
        return [
            f"⚠️  {page}: {', '.join(page_warnings)}"
            for page, page_warnings in self.pages.items()
            if len(page_warnings) > 0
        ]

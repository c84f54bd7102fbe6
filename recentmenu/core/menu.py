"""Menu placement: a path of labelled, optionally weighted entries (File > Open Recent > leaf)."""

from typing import Iterable, Optional


class MenuEntry:
    """One level of a menu path. Lower weight sorts first; None means unweighted."""

    def __init__(self, name: str, weight: Optional[float] = None):
        self.name = name
        self.weight = weight

    def __eq__(self, other) -> bool:
        if not isinstance(other, MenuEntry):
            return NotImplemented
        return self.name == other.name and self.weight == other.weight

    def __repr__(self) -> str:
        if self.weight is None:
            return "MenuEntry(%r)" % self.name
        return "MenuEntry(%r, weight=%r)" % (self.name, self.weight)


class MenuPath(list):
    """Ordered list of MenuEntry, root first."""

    def __init__(self, entries: Iterable[MenuEntry] = ()):
        super().__init__(entries)

    @classmethod
    def from_names(cls, *names: str) -> "MenuPath":
        return cls(MenuEntry(n) for n in names)

    @property
    def leaf(self) -> Optional[MenuEntry]:
        return self[-1] if self else None

    def names(self) -> list[str]:
        return [e.name for e in self]

    def menu_string(self, separator: str = " > ") -> str:
        """e.g. 'File > Open Recent > image.tif'."""
        return separator.join(self.names())

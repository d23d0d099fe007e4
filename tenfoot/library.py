"""Game library records as supplied by the store backend, and their ordering."""
from __future__ import annotations

from typing import Callable, Iterable, Literal, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

StoreType = Literal["steam", "epic", "gog"]
STORES: tuple[StoreType, ...] = ("steam", "epic", "gog")


class Game(BaseModel):
    id: str
    name: str
    store: StoreType
    installed: bool = False
    install_path: str | None = None
    executable: str | None = None
    playtime_minutes: int | None = None
    last_played: int | None = None
    installed_at: int | None = None
    cover_url: str | None = None
    size_bytes: int | None = None
    version: str | None = None


def game_key(game: Game) -> str:
    """Stable identity across stores, e.g. "steam:570"."""
    return f"{game.store}:{game.id}"


def _sort_key(game: Game) -> tuple:
    played = game.last_played or 0
    if game.installed:
        return (0, -played, -(game.installed_at or 0), "")
    return (1, -played, 0, game.name.casefold())


def sort_library(games: Iterable[Game]) -> list[Game]:
    """Installed games first, each group most recently played first.

    Installed ties fall back to most recently installed; games that are not
    installed fall back to their name.
    """
    return sorted(games, key=_sort_key)


def filter_by_store(games: Iterable[Game], store: StoreType | None) -> list[Game]:
    if store is None:
        return list(games)
    return [g for g in games if g.store == store]


def section_break_index(
    items: Sequence[T],
    is_installed: Callable[[T], bool] = lambda item: bool(getattr(item, "installed", False)),
) -> int | None:
    """Index of the first item that is not installed.

    None when every item is installed, or when the very first item is not
    (there is no first section to jump back to).
    """
    for index, item in enumerate(items):
        if not is_installed(item):
            return index if index > 0 else None
    return None

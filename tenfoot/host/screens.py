"""Built-in screens: the store picker and the (optionally store-filtered) library."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from ..effects import CENTER
from ..grid import NavigationGrid
from ..keys import Direction
from ..library import STORES, Game, StoreType, filter_by_store, game_key, section_break_index, sort_library
from .navigator import MountedScreen
from .router import register_screen

if TYPE_CHECKING:
    from ..layout import Columns
    from .router import KeyRouter


@register_screen("stores")
def stores_screen(
    router: KeyRouter,
    on_select: Callable[[StoreType], None] | None = None,
) -> MountedScreen:
    """One row of store tiles; left/right wrap, down leaves for the bottom bar."""
    grid = NavigationGrid(
        len(STORES),
        len(STORES),
        router.grid_options(wrap_horizontal=True),
        on_navigate_down=router.leave(Direction.DOWN),
        on_focus=router.grid_focus,
    )
    for index, store in enumerate(STORES):
        grid.register_item(index, store)
    return MountedScreen("stores", grid, items=STORES, on_select=on_select)


@register_screen("library")
def library_screen(
    router: KeyRouter,
    games: Sequence[Game] = (),
    store: StoreType | None = None,
    columns: Columns | None = None,
    on_select: Callable[[Game], None] | None = None,
) -> MountedScreen:
    """Library grid split into installed and not-installed sections.

    Focused cards are centered so a card growing on focus is never clipped.
    """
    ordered = sort_library(filter_by_store(games, store))
    grid = NavigationGrid(
        len(ordered),
        columns if columns is not None else router.columns,
        router.grid_options(section_break_index=section_break_index(ordered)),
        on_navigate_up=router.leave(Direction.UP),
        on_navigate_down=router.leave(Direction.DOWN),
        on_focus=router.grid_focus,
        scroll=CENTER,
    )
    for index, game in enumerate(ordered):
        grid.register_item(index, game_key(game))
    return MountedScreen(
        store or "library",
        grid,
        items=ordered,
        searchable=True,
        label_of=lambda game: game.name,
        on_select=on_select,
    )

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from core.song_list import SongListView
from db.models import Binder


@dataclass
class GridScreen:
    name: ClassVar[str] = "grid"


@dataclass
class BinderSongsScreen:
    name: ClassVar[str] = "binder_songs"

    binder: Binder
    view: SongListView = field(default_factory=SongListView)


@dataclass
class SongManagerScreen:
    name: ClassVar[str] = "song_manager"

    view: SongListView = field(default_factory=SongListView)


Screen = Union[GridScreen, BinderSongsScreen, SongManagerScreen]

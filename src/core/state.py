from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/error

class AppState(QObject):
    notification = Signal(object)   # emits Notify
    screen_changed = Signal(str)    # grid / binder_songs / song_manager

    def __init__(self, config=None):
        super().__init__()
        self.config = config
        self.db = None
        self.status: Notify | None = None

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.status = Notify(message=message, notify_type=notify_type)
        self.notification.emit(self.status)

    def clear_status(self):
        self.status = None

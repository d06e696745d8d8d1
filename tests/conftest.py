import pytest

from core.config import AppConfig
from core.state import AppState
from db.database import Database
from db.models import Song

AVE_MARIA = Song(id=1, title="Ave Maria", composer="Bach", link="")
AMAZING_GRACE = Song(id=2, title="Amazing Grace", composer="Unknown", link="http://x")


@pytest.fixture
def sample_songs():
    return [AVE_MARIA, AMAZING_GRACE]


@pytest.fixture
def config(tmp_path):
    return AppConfig(data_dir=str(tmp_path), seed_binder_count=6)


@pytest.fixture
def db(config):
    with Database.open(config) as database:
        yield database


@pytest.fixture
def app_state(config):
    return AppState(config)


class LinkOpener:
    """Stands in for webbrowser.open."""

    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.opened = []

    def __call__(self, url):
        if self.error is not None:
            raise self.error
        self.opened.append(url)
        return self.result


@pytest.fixture
def opener():
    return LinkOpener()

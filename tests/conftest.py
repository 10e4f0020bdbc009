import pytest
from recordstore import RecordStore, BYTES, STRING
from recordstore.cli.people_cli import open_people


@pytest.fixture
def store_paths(tmp_path):
    """Data and index file paths inside a temporary directory."""
    return str(tmp_path / 'records.db'), str(tmp_path / 'records.idx')


@pytest.fixture
def people_store(store_paths):
    """Temporary store of Person records keyed by int."""
    store = open_people(*store_paths)
    yield store
    store.close()


@pytest.fixture
def text_store(store_paths):
    """Temporary store of bytes values keyed by str."""
    store = RecordStore(*store_paths, STRING, BYTES)
    yield store
    store.close()

import pytest

from hexflap.score_store import InMemoryScoreStore, ScoreStore, ScoreStoreError

KEY = "chipFlap_highScore"


@pytest.fixture
def db_store(tmp_path):
    store = ScoreStore(str(tmp_path / "scores.db"))
    yield store
    store.close()


def test_missing_key_defaults_to_zero(db_store):
    assert db_store.get(KEY) == 0


def test_save_keeps_the_maximum(db_store):
    db_store.save(KEY, 5)
    assert db_store.get(KEY) == 5
    db_store.save(KEY, 3)
    assert db_store.get(KEY) == 5
    db_store.save(KEY, 8)
    assert db_store.get(KEY) == 8


def test_keys_are_independent(db_store):
    db_store.save(KEY, 4)
    db_store.save("other", 9)
    assert db_store.get(KEY) == 4


def test_score_survives_reopening(tmp_path):
    path = str(tmp_path / "scores.db")
    first = ScoreStore(path)
    first.save(KEY, 12)
    first.close()

    second = ScoreStore(path)
    assert second.get(KEY) == 12
    second.close()


def test_unopenable_database_raises_store_error(tmp_path):
    with pytest.raises(ScoreStoreError):
        ScoreStore(str(tmp_path / "missing" / "scores.db"))


def test_closed_connection_raises_store_error(tmp_path):
    store = ScoreStore(str(tmp_path / "scores.db"))
    store.close()
    with pytest.raises(ScoreStoreError):
        store.get(KEY)
    with pytest.raises(ScoreStoreError):
        store.save(KEY, 1)


def test_in_memory_store_matches_interface():
    store = InMemoryScoreStore()
    assert store.get(KEY) == 0
    store.save(KEY, 6)
    store.save(KEY, 2)
    assert store.get(KEY) == 6

from pim_app.defaults import INITIAL_PARTS, fetch_defaults, load_initial_parts
from pim_app.models import Part
from pim_app.persistence import PartsRepository
from pim_app.storage import MemoryKeyValueStore


def test_fetch_defaults_returns_fresh_copy():
    first = fetch_defaults()
    first.clear()
    assert fetch_defaults() == list(INITIAL_PARTS)
    assert [p.name for p in INITIAL_PARTS] == ["Engine Oil Filter", "Brake Pads"]


def test_initial_parts_prefer_saved_data():
    repo = PartsRepository(MemoryKeyValueStore(), clock=lambda: 1000)
    assert load_initial_parts(repo) == list(INITIAL_PARTS)
    saved = [Part(id="z", name="Saved", quantity=1, price=1.0)]
    repo.save(saved)
    assert load_initial_parts(repo) == saved

import pytest

from tests.conftest import Material, Texture
from wren.handle import AssetHandle, ReleasedHandleError


def test_wrap_starts_with_single_reference():
    handle = AssetHandle.wrap(Texture("grass"))

    assert handle.reference_count == 1
    assert handle.asset_type is Texture
    assert handle.read() == Texture("grass")


def test_clone_shares_payload_and_counter():
    value = Texture("grass")
    handle = AssetHandle.wrap(value)

    clone = handle.clone()

    assert handle.reference_count == 2
    assert clone.reference_count == 2
    assert clone.read() is value  # never deep-copied
    assert clone.same_asset(handle)


def test_release_decrements_once():
    handle = AssetHandle.wrap(Texture("grass"))
    clone = handle.clone()

    clone.release()
    clone.release()

    assert clone.released
    assert handle.reference_count == 1


def test_released_handle_cannot_be_read_or_cloned():
    handle = AssetHandle.wrap(Texture("grass"))
    handle.release()

    with pytest.raises(ReleasedHandleError):
        handle.read()
    with pytest.raises(ReleasedHandleError):
        handle.clone()


def test_payload_dropped_with_last_reference():
    handle = AssetHandle.wrap(Texture("grass"))
    clone = handle.clone()

    handle.release()
    assert clone.read() == Texture("grass")

    store = clone._store
    clone.release()
    assert store.count == 0
    assert store.value is None


def test_context_manager_releases_on_exit():
    handle = AssetHandle.wrap(Texture("grass"))

    with handle.clone() as clone:
        assert handle.reference_count == 2
        assert clone.read().name == "grass"

    assert handle.reference_count == 1


def test_garbage_collected_clone_releases():
    handle = AssetHandle.wrap(Texture("grass"))
    clone = handle.clone()
    assert handle.reference_count == 2

    del clone

    assert handle.reference_count == 1


def test_dropping_payload_releases_nested_handles():
    texture = AssetHandle.wrap(Texture("grass"))
    material = AssetHandle.wrap(Material(texture=texture.clone()))
    assert texture.reference_count == 2

    material.release()

    assert texture.reference_count == 1


def test_downcast_to_matching_type():
    handle = AssetHandle.wrap(Texture("grass"))
    erased = handle.erase()

    typed = erased.downcast(Texture)

    assert typed is not None
    assert typed.same_asset(handle)
    assert typed.read() is handle.read()
    assert handle.reference_count == 2


def test_downcast_to_other_type_is_non_destructive():
    handle = AssetHandle.wrap(Texture("grass")).erase()

    assert handle.downcast(Material) is None

    # The erased handle is untouched and can still be narrowed.
    assert handle.reference_count == 1
    assert not handle.released
    assert handle.downcast(Texture) is not None


def test_downcast_requires_exact_type():
    class SpecialTexture(Texture):
        pass

    handle = AssetHandle.wrap(SpecialTexture("lava"))

    assert handle.downcast(Texture) is None
    assert handle.downcast(SpecialTexture) is not None


def test_erase_keeps_reference_count():
    handle = AssetHandle.wrap(Texture("grass"))

    erased = handle.erase()

    assert erased.reference_count == 1
    assert erased.asset_type is Texture

import pytest

from quest.suspects.directory import SuspectDirectory, djb2_hash


def test_hash_known_values():
    assert djb2_hash("", 31) == 5381 % 31
    assert djb2_hash("a", 31) == (5381 * 33 + ord("a")) % 31
    assert djb2_hash("a", 31) == 9


def test_hash_is_deterministic():
    first = djb2_hash("charuto queimado", 31)
    assert all(djb2_hash("charuto queimado", 31) == first for _ in range(10))
    assert 0 <= first < 31


def test_hash_uses_utf8_bytes():
    assert 0 <= djb2_hash("batom no lavatório", 31) < 31
    assert djb2_hash("ó", 1000) == ((5381 * 33 + 0xC3) * 33 + 0xB3) % 1000


def test_hash_rejects_non_positive_size():
    with pytest.raises(ValueError):
        djb2_hash("x", 0)
    with pytest.raises(ValueError):
        SuspectDirectory(0)


def test_insert_and_lookup():
    directory = SuspectDirectory(31)
    directory.insert_or_update("pegadas molhadas", "Jardineiro")
    assert directory.lookup("pegadas molhadas") == "Jardineiro"
    assert "pegadas molhadas" in directory
    assert len(directory) == 1


def test_lookup_miss_returns_none():
    directory = SuspectDirectory(31)
    assert directory.lookup("recibo rasgado") is None
    assert "recibo rasgado" not in directory


def test_overwrite_keeps_single_entry():
    directory = SuspectDirectory(31)
    directory.insert_or_update("charuto queimado", "Marido")
    directory.insert_or_update("charuto queimado", "Contador")
    assert directory.lookup("charuto queimado") == "Contador"
    assert len(directory) == 1
    bucket = directory.bucket_for("charuto queimado")
    assert [key for key, _ in directory.chain(bucket)] == ["charuto queimado"]


def test_collisions_chain_with_head_insertion():
    directory = SuspectDirectory(1)
    directory.insert_or_update("a", "1")
    directory.insert_or_update("b", "2")
    directory.insert_or_update("c", "3")
    assert directory.chain(0) == [("c", "3"), ("b", "2"), ("a", "1")]
    directory.insert_or_update("b", "20")
    assert directory.chain(0) == [("c", "3"), ("b", "20"), ("a", "1")]
    assert directory.lookup("a") == "1"
    assert directory.lookup("b") == "20"
    assert len(directory) == 3


def test_from_pairs_and_items():
    pairs = [("pegadas molhadas", "Jardineiro"), ("sementes pisoteadas", "Jardineiro")]
    directory = SuspectDirectory.from_pairs(pairs, size=5)
    assert directory.size == 5
    assert sorted(directory.items()) == sorted(pairs)


def test_teardown_releases_entries():
    directory = SuspectDirectory.from_pairs([("a", "1"), ("b", "2"), ("c", "3")], size=2)
    assert directory.teardown() == 3
    assert len(directory) == 0
    assert list(directory.items()) == []

import pytest

from drampower.burst_storage import BurstStorage


def test_new_storage_is_empty():
    storage = BurstStorage(8)
    assert len(storage) == 0
    assert not storage


def test_bits_fill_bursts_of_width():
    storage = BurstStorage(3)
    for bit in (True, False, True, True):
        storage.insert_bit(bit)
    assert len(storage) == 2
    assert storage.get_burst(1) == 0b101
    assert len(storage.get_burst(0)) == 1
    assert storage.get_burst(0) == 0b1


def test_insert_byte_splits_nibbles():
    storage = BurstStorage(4)
    storage.insert_byte(0b1010_0101, 8)
    assert len(storage) == 2
    assert storage.get_burst(1) == 0b0101
    assert storage.get_burst(0) == 0b1010


def test_insert_byte_limits_bits():
    storage = BurstStorage(8)
    storage.insert_byte(0xFF, 3)
    assert len(storage.get_burst(0)) == 3
    assert storage.get_burst(0).count() == 3


def test_insert_data_newest_first():
    storage = BurstStorage(8)
    storage.insert_data(bytes([0xFF, 0x00]), 16)
    assert len(storage) == 2
    assert storage.get_burst(0) == 0x00
    assert storage.get_burst(1) == 0xFF


def test_insert_data_partial_last_byte():
    storage = BurstStorage(8)
    storage.insert_data(bytes([0xAB, 0xFF]), 12)
    assert len(storage) == 2
    assert storage.get_burst(1) == 0xAB
    assert len(storage.get_burst(0)) == 4


def test_insert_data_stops_when_count_reached():
    storage = BurstStorage(8)
    storage.insert_data(bytes([0x01]), 8)
    storage.insert_data(bytes([0x02]), 8)
    assert len(storage) == 1
    assert storage.get_burst(0) == 0x01


def test_clear_resets_count():
    storage = BurstStorage(8)
    storage.insert_data(bytes([0x01]), 8)
    storage.clear()
    assert len(storage) == 0
    storage.insert_data(bytes([0x02]), 8)
    assert storage.get_burst(0) == 0x02


def test_get_burst_returns_copy():
    storage = BurstStorage(4)
    storage.insert_byte(0x0F, 4)
    burst = storage.get_burst(0)
    burst[0] = False
    assert storage.get_burst(0) == 0x0F


def test_get_burst_out_of_range():
    storage = BurstStorage(4)
    storage.insert_byte(0x0F, 4)
    with pytest.raises(IndexError):
        storage.get_burst(1)
    with pytest.raises(IndexError):
        storage.get_burst(-1)
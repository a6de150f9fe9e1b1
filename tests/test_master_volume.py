import pytest

from pocketboy.audio.master_volume import MasterVolumeRegister
from pocketboy.audio.sample import AudioSample


def test_default_values():
    volume = MasterVolumeRegister()
    assert volume.value == 0
    assert volume.left_volume == 0
    assert volume.right_volume == 0
    assert not volume.vin_left
    assert not volume.vin_right


def test_set_and_get_all_bits():
    volume = MasterVolumeRegister()
    volume.value = 0xFF
    assert volume.value == 0xFF
    assert volume.vin_left
    assert volume.vin_right
    assert volume.left_volume == 7
    assert volume.right_volume == 7


def test_vin_bits():
    volume = MasterVolumeRegister()
    volume.value = 0x80
    assert volume.vin_left
    assert not volume.vin_right
    assert volume.left_volume == 0
    assert volume.right_volume == 0
    assert volume.value == 0x80

    volume.value = 0x08
    assert not volume.vin_left
    assert volume.vin_right
    assert volume.left_volume == 0
    assert volume.right_volume == 0
    assert volume.value == 0x08


@pytest.mark.parametrize("level", range(8))
def test_left_volume_levels(level):
    volume = MasterVolumeRegister()
    volume.value = level << 4
    assert volume.left_volume == level
    assert volume.right_volume == 0
    assert volume.value == level << 4


@pytest.mark.parametrize("level", range(8))
def test_right_volume_levels(level):
    volume = MasterVolumeRegister()
    volume.value = level
    assert volume.right_volume == level
    assert volume.left_volume == 0
    assert volume.value == level


def test_roundtrip_consistency():
    volume = MasterVolumeRegister()
    for value in range(256):
        volume.value = value
        assert volume.value == value


def test_volume_sample_extremes():
    volume = MasterVolumeRegister()
    volume.value = 0x70
    assert volume.volume_sample() == AudioSample(1.0, 1.0 / 8.0)


def test_volume_sample_midpoint():
    volume = MasterVolumeRegister()
    volume.value = 0x34
    assert volume.volume_sample() == AudioSample(4.0 / 8.0, 5.0 / 8.0)


def test_volume_sample_never_mutes():
    volume = MasterVolumeRegister()
    for value in range(256):
        volume.value = value
        sample = volume.volume_sample()
        assert 0.0 < sample.left <= 1.0
        assert 0.0 < sample.right <= 1.0
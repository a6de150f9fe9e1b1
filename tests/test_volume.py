from pocketboy.audio.volume import EnvelopeFunction, VolumeAndEnvelopeRegister


def test_default_values():
    register = VolumeAndEnvelopeRegister()
    assert register.value == 0
    assert register.initial_volume == 0
    assert not register.envelope_direction
    assert register.sweep_pace == 8


def test_set_and_get_initial_volume():
    register = VolumeAndEnvelopeRegister()
    register.value = 0b11110000
    assert register.value == 0b11110000
    assert register.initial_volume == 15


def test_set_and_get_envelope_direction():
    register = VolumeAndEnvelopeRegister()
    register.value = 0b00001000
    assert register.value == 0b00001000
    assert register.envelope_direction


def test_set_and_get_sweep_pace():
    register = VolumeAndEnvelopeRegister()
    register.value = 0b00000011
    assert register.value == 0b00000011
    assert register.sweep_pace == 3


def test_set_and_get_all():
    register = VolumeAndEnvelopeRegister()
    register.value = 0b11111111
    assert register.value == 0b11111111
    assert register.initial_volume == 15
    assert register.envelope_direction
    assert register.sweep_pace == 7


def test_register_round_trip():
    register = VolumeAndEnvelopeRegister()
    for value in range(256):
        register.value = value
        assert register.value == value


def test_dac_off_by_default():
    envelope = EnvelopeFunction()
    assert envelope.dac_off() is True
    assert envelope.current_volume == 0


def test_dac_on_with_increasing_direction():
    envelope = EnvelopeFunction()
    envelope.register.value = 0x08
    assert envelope.dac_off() is False


def test_reset_loads_initial_volume():
    envelope = EnvelopeFunction()
    envelope.register.value = 0xA0
    assert envelope.current_volume == 0
    envelope.reset()
    assert envelope.current_volume == 10


def test_step_decreases_volume():
    envelope = EnvelopeFunction()
    envelope.register.value = 0xF1
    envelope.reset()
    envelope.step()
    assert envelope.current_volume == 14
    envelope.step()
    assert envelope.current_volume == 13


def test_step_increase_saturates():
    envelope = EnvelopeFunction()
    envelope.register.value = 0xE9
    envelope.reset()
    for _ in range(5):
        envelope.step()
    assert envelope.current_volume == EnvelopeFunction.MAX_VOLUME


def test_step_decrease_stops_at_zero():
    envelope = EnvelopeFunction()
    envelope.register.value = 0x11
    envelope.reset()
    for _ in range(4):
        envelope.step()
    assert envelope.current_volume == 0


def test_step_with_zero_pace_is_disabled():
    envelope = EnvelopeFunction()
    envelope.register.value = 0xF0
    envelope.reset()
    for _ in range(20):
        envelope.step()
    assert envelope.current_volume == 15


def test_step_respects_pace():
    envelope = EnvelopeFunction()
    envelope.register.value = 0x82
    envelope.reset()
    envelope.step()
    assert envelope.current_volume == 8
    envelope.step()
    assert envelope.current_volume == 7
import pytest

from pulsewire.commands import Command, PulseAudioError, error_message


@pytest.mark.parametrize(
    ("value", "member"),
    [
        (2, Command.REPLY),
        (3, Command.CREATE_PLAYBACK_STREAM),
        (8, Command.AUTH),
        (19, Command.REMOVE_SAMPLE),
        (40, Command.SET_SOURCE_MUTE),
        (43, Command.TRIGGER_PLAYBACK_STREAM),
        (45, Command.SET_DEFAULT_SOURCE),
        (47, Command.SET_RECORD_STREAM_NAME),
        (50, Command.KILL_SOURCE_OUTPUT),
        (52, Command.UNLOAD_MODULE),
        (56, Command.GET_AUTOLOAD_INFO_LIST_OBSOLETE),
        (60, Command.PREBUF_PLAYBACK_STREAM),
        (61, Command.REQUEST),
    ],
)
def test_command_lookup_by_value(value, member):
    assert Command(value) is member


def test_every_value_up_to_max_is_a_command():
    looked_up = [Command(value) for value in range(105)]
    assert looked_up == list(Command)


def test_max_is_last_command():
    assert Command(104) is Command.MAX
    with pytest.raises(ValueError):
        Command(105)


def test_command_str_is_name():
    assert str(Command(20)) == "GET_SERVER_INFO"


def test_unknown_command_value_rejected():
    with pytest.raises(ValueError):
        Command(len(Command) + 10)


def test_error_message_known_codes():
    assert error_message(0) == "OK"
    assert error_message(1) == "Access denied"
    assert error_message(26) == "Device or resource busy"


def test_error_message_out_of_range():
    assert error_message(1000) == "Unknown error code"
    assert error_message(-1) == "Unknown error code"


def test_pulseaudio_error_message_and_attributes():
    err = PulseAudioError(Command.SET_SINK_VOLUME, 1)
    assert str(err) == "PulseAudio error: SET_SINK_VOLUME -> Access denied"
    assert err.cmd is Command.SET_SINK_VOLUME
    assert err.code == 1


def test_pulseaudio_error_with_unknown_code():
    err = PulseAudioError("custom", 1000)
    assert str(err) == "PulseAudio error: custom -> Unknown error code"
    assert err.cmd == "custom"
    assert err.code == 1000
    assert isinstance(err, Exception)
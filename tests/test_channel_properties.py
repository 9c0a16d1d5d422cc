import dataclasses

import pytest

from tuxtv.channel_properties import ChannelProperties, describe_channel


def test_describe_channel_joins_options():
    props = describe_channel(
        "Arte", "rtsp://tv.example.com/arte", [":ts-es-id-pid", ":no-audio"], "blend"
    )
    assert props.name == "Arte"
    assert props.url == "rtsp://tv.example.com/arte"
    assert props.vlc_options.split("\n") == [":ts-es-id-pid", ":no-audio"]
    assert props.deinterlace == "blend"


def test_describe_channel_defaults():
    props = describe_channel("TF1", "http://tv.example.com/tf1")
    assert props.vlc_options == ""
    assert props.deinterlace == "none"


def test_describe_channel_empty_options_list():
    props = describe_channel("TF1", "http://tv.example.com/tf1", [], "")
    assert props.vlc_options == ""
    assert props.deinterlace == "none"


def test_single_option_has_no_separator():
    props = describe_channel("M6", "udp://tv.example.com/m6", [":network-caching=300"])
    assert props.vlc_options == ":network-caching=300"


def test_properties_are_not_editable():
    props = describe_channel("M6", "udp://tv.example.com/m6")
    assert props.editable is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        props.name = "Other"


def test_equal_inputs_give_equal_properties():
    first = describe_channel("W9", "http://tv.example.com/w9", ["a", "b"], "x")
    second = describe_channel("W9", "http://tv.example.com/w9", ("a", "b"), "x")
    assert first == second
    assert first == ChannelProperties("W9", "http://tv.example.com/w9", "a\nb", "x")
from tuxtv.channel_infos import TvChannelInfos


def test_new_channel_defaults():
    infos = TvChannelInfos("Arte")
    assert infos.name == "Arte"
    assert infos.id == -1
    assert infos.logo_filename is None
    assert infos.labels == []


def test_labels_keep_insertion_order():
    infos = TvChannelInfos("France 2")
    infos.add_label("france2")
    infos.add_label("fr2")
    infos.add_label("france2")
    assert infos.labels == ["france2", "fr2", "france2"]


def test_labels_are_not_shared_between_channels():
    first = TvChannelInfos("A")
    second = TvChannelInfos("B")
    first.add_label("a")
    assert second.labels == []
    assert first.labels == ["a"]


def test_fields_can_be_updated():
    infos = TvChannelInfos("Old")
    infos.name = "New"
    infos.id = 42
    infos.logo_filename = "arte.png"
    assert (infos.name, infos.id, infos.logo_filename) == ("New", 42, "arte.png")
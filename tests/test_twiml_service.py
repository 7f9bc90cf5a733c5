import xml.etree.ElementTree as ET

from app.core.twiml_service import ANNOUNCEMENT_REPETITIONS, render_announcement


def _parse(xml):
    return ET.fromstring(xml.encode("utf-8"))


def test_announcement_plays_each_digit_three_times():
    root = _parse(render_announcement("https://foo.com/bar", "ru", "123456"))

    assert root.tag == "Response"
    plays = [el.text for el in root if el.tag == "Play"]
    pauses = [el for el in root if el.tag == "Pause"]

    single = [
        "https://foo.com/bar/ru/verification.mp3",
        "https://foo.com/bar/ru/1_middle.wav",
        "https://foo.com/bar/ru/2_middle.wav",
        "https://foo.com/bar/ru/3_middle.wav",
        "https://foo.com/bar/ru/4_middle.wav",
        "https://foo.com/bar/ru/5_middle.wav",
        "https://foo.com/bar/ru/6_falling.wav",
    ]
    assert plays == single * ANNOUNCEMENT_REPETITIONS
    assert len(pauses) == ANNOUNCEMENT_REPETITIONS - 1
    assert all(p.get("length") == "1" for p in pauses)


def test_announcement_does_not_end_with_pause():
    root = _parse(render_announcement("https://foo.com/bar", "en-US", "000000"))

    assert list(root)[-1].tag == "Play"
    assert list(root)[-1].text == "https://foo.com/bar/en-US/0_falling.wav"


def test_trailing_slash_in_base_url_is_ignored():
    root = _parse(render_announcement("https://foo.com/bar/", "pt-BR", "654321"))

    assert list(root)[0].text == "https://foo.com/bar/pt-BR/verification.mp3"

import pytest

from bcc.resources.formatter import (
    fill_template, format_text, no_color_formatter, strip_key, translate, translate_disconnect, translate_entity_name
)

GAMERTAG = "Bot"


def translated(message, *parameters):
    return {"needs_translation": True, "message": message, "parameters": list(parameters), "type": "translation"}


def test_translate():
    assert translate("%disconnect.kicked") == "You were kicked from the game"
    assert translate("disconnect.kicked") == "You were kicked from the game"
    assert translate("%multiplayer.player.joined", ["Steve"]) == "Steve joined the game"


def test_translate_unknown_key():
    assert translate("%not.a.real.key") == "%not.a.real.key"
    assert translate("plain text") == "plain text"


@pytest.mark.parametrize("message, parameters, result", [
    ("%disconnect.kicked", None, "You were kicked from the game"),
    ("%disconnect.kicked.reason pick pocket", [], "You were kicked from the game: pick pocket"),
    ("Server closed", None, "Server closed"),
    ("%disconnect.nope", None, "%disconnect.nope"),
    ("", None, ""),
])
def test_translate_disconnect(message, parameters, result):
    assert translate_disconnect(message, parameters) == result


def test_strip_key():
    assert strip_key("§e%multiplayer.player.joined") == "multiplayer.player.joined"
    assert strip_key("%death.attack.mob§r") == "death.attack.mob"
    assert strip_key("death.attack.mob") == "death.attack.mob"


def test_fill_template():
    assert fill_template("%s and %s", ["a", "b"]) == "a and b"
    assert fill_template("%s and %s", ["a"]) == "a and %s"
    assert fill_template("%2$s then %1$s", ["a", "b"]) == "b then a"
    assert fill_template("%1$s was slain by %2$s", ["Steve"]) == "Steve was slain by %2$s"


def test_entity_names():
    assert translate_entity_name("%entity.zombie.name") == "Zombie"
    assert translate_entity_name("%entity.mystery_beast.name") == "Mystery Beast"
    assert translate_entity_name("Steve") == "Steve"
    assert no_color_formatter("§bDiamond Sword§r") == "Diamond Sword"


def test_format_translated_chat():
    packet = translated("§e%multiplayer.player.joined", "Steve")
    assert format_text(packet, GAMERTAG) == "Steve joined the game"


def test_format_death():
    assert format_text(
        translated("death.attack.mob", "Steve", "%entity.zombie.name"), GAMERTAG
    ) == "[death] Steve was slain by Zombie"
    assert format_text(
        translated("death.attack.player.item", "Steve", "Alex", "§bDiamond Sword"), GAMERTAG
    ) == "[death] Steve was slain by Alex using Diamond Sword"
    assert format_text(
        translated("death.fell.accident.generic", "Steve"), GAMERTAG
    ) == "[death] Steve fell from a high place"
    assert format_text(
        translated("death.attack.brand_new", "Steve"), GAMERTAG
    ) == "[death] Steve died (death.attack.brand_new)"


def test_format_unknown_translation():
    assert format_text(translated("some.custom.key", "Steve", "extra"), GAMERTAG) == "[LOG] Steve - some.custom.key - extra"
    assert format_text(translated("some.custom.key", "Steve"), GAMERTAG) == "[LOG] Steve - some.custom.key - "


def test_format_plain_chat():
    packet = {"type": "chat", "source_name": "Steve", "message": "hello", "needs_translation": False}
    assert format_text(packet, GAMERTAG) == "[chat] Steve: hello"
    assert format_text({"type": "chat", "message": "hi"}, GAMERTAG) == "[chat] Unknown: hi"


def test_format_skips_own_and_json():
    assert format_text({"type": "chat", "source_name": GAMERTAG, "message": "me"}, GAMERTAG) is None
    assert format_text({"type": "json", "source_name": "", "message": "{}"}, GAMERTAG) is None

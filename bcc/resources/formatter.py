import re

from typing import Any, Mapping, Optional, Sequence

from bcc.resources.translations import (
    DEATH_ATTACK_MESSAGES, DEATH_FELL_MESSAGES, DISCONNECT_MESSAGES, ENTITY_NAMES, TRANSLATION_MESSAGES
)

COLOR_CODE = re.compile("§[0-9a-fk-or]")
PLACEHOLDER = re.compile(r"%(\d+)\$s|%s")
TABLES = [TRANSLATION_MESSAGES, DISCONNECT_MESSAGES, DEATH_ATTACK_MESSAGES, DEATH_FELL_MESSAGES, ENTITY_NAMES]


def no_color_formatter(msg: str) -> str:
    return COLOR_CODE.sub("", msg)


def strip_key(message: str) -> str:
    # "§e%multiplayer.player.joined§r" -> "multiplayer.player.joined"
    key = re.sub("^§[0-9a-fk-or]%", "", message)
    key = re.sub("§[0-9a-fk-or]$", "", key)
    if key.startswith("%"):
        key = key[1:]
    return key


def translate_entity_name(key: str) -> str:
    if key.startswith("%entity.") and key.endswith(".name"):
        name = ENTITY_NAMES.get(key[1:])
        if name is not None:
            return name
        name = key[len("%entity."):-len(".name")].replace("_", " ")
        return re.sub(r"\b\w", lambda m: m.group().upper(), name)
    # plain player name
    return key


def fill_template(template: str, parameters: Sequence[Any], entities=False) -> str:
    """
    Substitute "%s" in order and "%1$s" style positions, placeholders without a
    parameter are left as they are
    """
    sequence = iter(parameters)

    def replace(match: re.Match) -> str:
        if match.group(1) is None:
            value = next(sequence, None)
            if value is None:
                return match.group(0)
            return str(value)
        index = int(match.group(1)) - 1
        if index >= len(parameters) or parameters[index] in (None, ""):
            return match.group(0)
        value = str(parameters[index])
        if entities:
            value = no_color_formatter(translate_entity_name(value))
        return value

    return PLACEHOLDER.sub(replace, template)


def lookup_template(key: str) -> Optional[str]:
    for table in TABLES:
        if key in table:
            return table[key]
    return None


def translate(key: str, parameters: Optional[Sequence[Any]] = None) -> str:
    template = lookup_template(key[1:] if key.startswith("%") else key)
    if template is None:
        return key
    return fill_template(template, parameters or [], entities=True)


def translate_disconnect(message: str, parameters: Optional[Sequence[Any]] = None) -> str:
    if not message or not message.startswith("%disconnect."):
        return message
    # "%disconnect.kicked.reason pick pocket" carries its reason inline
    key, _, extra_reason = message.partition(" ")
    template = DISCONNECT_MESSAGES.get(key[1:])
    if template is None:
        return message
    formatted = fill_template(template, parameters or [])
    if extra_reason:
        formatted += " " + extra_reason
    return formatted


def format_death(key: str, parameters: Sequence[Any]) -> str:
    template = DEATH_ATTACK_MESSAGES.get(key) or DEATH_FELL_MESSAGES.get(key)
    if template is None:
        return f"{parameters[0]} died ({key})"
    return fill_template(template, parameters, entities=True)


def format_text(packet: Mapping[str, Any], gamertag: str) -> Optional[str]:
    parameters = list(packet.get("parameters") or [])
    message = packet.get("message") or ""
    if packet.get("needs_translation") and parameters:
        key = strip_key(message)
        template = TRANSLATION_MESSAGES.get(key)
        if template is not None:
            return fill_template(template, parameters)
        if key.startswith("death.attack.") or key.startswith("death.fell."):
            return "[death] " + format_death(key, parameters)
        extra = parameters[1] if len(parameters) > 1 else ""
        return f"[LOG] {parameters[0]} - {key} - {extra}"

    if packet.get("source_name") == gamertag or packet.get("type") == "json":
        return None
    sender = packet.get("source_name") or "Unknown"
    return f"[{packet.get('type')}] {sender}: {message}"

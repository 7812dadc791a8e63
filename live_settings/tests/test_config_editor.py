import copy

import pytest

from live_settings.codec import RAG_DELIMITER, read_prompt_and_rag
from live_settings.domain.exceptions import ValidationError
from live_settings.editor import (
    current_response_modality,
    current_voice,
    set_function_description,
    set_prompt,
    set_rag,
    set_response_modality,
    set_voice,
)


def _config():
    return {
        "model": "models/gemini-live",
        "systemInstruction": {"parts": [{"text": "Old prompt" + RAG_DELIMITER + "Old rag"}]},
        "tools": [
            {"googleSearch": {}},
            {
                "functionDeclarations": [
                    {"name": "lookup", "description": "old", "parameters": {"properties": {"q": {}}}},
                    {"name": "other", "description": "keep"},
                ]
            },
        ],
        "speechConfig": {"languageCode": "en-US"},
    }


def test_set_prompt_keeps_rag_and_tools():
    config = _config()
    snapshot = copy.deepcopy(config)
    updated = set_prompt(config, "New prompt")
    assert updated["systemInstruction"] == "New prompt" + RAG_DELIMITER + "Old rag"
    assert updated["tools"] is config["tools"]
    assert updated["speechConfig"] is config["speechConfig"]
    assert config == snapshot


def test_set_rag_keeps_prompt():
    config = _config()
    snapshot = copy.deepcopy(config)
    updated = set_rag(config, "Fresh context")
    assert updated["tools"] is config["tools"]
    assert updated["speechConfig"] is config["speechConfig"]
    assert config == snapshot
    assert read_prompt_and_rag(updated["systemInstruction"]).prompt == "Old prompt"
    assert read_prompt_and_rag(updated["systemInstruction"]).rag == "Fresh context"


def test_clearing_rag_drops_delimiter():
    updated = set_rag(_config(), "")
    assert updated["systemInstruction"] == "Old prompt"


def test_set_prompt_on_missing_instruction():
    assert set_prompt({}, "hi") == {"systemInstruction": "hi"}


def test_set_prompt_idempotent():
    once = set_prompt(_config(), "Same")
    twice = set_prompt(once, "Same")
    assert once == twice


def test_set_function_description_updates_match_only():
    config = _config()
    snapshot = copy.deepcopy(config)
    updated = set_function_description(config, "lookup", "new desc")
    fds = updated["tools"][1]["functionDeclarations"]
    assert [(fd["name"], fd["description"]) for fd in fds] == [("lookup", "new desc"), ("other", "keep")]
    assert fds[0]["parameters"] is config["tools"][1]["functionDeclarations"][0]["parameters"]
    assert fds[1] is config["tools"][1]["functionDeclarations"][1]
    assert updated["tools"][0] is config["tools"][0]
    assert updated["systemInstruction"] is config["systemInstruction"]
    assert config == snapshot


def test_set_function_description_all_matches():
    config = {
        "tools": [
            {"functionDeclarations": [{"name": "dup", "description": "1"}]},
            {"functionDeclarations": [{"name": "dup", "description": "2"}]},
        ]
    }
    updated = set_function_description(config, "dup", "same")
    assert [t["functionDeclarations"][0]["description"] for t in updated["tools"]] == ["same", "same"]


def test_set_function_description_no_match_is_value_equal():
    config = _config()
    updated = set_function_description(config, "missing", "x")
    assert updated == config
    assert updated is not config
    assert set_function_description({"model": "m"}, "lookup", "x") == {"model": "m"}


def test_set_voice_copy_on_write():
    config = _config()
    updated = set_voice(config, "Kore")
    assert updated["speechConfig"] == {
        "languageCode": "en-US",
        "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": "Kore"}},
    }
    assert config["speechConfig"] == {"languageCode": "en-US"}
    assert updated["tools"] is config["tools"]
    assert current_voice(updated) == "Kore"
    assert current_voice({}) == "Puck"


def test_set_voice_rejects_unknown():
    with pytest.raises(ValidationError) as exc:
        set_voice({}, "Nobody")
    assert exc.value.code == "UNKNOWN_VOICE"


def test_response_modality():
    updated = set_response_modality({}, "text")
    assert updated["responseModalities"] == ["TEXT"]
    assert current_response_modality(updated) == "text"
    assert current_response_modality({}) == "audio"
    assert set_response_modality({}, "AUDIO")["responseModalities"] == ["AUDIO"]
    with pytest.raises(ValidationError):
        set_response_modality({}, "video")

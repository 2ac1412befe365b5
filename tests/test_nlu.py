"""Tests for intent recognizers."""

import json
from unittest.mock import MagicMock, patch

import pytest

from groovyfox.catalog import default_catalog
from groovyfox.errors import RecognizerError
from groovyfox.nlu import (
    PostbackRecognizer,
    RecognizerResult,
    get_recognizer,
    parse_postback,
)
from groovyfox.nlu.prompts import get_recognition_prompt
from groovyfox.nlu.providers import KeywordRecognizer, OpenAIRecognizer


def completion(content):
    """Build a fake chat completion carrying the given content."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def openai_recognizer(catalog, mock_client):
    return OpenAIRecognizer(catalog, client=mock_client, retry_delay=0.0)


@pytest.mark.parametrize("text,intent,number", [
    ("select model 3", "SelectModel", 3),
    ("Select Festival 12", "SelectFestival", 12),
    ("  select model 7  ", "SelectModel", 7),
])
def test_parse_postback(text, intent, number):
    result = parse_postback(text)
    assert result.top_intent == intent
    assert result.entities == {"number": [number]}


@pytest.mark.parametrize("text", ["select model", "select shoe 3", "please select model 3", ""])
def test_parse_postback_rejects_other_text(text):
    assert parse_postback(text) is None


def test_parse_postback_oversized_number():
    result = parse_postback("select model " + "9" * 5000)

    assert result.top_intent == "SelectModel"
    assert result.entities == {}


def test_keyword_recognizer_keeps_numbers_as_text(catalog):
    result = KeywordRecognizer(catalog).recognize("model " + "9" * 5000)

    assert result.top_intent == "FindShoes"
    assert result.entities == {"number": ["9" * 5000]}


def test_postback_recognizer_short_circuits():
    inner = MagicMock()
    recognizer = PostbackRecognizer(inner)

    result = recognizer.recognize("select festival 2")

    assert result.top_intent == "SelectFestival"
    inner.recognize.assert_not_called()


def test_postback_recognizer_delegates():
    inner = MagicMock()
    inner.recognize.return_value = RecognizerResult(top_intent="SmallTalk_Greet")
    recognizer = PostbackRecognizer(inner)

    result = recognizer.recognize("hello")

    assert result.top_intent == "SmallTalk_Greet"
    inner.recognize.assert_called_once_with("hello")


def test_recognizer_result_wraps_scalar_entities():
    result = RecognizerResult(
        top_intent="SelectModel",
        entities={"number": 3, "colours": ["red"], "shoeTypes": None},
    )
    assert result.entities == {"number": [3], "colours": ["red"]}


@pytest.mark.parametrize("text,intent,entities", [
    ("Hello there", "SmallTalk_Greet", {}),
    ("thanks a lot", "SmallTalk_Thank", {}),
    ("ok bye", "SmallTalk_EndConversation", {}),
    ("I'm fine", "SmallTalk_ChitChat", {}),
    ("Show shoes", "FindShoes", {}),
    ("Do you have red heels?", "FindShoes", {"colours": ["red"], "shoeTypes": ["heels"]}),
    ("a black flat please", "FindShoes", {"colours": ["black"], "shoeTypes": ["flats"]}),
    ("Find festivals", "FindLocations", {}),
    ("will you be in sofia", "FindLocations", {"availableLocations": ["Sofia"]}),
    ("show me our history", "ShowHistory", {}),
    ("what is the meaning of life", "None", {}),
])
def test_keyword_recognizer(catalog, text, intent, entities):
    result = KeywordRecognizer(catalog).recognize(text)

    assert result.top_intent == intent
    assert result.entities == entities


def test_recognition_prompt_lists_vocabulary(catalog):
    prompt = get_recognition_prompt(catalog)

    assert "FindShoes" in prompt
    assert "ShowHistory" in prompt
    assert "heels, oxfords, trainers, flats" in prompt
    assert "Athens, Belgrade, Sofia" in prompt
    assert "pink" in prompt


def test_openai_recognizer_parses_json(openai_recognizer, mock_client):
    mock_client.chat.completions.create.return_value = completion(json.dumps({
        "topIntent": "FindShoes",
        "entities": {"colours": ["red"], "shoeTypes": ["heels"]},
    }))

    result = openai_recognizer.recognize("red heels please")

    assert result.top_intent == "FindShoes"
    assert result.entities == {"colours": ["red"], "shoeTypes": ["heels"]}

    kwargs = mock_client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"][-1] == {"role": "user", "content": "red heels please"}


def test_openai_recognizer_missing_fields(openai_recognizer, mock_client):
    mock_client.chat.completions.create.return_value = completion("{}")

    result = openai_recognizer.recognize("???")

    assert result.top_intent == "None"
    assert result.entities == {}


def test_openai_recognizer_retries_then_succeeds(openai_recognizer, mock_client):
    mock_client.chat.completions.create.side_effect = [
        ConnectionError("boom"),
        completion('{"topIntent": "SmallTalk_Greet"}'),
    ]

    with patch("groovyfox.nlu.providers.openai_provider.time.sleep") as mock_sleep:
        result = openai_recognizer.recognize("hi")

    assert result.top_intent == "SmallTalk_Greet"
    assert mock_client.chat.completions.create.call_count == 2
    mock_sleep.assert_called_once()


def test_openai_recognizer_exhausted_retries(openai_recognizer, mock_client):
    """Failures surface as RecognizerError instead of a guessed intent."""
    mock_client.chat.completions.create.side_effect = ConnectionError("down")

    with patch("groovyfox.nlu.providers.openai_provider.time.sleep"):
        with pytest.raises(RecognizerError) as exc_info:
            openai_recognizer.recognize("hi")

    assert "down" in str(exc_info.value)
    assert mock_client.chat.completions.create.call_count == 3


def test_openai_recognizer_invalid_json(openai_recognizer, mock_client):
    mock_client.chat.completions.create.return_value = completion("not json")

    with pytest.raises(RecognizerError):
        openai_recognizer.recognize("hi")


@pytest.mark.parametrize("content", [
    '{"topIntent": "FindShoes", "entities": ["red"]}',
    '{"topIntent": 5}',
])
def test_openai_recognizer_malformed_result(openai_recognizer, mock_client, content):
    mock_client.chat.completions.create.return_value = completion(content)

    with pytest.raises(RecognizerError):
        openai_recognizer.recognize("hi")


def test_openai_recognizer_requires_api_key(catalog, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ValueError) as exc_info:
        OpenAIRecognizer(catalog)

    assert "OPENAI_API_KEY" in str(exc_info.value)


def test_factory_keyword(catalog):
    recognizer = get_recognizer("Keyword", catalog)

    assert isinstance(recognizer, PostbackRecognizer)
    assert isinstance(recognizer.inner, KeywordRecognizer)
    assert recognizer.recognize("select model 2").top_intent == "SelectModel"


def test_factory_openai(catalog, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")

    recognizer = get_recognizer("openai", catalog, {"model": "gpt-4o", "max_retries": 5})

    assert isinstance(recognizer.inner, OpenAIRecognizer)
    assert recognizer.inner.model == "gpt-4o"
    assert recognizer.inner.max_retries == 5


def test_factory_unknown_provider(catalog):
    with pytest.raises(ValueError) as exc_info:
        get_recognizer("luis", catalog)
    assert "Unknown recognizer provider" in str(exc_info.value)

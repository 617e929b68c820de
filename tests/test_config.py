from pathlib import Path

from wordstack.config import DEFAULT_WORDLIST, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.wordlist_path == DEFAULT_WORDLIST
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]


def test_environment_overrides():
    settings = load_settings({
        "WORDSTACK_WORDLIST": "/tmp/words.txt",
        "WORDSTACK_LOG_LEVEL": "debug",
        "WORDSTACK_CORS_ORIGINS": "http://a.test, http://b.test",
    })
    assert settings.wordlist_path == Path("/tmp/words.txt")
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]

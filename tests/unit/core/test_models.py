"""Unit tests for domain models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from core.domain.models import Command, GetCommand, KvPair, PostCommand, body_map


class TestBodyMap:
    """Tests for body_map()."""

    def test_values_stay_strings(self) -> None:
        pairs = [KvPair(key="name", value="joe"), KvPair(key="age", value="30")]
        assert body_map(pairs) == {"name": "joe", "age": "30"}

    def test_last_write_wins(self) -> None:
        pairs = [KvPair(key="k", value="1"), KvPair(key="k", value="2")]
        assert body_map(pairs) == {"k": "2"}

    def test_empty(self) -> None:
        assert body_map([]) == {}


class TestCommand:
    """Tests for the Command tagged union."""

    def test_discriminates_on_method(self) -> None:
        adapter = TypeAdapter(Command)

        get = adapter.validate_python({"method": "GET", "url": "http://x.test"})
        post = adapter.validate_python(
            {"method": "POST", "url": "http://x.test", "body": [{"key": "a", "value": "b"}]}
        )

        assert isinstance(get, GetCommand)
        assert isinstance(post, PostCommand)
        assert post.body == [KvPair(key="a", value="b")]

    def test_post_body_defaults_to_empty(self) -> None:
        assert PostCommand(url="http://x.test").body == []

    def test_commands_are_frozen(self) -> None:
        command = GetCommand(url="http://x.test")
        with pytest.raises(ValidationError):
            command.url = "http://other.test"

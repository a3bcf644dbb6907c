"""Tests for the public generation and parsing API."""

import secrets

import pytest

import emojid
from emojid.core.errors import (
    AlphabetTooSmall,
    EmojiIDError,
    EmojiIDPanic,
    EntropyFailure,
    InvalidFormat,
    InvalidToken,
)
from emojid.models.alphabet import DEFAULT_ALPHABET
from emojid.utils import id_utils


class TestGeneration:
    """Test random identifier generation."""

    def test_new_uses_default_alphabet(self) -> None:
        """Test every token of a new id comes from the default alphabet."""
        emoji_id = id_utils.new()
        allowed = set(DEFAULT_ALPHABET)

        assert len(emoji_id.tokens()) == 32
        assert all(token in allowed for token in emoji_id.tokens())
        assert not emoji_id.is_zero()

    def test_new_ids_differ(self) -> None:
        """Test two fresh ids are different."""
        assert not id_utils.new().equal(id_utils.new())

    def test_new_string_validates(self) -> None:
        """Test new_string output round-trips through parse."""
        s = id_utils.new_string()

        assert id_utils.validate(s)
        assert id_utils.format_id(id_utils.parse(s)) == s

    def test_end_to_end_with_scripted_source(self, alternating_source) -> None:
        """Test the documented two-symbol example."""
        emoji_id = id_utils.new_with_alphabet(["A", "B"], alternating_source)

        formatted = id_utils.format_id(emoji_id)

        assert formatted == "ABABABAB-ABAB-ABAB-ABAB-ABABABABABAB"
        assert id_utils.parse_with_alphabet(formatted, ["A", "B"]).tokens() == ["A", "B"] * 16

    @pytest.mark.parametrize(
        "alphabet",
        [
            ["0", "1"],
            list("abcdefghijklmnopqrstuvwxyz"),
            list(DEFAULT_ALPHABET),
            ["🐙", "🦑", "🦀"],
        ],
    )
    def test_round_trip_custom_alphabets(self, alphabet: list[str]) -> None:
        """Test generated ids parse back equal under their own alphabet."""
        for _ in range(20):
            emoji_id = id_utils.new_with_alphabet(alphabet)
            formatted = id_utils.format_id(emoji_id)

            assert [len(g) for g in formatted.split("-")] == [8, 4, 4, 4, 12]
            assert id_utils.equal(id_utils.parse_with_alphabet(formatted, alphabet), emoji_id)

    @pytest.mark.parametrize("alphabet", [[], ["x"]])
    def test_alphabet_too_small(self, alphabet: list[str]) -> None:
        """Test generation with fewer than two symbols fails."""
        with pytest.raises(AlphabetTooSmall):
            id_utils.new_with_alphabet(alphabet)

    def test_delimiter_not_allowed_in_alphabet(self) -> None:
        """Test the delimiter cannot be an alphabet entry."""
        with pytest.raises(ValueError):
            id_utils.new_with_alphabet(["A", "-"])

    def test_entropy_failure(self, failing_source) -> None:
        """Test source failures surface as EntropyFailure."""
        with pytest.raises(EntropyFailure):
            id_utils.new_with_alphabet(["A", "B"], failing_source)

    def test_new_batch(self) -> None:
        """Test batches contain the requested number of ids."""
        ids = id_utils.new_batch(5)

        assert len(ids) == 5
        assert len({str(emoji_id) for emoji_id in ids}) == 5

    def test_new_batch_negative(self) -> None:
        """Test negative batch sizes are rejected."""
        with pytest.raises(ValueError):
            id_utils.new_batch(-1)


class TestParsing:
    """Test default-alphabet parsing and validation."""

    def test_parse_wrong_group_count(self) -> None:
        """Test a string without delimiters is a format error."""
        with pytest.raises(InvalidFormat):
            id_utils.parse("abc")

    def test_parse_short_groups(self) -> None:
        """Test five groups that are too short are a format error."""
        with pytest.raises(InvalidFormat):
            id_utils.parse("aa-bb-cc-dd-ee")

    def test_parse_foreign_token(self) -> None:
        """Test ASCII symbols are foreign to the default alphabet."""
        with pytest.raises(InvalidToken) as exc_info:
            id_utils.parse("ABABABAB-ABAB-ABAB-ABAB-ABABABABABAB")

        assert exc_info.value.token == "A"

    def test_errors_share_base_class(self) -> None:
        """Test the taxonomy is catchable through EmojiIDError."""
        with pytest.raises(EmojiIDError):
            id_utils.parse("abc")

    def test_validate(self) -> None:
        """Test validate only reports success or failure."""
        assert id_utils.validate(id_utils.new_string()) is True
        assert id_utils.validate("abc") is False


class TestMustWrappers:
    """Test the panicking convenience layer."""

    def test_must_new(self) -> None:
        """Test must_new returns an id when generation succeeds."""
        assert not id_utils.must_new().is_zero()

    def test_must_new_string(self) -> None:
        """Test must_new_string returns a valid string."""
        assert id_utils.validate(id_utils.must_new_string())

    def test_must_parse(self) -> None:
        """Test must_parse returns the parsed id."""
        s = id_utils.new_string()

        assert str(id_utils.must_parse(s)) == s

    def test_must_parse_panics(self) -> None:
        """Test must_parse converts errors into EmojiIDPanic."""
        with pytest.raises(EmojiIDPanic) as exc_info:
            id_utils.must_parse("abc")

        assert isinstance(exc_info.value.__cause__, InvalidFormat)
        assert not isinstance(exc_info.value, EmojiIDError)

    def test_must_new_panics_on_entropy_failure(self, monkeypatch, failing_source) -> None:
        """Test must_new converts entropy failures into EmojiIDPanic."""
        monkeypatch.setattr(secrets, "token_bytes", failing_source)

        with pytest.raises(EmojiIDPanic):
            id_utils.must_new()
        with pytest.raises(EmojiIDPanic):
            id_utils.must_new_string()


class TestPackageExports:
    """Test the top-level package API."""

    def test_reexports(self) -> None:
        """Test the public functions are reachable from the package."""
        s = emojid.new_string()

        assert emojid.validate(s)
        assert emojid.is_zero(emojid.EmojiID())
        assert emojid.tokens(emojid.parse(s)) == list(s.replace("-", ""))
        assert len(emojid.DEFAULT_ALPHABET) == 152

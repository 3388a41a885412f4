import pytest

from sqids_codec.constants import DEFAULT_ALPHABET, DEFAULT_BLOCKLIST
from sqids_codec.exceptions import InvalidAlphabetError, InvalidMinLengthError
from sqids_codec.options import SqidsOptions, parse_blocklist


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove any codec settings from the environment, restoring them (or their absence) afterwards"""
    for name in ("SQIDS_ALPHABET", "SQIDS_MIN_LENGTH", "SQIDS_BLOCKLIST"):
        # setenv first so that values loaded from a .env file during the test are also undone
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestParseBlocklist:
    def test_comma_separated(self):
        assert parse_blocklist("ArUO, pnd ,sxnzkl") == frozenset({"ArUO", "pnd", "sxnzkl"})

    def test_blank_entries_ignored(self):
        assert parse_blocklist(" , ,") == frozenset()


class TestSqidsOptions:
    def test_defaults(self):
        options = SqidsOptions()
        assert options.alphabet == DEFAULT_ALPHABET
        assert options.min_length == 0
        assert options.blocklist == DEFAULT_BLOCKLIST

    def test_build(self):
        sqids = SqidsOptions(min_length=10).build()
        assert sqids.encode([1, 2, 3]) == "86Rf07xd4z"

    def test_build_validates(self):
        with pytest.raises(InvalidAlphabetError):
            SqidsOptions(alphabet="ab").build()

    def test_options_are_immutable(self):
        options = SqidsOptions()
        with pytest.raises(AttributeError):
            options.min_length = 5


class TestFromEnvironment:
    def test_unset_environment_gives_defaults(self, clean_environment):
        assert SqidsOptions.from_environment() == SqidsOptions()

    def test_reads_environment(self, clean_environment):
        clean_environment.setenv("SQIDS_ALPHABET", "0123456789abcdef")
        clean_environment.setenv("SQIDS_MIN_LENGTH", "8")
        clean_environment.setenv("SQIDS_BLOCKLIST", "dead,beef")

        options = SqidsOptions.from_environment()

        assert options == SqidsOptions(
            alphabet="0123456789abcdef",
            min_length=8,
            blocklist=frozenset({"dead", "beef"}),
        )

    def test_empty_blocklist_disables_blocking(self, clean_environment):
        clean_environment.setenv("SQIDS_BLOCKLIST", "")
        sqids = SqidsOptions.from_environment().build()
        assert sqids.encode([4572721]) == "aho1e"

    def test_invalid_min_length(self, clean_environment):
        clean_environment.setenv("SQIDS_MIN_LENGTH", "lots")
        with pytest.raises(InvalidMinLengthError, match="must be an integer"):
            SqidsOptions.from_environment()

    def test_reads_dotenv_file(self, clean_environment, tmp_path):
        dotenv_path = tmp_path / "sqids.env"
        dotenv_path.write_text("SQIDS_MIN_LENGTH=12\n")

        options = SqidsOptions.from_environment(dotenv_path=str(dotenv_path))

        assert options.min_length == 12

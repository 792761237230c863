import pytest

from dutime.dtlocale import (
    DEFAULT_NAMES,
    LocaleNames,
    NameList,
    format_names,
    input_names,
    read_locale,
    set_format_locale,
    set_input_locale,
)

ABBR_WDAY = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]
LONG_WDAY = ["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"]
ABBR_MON = ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"]
LONG_MON = [
    "Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
    "August", "September", "Oktober", "November", "Dezember",
]


def _block(name):
    return "".join(
        [
            name + "\n",
            "\t".join(ABBR_WDAY) + "\n",
            "\t".join(LONG_WDAY) + "\n",
            "\t".join(ABBR_MON) + "\n",
            "\t".join(LONG_MON) + "\n",
        ]
    )


@pytest.fixture(autouse=True)
def _reset():
    set_input_locale(None)
    set_format_locale(None)
    yield
    set_input_locale(None)
    set_format_locale(None)


@pytest.fixture
def locale_file(tmp_path, monkeypatch):
    path = tmp_path / "locale"
    path.write_text("xx_XX\n" + "a\tb\n" * 4 + _block("de_DE"), encoding="utf-8")
    monkeypatch.setenv("LOCALE_FILE", str(path))
    return path


def test_default_names():
    names = input_names()
    assert names.long_wday[1] == "Monday"
    assert names.abbr_mon[12] == "Dec"
    assert names.long_mon.min_len == 3
    assert names == format_names() == DEFAULT_NAMES


def test_read_locale(locale_file):
    loc = read_locale(locale_file, "de_DE")
    assert isinstance(loc, LocaleNames)
    assert list(loc.abbr_wday.names[1:]) == ABBR_WDAY
    assert list(loc.long_wday.names[1:]) == LONG_WDAY
    assert list(loc.abbr_mon.names[1:]) == ABBR_MON
    assert list(loc.long_mon.names[1:]) == LONG_MON


def test_lengths_match_names(locale_file):
    loc = read_locale(locale_file, "de_DE")
    for lst in (loc.long_wday, loc.abbr_wday, loc.long_mon, loc.abbr_mon):
        lengths = [len(n) for n in lst.names[1:]]
        assert lst.min_len == min(lengths)
        assert lst.max_len == max(lengths)


def test_name_list_drops_unterminated_tail():
    lst = NameList.from_line("one\ttwo\tthree\n")
    assert lst.names[1:] == ("one", "two", "three")


def test_name_list_needs_newline():
    with pytest.raises(LookupError):
        NameList.from_line("one\ttwo")


def test_unknown_locale(locale_file):
    with pytest.raises(LookupError):
        read_locale(locale_file, "fr_FR")


def test_name_must_end_line(locale_file):
    with pytest.raises(LookupError):
        read_locale(locale_file, "de_D")


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_locale(tmp_path / "nope", "de_DE")


def test_empty_file(tmp_path):
    path = tmp_path / "locale"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        read_locale(path, "de_DE")


def test_incomplete_block(tmp_path):
    path = tmp_path / "locale"
    path.write_text("de_DE\nMo\tDi\n", encoding="utf-8")
    with pytest.raises(LookupError):
        read_locale(path, "de_DE")


def test_set_input_locale(locale_file):
    assert set_input_locale("de_DE") is True
    assert list(input_names().long_wday.names[1:]) == LONG_WDAY
    assert format_names() == DEFAULT_NAMES
    assert set_input_locale("") is True
    assert input_names() == DEFAULT_NAMES


def test_set_format_locale(locale_file):
    assert set_format_locale("de_DE") is True
    assert list(format_names().long_mon.names[1:]) == LONG_MON
    assert input_names() == DEFAULT_NAMES


def test_unknown_locale_keeps_names(locale_file):
    set_input_locale("de_DE")
    before = input_names()
    assert set_input_locale("fr_FR") is False
    assert input_names() == before


def test_set_locale_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALE_FILE", str(tmp_path / "absent"))
    with pytest.raises(OSError):
        set_format_locale("de_DE")
    assert format_names() == DEFAULT_NAMES
from finishline_core import format_name


def test_format_name_title_cases_words():
    assert format_name("ola nordmann") == "Ola Nordmann"
    assert format_name("OLA NORDMANN") == "Ola Nordmann"


def test_format_name_capitalizes_after_hyphen():
    assert format_name("anne-lise holm") == "Anne-Lise Holm"


def test_format_name_handles_non_ascii_letters():
    assert format_name("øystein ås") == "Øystein Ås"
    assert format_name("ÉMILE ZOLA") == "Émile Zola"


def test_format_name_keeps_consecutive_delimiters():
    assert format_name("a  b") == "A  B"
    assert format_name("a--b") == "A--B"
    assert format_name(" a") == " A"
    assert format_name("") == ""


def test_format_name_is_idempotent():
    samples = [
        "ola nordmann",
        "anne-lise holm",
        "McDONALD o'neil",
        "straße",
        "ßen",
        "ǆemal",
        "  double  space ",
        "-x-",
        "123 abc",
        "ÆØÅ æøå",
    ]
    for raw in samples:
        once = format_name(raw)
        assert format_name(once) == once

from finishline_core import ParticipantRegistry, RegistrationConfig, show_results, submit_registration


def test_submit_registration_reports_success():
    reg = ParticipantRegistry()
    out = submit_registration(reg, "5", "ola nordmann", "01:02:03")
    assert out.ok is True
    assert out.field is None
    assert out.participant.name == "Ola Nordmann"
    assert "Ola Nordmann" in out.message
    assert "5" in out.message
    assert "01:02:03" in out.message


def test_submit_registration_reports_first_invalid_field():
    reg = ParticipantRegistry()
    out = submit_registration(reg, "x", "ola3", "bad")
    assert out.ok is False
    assert out.field == "bib"
    assert out.message == RegistrationConfig.BIB_MESSAGE
    assert len(reg) == 0

    out = submit_registration(reg, "5", "ola", "bad")
    assert out.field == "finish_time"
    assert out.message == RegistrationConfig.TIME_MESSAGE


def test_submit_registration_reports_duplicate_bib():
    reg = ParticipantRegistry()
    submit_registration(reg, "5", "ola nordmann", "01:02:03")
    out = submit_registration(reg, "5", "kari nordmann", "00:50:00")
    assert out.ok is False
    assert out.field == "bib"
    assert out.message == "Bib 5 is already registered"
    assert len(reg) == 1


def test_show_results_builds_rows_in_rank_order():
    reg = ParticipantRegistry()
    submit_registration(reg, "5", "ola nordmann", "01:02:03")
    submit_registration(reg, "6", "anne-lise holm", "00:50:00")
    view = show_results(reg)
    assert view.ok is True
    assert view.empty is False
    assert [(r.rank, r.bib, r.name, r.finish_time) for r in view.rows] == [
        (1, "6", "Anne-Lise Holm", "00:50:00"),
        (2, "5", "Ola Nordmann", "01:02:03"),
    ]

    view = show_results(reg, "", "00:50:00")
    assert [r.bib for r in view.rows] == ["6"]


def test_show_results_flags_empty_window():
    reg = ParticipantRegistry()
    submit_registration(reg, "5", "ola nordmann", "01:02:03")
    view = show_results(reg, "02:00:00", "")
    assert view.ok is True
    assert view.rows == ()
    assert view.empty is True


def test_show_results_rejects_inverted_window():
    reg = ParticipantRegistry()
    view = show_results(reg, "01:00:00", "00:30:00")
    assert view.ok is False
    assert view.field == "upper"
    assert view.message == RegistrationConfig.WINDOW_MESSAGE
    assert view.empty is False

from participants.models import Participant


def test_from_doc_reads_every_field():
    p = Participant.from_doc({
        "email": "a@x.com",
        "full_name": "Jane Doe",
        "full_name_upper": "JANE DOE",
        "contact_number": "0917",
        "address": "Manila",
        "company": "Green Harvest",
        "designation": "Buyer",
        "first_time": "no",
        "selected_events": ["event1", "workshop"],
        "approved": True,
    })
    assert p.email == "a@x.com"
    assert p.first_time == "no"
    assert p.approved is True
    assert p.rejected is None
    assert p.status == "approved"


def test_from_doc_tolerates_missing_values():
    p = Participant.from_doc({"email": "b@x.com", "full_name": "Marco Santos", "company": None})
    assert p.email == "b@x.com"
    assert p.full_name_upper == "MARCO SANTOS"
    assert p.company == ""
    assert p.selected_events == []
    assert p.is_decided is False
    assert p.status == "pending"


def test_unexpected_first_time_value_is_blanked():
    assert Participant.from_doc({"email": "a@x.com", "first_time": "maybe"}).first_time == ""
    assert Participant.from_doc({"email": "a@x.com", "first_time": "YES"}).first_time == "yes"


def test_event_labels_translate_known_ids_only():
    p = Participant(email="a@x.com", selected_events=["event2", "supplier-lunch", "event1"])
    assert p.event_labels == [
        "Event 2 (September 3, 2025)",
        "supplier-lunch",
        "Event 1 (September 2, 2025)",
    ]


def test_initials_from_upper_name():
    assert Participant(email="a@x.com", full_name_upper="JANE  MARIE DOE").initials == "JMD"
    assert Participant(email="a@x.com").initials == ""


def test_matches_is_case_insensitive_substring():
    p = Participant(email="a@x.com", full_name_upper="JANE DOE", company="Green Harvest")
    assert p.matches("doe")
    assert p.matches("@X.")
    assert p.matches("harv")
    assert not p.matches("manila")


def test_from_doc_keeps_stored_email_verbatim():
    assert Participant.from_doc({"email": "a@x.com "}).email == "a@x.com "
    assert Participant.from_doc({}).email == ""

"""Tests for the model-free fallback parser."""
from schedule_parser.heuristic import UNTITLED_CLASS_NAME, parse_heuristically
from schedule_parser.models import WEEKDAYS, ParsedClass


def test_class_block_with_days_line() -> None:
    """Name line, days line and time range make one class."""
    classes = parse_heuristically("CS101 Intro to Programming\nMonday Wednesday Friday\n09:00-10:30\n")

    assert classes == [
        ParsedClass(
            course_name="CS101 Intro to Programming",
            start_time="09:00",
            end_time="10:30",
            days_of_week=["Monday", "Wednesday", "Friday"],
        )
    ]


def test_missing_days_default_to_weekdays() -> None:
    classes = parse_heuristically("Linear Algebra\n13:00-14:15")

    assert len(classes) == 1
    assert classes[0].days_of_week == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert classes[0].start_time == "13:00"
    assert classes[0].end_time == "14:15"


def test_single_line_class() -> None:
    """Time range is removed from the name; days on the same line are used."""
    classes = parse_heuristically("Biology 14:00 - 15:30 Tuesday Thursday")

    assert classes[0].course_name == "Biology Tuesday Thursday"
    assert classes[0].days_of_week == ["Tuesday", "Thursday"]
    assert (classes[0].start_time, classes[0].end_time) == ("14:00", "15:30")


def test_single_digit_hours_are_zero_padded() -> None:
    classes = parse_heuristically("Chemistry\n9:00-9:50")

    assert (classes[0].start_time, classes[0].end_time) == ("09:00", "09:50")


def test_time_only_block_gets_placeholder_name() -> None:
    classes = parse_heuristically("   \n08:00-09:00\n")

    assert classes[0].course_name == UNTITLED_CLASS_NAME


def test_weekdays_are_case_insensitive_and_unique() -> None:
    classes = parse_heuristically("Art\nMONDAY and friday, then monday again\n10:00-11:00")

    assert classes[0].days_of_week == ["Monday", "Friday"]


def test_first_line_with_a_weekday_wins() -> None:
    classes = parse_heuristically("History\nTuesday\nWednesday\n11:00-12:00")

    assert classes[0].days_of_week == ["Tuesday"]


def test_multiple_blocks() -> None:
    text = (
        "Physics\nMonday\n08:00-09:30\n"
        "\n"
        "Calculus\nTuesday Thursday\n10:00-11:30\n"
    )

    classes = parse_heuristically(text)

    assert [c.course_name for c in classes] == ["Physics", "Calculus"]
    assert [c.days_of_week for c in classes] == [["Monday"], ["Tuesday", "Thursday"]]


def test_first_buffered_line_is_the_name_even_if_it_is_a_header() -> None:
    """Preambles before the first class end up as its name."""
    classes = parse_heuristically("Fall 2024 Timetable\nPhysics\n08:00-09:30")

    assert classes[0].course_name == "Fall 2024 Timetable"


def test_buffer_is_discarded_after_ten_lines_without_a_time() -> None:
    preamble = "\n".join(f"Line {i}" for i in range(1, 12))

    classes = parse_heuristically(f"{preamble}\n12:00-13:00")

    assert len(classes) == 1
    assert classes[0].course_name == "Line 11"


def test_optional_fields_are_left_empty() -> None:
    parsed = parse_heuristically("Economics Room 301 Prof. Smith\n10:00-11:00")[0]

    assert parsed.room_number is None
    assert parsed.professor is None
    assert parsed.building is None
    assert parsed.floor is None
    assert parsed.notes is None
    assert parsed.course_code is None


def test_no_time_ranges_yield_nothing() -> None:
    assert parse_heuristically("Lunch at 12:00\nOffice hours by appointment") == []
    assert parse_heuristically("Bogus 25:00-26:00") == []
    assert parse_heuristically("") == []


def test_deterministic() -> None:
    text = "Physics\nMonday\n08:00-09:30\nCalculus\n10:00-11:30"

    assert parse_heuristically(text) == parse_heuristically(text)


def test_lookalike_letters_do_not_become_day_names() -> None:
    """Only ASCII spellings count; look-alike letters are ignored, not copied."""
    classes = parse_heuristically("Physics\nTueſday FRİDAY Wednesday\n08:00-09:30")

    assert classes[0].days_of_week == ["Wednesday"]
    assert set(classes[0].days_of_week) <= set(WEEKDAYS)


def test_lookalike_letters_alone_fall_back_to_weekdays() -> None:
    classes = parse_heuristically("Physics\nTueſday\n08:00-09:30")

    assert classes[0].days_of_week == list(WEEKDAYS[:5])


def test_non_ascii_digits_are_not_times() -> None:
    assert parse_heuristically("Physics\n٠٩:٠٠-١٠:٣٠") == []

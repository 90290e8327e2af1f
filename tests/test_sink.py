"""Tests for forwarding parsed classes to a persistence sink."""
from schedule_parser.models import ParsedClass
from schedule_parser.sink import InMemoryClassStore, import_classes


def _class(name: str, days: list[str]) -> ParsedClass:
    return ParsedClass(course_name=name, start_time="09:00", end_time="10:00", days_of_week=days)


def test_import_classes_forwards_valid_records() -> None:
    store = InMemoryClassStore()

    count = import_classes(store, "s1", [_class("Physics", ["Monday"]), _class("Art", ["Friday"])])

    assert count == 2
    assert [c.course_name for c in store.list_classes("s1")] == ["Physics", "Art"]


def test_import_classes_skips_records_breaking_the_invariant() -> None:
    store = InMemoryClassStore()

    count = import_classes(store, "s1", [_class("", ["Monday"]), _class("Art", []), _class("Law", ["Tuesday"])])

    assert count == 1
    assert [c.course_name for c in store.list_classes("s1")] == ["Law"]


def test_schedules_are_kept_apart() -> None:
    store = InMemoryClassStore()
    import_classes(store, "s1", [_class("Physics", ["Monday"])])
    import_classes(store, "s2", [_class("Art", ["Friday"])])

    assert [c.course_name for c in store.list_classes("s2")] == ["Art"]
    assert store.list_classes("s3") == []

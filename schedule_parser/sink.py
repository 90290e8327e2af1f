# -*- coding: utf-8 -*-
import logging
import typing as t
from collections import defaultdict

from .models import ParsedClass
from .normalizer import class_to_dict, normalize_record


logger = logging.getLogger(__name__)


class ClassSink(t.Protocol):
    def add_class(self, schedule_id: str, parsed_class: ParsedClass) -> None:
        ...


class InMemoryClassStore:
    """Keeps imported classes per schedule. Stand-in for the classes table."""

    def __init__(self) -> None:
        self.classes: dict[str, list[ParsedClass]] = defaultdict(list)

    def add_class(self, schedule_id: str, parsed_class: ParsedClass) -> None:
        """Adds a class to a schedule.

        :param schedule_id: The schedule the class belongs to.
        :param parsed_class: A validated class record.
        """
        self.classes[schedule_id].append(parsed_class)

    def list_classes(self, schedule_id: str) -> list[ParsedClass]:
        return list(self.classes.get(schedule_id, []))


def import_classes(sink: ClassSink, schedule_id: str, classes: t.Iterable[ParsedClass]) -> int:
    """Forwards every class that still satisfies the record invariant.

    :param sink: Where to store the classes.
    :param schedule_id: The schedule to import into.
    :param classes: Parsed classes, usually ParseResult.classes.
    :return: The number of classes forwarded.
    """
    imported = 0
    for parsed_class in classes:
        checked = normalize_record(class_to_dict(parsed_class))
        if checked is None:
            logger.warning("Skipping invalid class record %r", parsed_class.course_name)
            continue
        sink.add_class(schedule_id, checked)
        imported += 1
    logger.info("Imported %d classes into schedule %s", imported, schedule_id)
    return imported

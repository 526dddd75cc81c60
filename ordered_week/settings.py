"""Implements scoped configuration settings"""

import collections
import logging
import threading

import ordered_week.model.day
import ordered_week.model.week


class Settings:
    """Implements scoped configuration settings

    Holds the default start day of the weeks created within a scope. A derived scope starts with a snapshot
    of the current values of its parent. Afterwards, changes made to either scope are not visible in the other.
    Assigning an invalid start day raises an error and keeps the previous value."""

    DEFAULT_START_DAY_KEY = 'start_day'

    DEFAULT_START_DAY = ordered_week.model.day.DEFAULT_START_DAY

    def __init__(self, start_day=None):
        self.__lock = threading.Lock()
        if start_day is None:
            self.__start_day = Settings.DEFAULT_START_DAY
        else:
            self.__start_day = ordered_week.model.day.validate(start_day)

    def __str__(self):
        return self.as_dict().__str__()

    def __repr__(self):
        return self.as_dict().__repr__()

    def as_dict(self):
        """Returns settings as dictionary"""

        return collections.OrderedDict([(Settings.DEFAULT_START_DAY_KEY, self.start_day.name)])

    def derive(self):
        """Creates child settings initialized with the current values"""

        return Settings(start_day=self.start_day)

    def week(self, reference_date=None, start_day=None, strict=False):
        """Creates a week which contains the reference date using these settings"""

        return ordered_week.model.week.Week(reference_date, start_day, settings=self, strict=strict)

    @property
    def start_day(self):
        """Get a property"""

        with self.__lock:
            return self.__start_day

    @start_day.setter
    def start_day(self, value):
        start_day = ordered_week.model.day.validate(value)
        with self.__lock:
            previous_start_day = self.__start_day
            self.__start_day = start_day
        logging.debug("Changed start day from '%s' to '%s'", previous_start_day, start_day)

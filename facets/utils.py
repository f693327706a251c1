""" Utility classes to support others """

import importlib
import datetime


def _load_class(class_path, default):
    """ Loads the class from the class_path string """
    if class_path is None:
        return default

    component = class_path.rsplit('.', 1)
    loaded = getattr(
        importlib.import_module(component[0]),
        component[1],
        default
    ) if len(component) > 1 else default

    return loaded


class Timer:

    """ Simple timer class to measure elapsed time """
    def __init__(self):
        self._start_time = None
        self._end_time = None

    def start(self):
        """ Start the timer """
        self._start_time = datetime.datetime.now()

    def stop(self):
        """ Stop the timer """
        self._end_time = datetime.datetime.now()

    @property
    def start_time(self):
        """ Return the start time """
        return self._start_time

    @property
    def end_time(self):
        """ Return the end time """
        return self._end_time

    @property
    def elapsed_time(self):
        """ Return the elapsed time in microseconds """
        elapsed = self._end_time - self._start_time
        return elapsed.seconds * 1000000 + elapsed.microseconds

import rollbar


class ReportableException(Exception):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        rollbar.report_message(f"{type(self).__name__}: {self}", "warning")


class SqidsException(ReportableException):
    pass


class InvalidAlphabetError(SqidsException, ValueError):
    pass


class InvalidMinLengthError(SqidsException, ValueError):
    pass


class NumberOutOfRangeError(SqidsException, ValueError):
    pass


class MaximumRetriesExceededException(SqidsException, RuntimeError):
    """Every rotation of the alphabet produced a blocked ID."""


class InvalidMessageException(ReportableException):
    pass

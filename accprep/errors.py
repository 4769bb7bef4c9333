class AccPrepError(Exception):
    """Base class for the errors raised while preparing a trial batch."""


class TrialFormatError(AccPrepError, ValueError):
    """A record of a trial file is not made of exactly three integers."""

    def __init__(self, path: str, record, detail: str):
        self.path = path
        self.record = record  # 1-based, None when the parser did not report it
        where = f"{path}: record {record}" if record is not None else path
        super().__init__(f"{where}: {detail}")


class AlignmentError(AccPrepError, ValueError):
    """A trial does not have the same number of samples as the first one."""

    def __init__(self, path: str, actual: int, reference: str, expected: int):
        self.path = path
        self.actual = actual
        self.reference = reference
        self.expected = expected
        super().__init__(
            f"{path} has {actual} samples but {reference} has {expected}; "
            "all trials in a folder must have the same number of samples"
        )


class FilterConfigError(AccPrepError, ValueError):
    """Invalid median filter window size."""

    def __init__(self, window_size, reason: str):
        self.window_size = window_size
        super().__init__(f"Invalid median filter window size {window_size!r}: {reason}")

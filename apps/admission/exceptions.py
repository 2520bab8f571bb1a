"""
Exceptions raised by the admission services.
"""


class AdmissionError(Exception):
    """Base class for admission errors"""


class AdmissionValidationError(AdmissionError):
    """Submitted data failed validation; ``errors`` maps field paths to messages"""

    def __init__(self, errors):
        self.errors = errors
        super().__init__(f"Admission data is invalid: {', '.join(sorted(errors))}")


class AdmissionNotFound(AdmissionError):
    def __init__(self, pk):
        self.pk = pk
        super().__init__(f"Admission record {pk} not found")


class AdmissionPersistenceError(AdmissionError):
    """The admission could not be written; nothing was persisted"""

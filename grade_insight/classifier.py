from enum import Enum

from .config import APPROVED_CUTOFF, CRITICAL_CUTOFF, PASSING_THRESHOLD, WARNING_CUTOFF


class StatusCategory(Enum):
    FAILED = 'Failed'
    CRITICAL = 'Critical'
    WARNING = 'Warning'
    ON_TRACK = 'OnTrack'
    APPROVED = 'Approved'

    @property
    def rank(self):
        """Position from worst (0) to best (4)."""
        return _ORDER.index(self)


_ORDER = [
    StatusCategory.FAILED,
    StatusCategory.CRITICAL,
    StatusCategory.WARNING,
    StatusCategory.ON_TRACK,
    StatusCategory.APPROVED,
]


def classify(accumulated_score, class_average, class_std_dev,
             passing_threshold=PASSING_THRESHOLD):
    """
    Map an accumulated score to a status category.

    Bands, checked in order:
        Failed    score < passing_threshold
        Approved  score >= min(average + std_dev, APPROVED_CUTOFF)
        Critical  score < max(CRITICAL_CUTOFF, average - std_dev)
        Warning   score < max(WARNING_CUTOFF, average)
        OnTrack   otherwise

    Each band is an interval of the score axis, so a higher score never
    lands in a worse category.
    """
    if accumulated_score < passing_threshold:
        return StatusCategory.FAILED

    approved_from = min(class_average + class_std_dev, APPROVED_CUTOFF)
    if accumulated_score >= approved_from:
        return StatusCategory.APPROVED

    if accumulated_score < max(CRITICAL_CUTOFF, class_average - class_std_dev):
        return StatusCategory.CRITICAL

    if accumulated_score < max(WARNING_CUTOFF, class_average):
        return StatusCategory.WARNING

    return StatusCategory.ON_TRACK

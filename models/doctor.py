import logging
from datetime import time
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional

from settings import DOCTOR_CONFIG

logger = logging.getLogger(__name__)

DEFAULT_START_TIME = time.fromisoformat(DOCTOR_CONFIG['default_hours']['start'])
DEFAULT_END_TIME = time.fromisoformat(DOCTOR_CONFIG['default_hours']['end'])
DEFAULT_MAX_PATIENTS = DOCTOR_CONFIG['max_patients_per_day']
DEFAULT_FEE = DOCTOR_CONFIG['default_fee']


def _compare(left, right) -> int:
    return (left > right) - (left < right)


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def _format_time(value: Optional[time]) -> str:
    if value is None:
        return "None"
    if value.second == 0 and value.microsecond == 0:
        return value.strftime("%H:%M")
    return value.isoformat()


class Doctor:
    """Doctor profile with a live daily patient counter

    A doctor is identified by ``doctor_id`` alone: two records with the
    same id compare equal and hash the same whatever their other fields.
    """

    def __init__(self, doctor_id: str = "", name: str = "", specialization: str = "",
                 contact_number: str = "", email: str = "",
                 consultation_fee: float = DEFAULT_FEE,
                 working_days: Optional[Iterable[str]] = None,
                 start_time: Optional[time] = DEFAULT_START_TIME,
                 end_time: Optional[time] = DEFAULT_END_TIME,
                 max_patients_per_day: int = DEFAULT_MAX_PATIENTS):
        self.doctor_id = doctor_id
        self.name = name
        self.specialization = specialization
        self.contact_number = contact_number
        self.email = email
        self.consultation_fee = consultation_fee
        self.is_available = True
        self.working_days = working_days
        self.start_time = start_time
        self.end_time = end_time
        self.max_patients_per_day = max_patients_per_day
        self._current_patient_count = 0

    @property
    def working_days(self) -> List[str]:
        """Copy of the working day names"""
        return list(self._working_days)

    @working_days.setter
    def working_days(self, days: Optional[Iterable[str]]):
        self._working_days = list(days) if days is not None else []

    @property
    def current_patient_count(self) -> int:
        return self._current_patient_count

    @current_patient_count.setter
    def current_patient_count(self, count: int):
        # Direct assignment is not clamped, only the increment/decrement helpers are
        if count < 0 or count > self.max_patients_per_day:
            logger.warning(
                f"Patient count for doctor {self.doctor_id!r} set to {count}, "
                f"outside 0..{self.max_patients_per_day}"
            )
        self._current_patient_count = count

    def can_take_more_patients(self) -> bool:
        """Check if the doctor can accept another patient today"""
        return self._current_patient_count < self.max_patients_per_day and self.is_available

    def increment_patient_count(self):
        """Book one more patient, ignored when the doctor is full or unavailable"""
        if self.can_take_more_patients():
            self._current_patient_count += 1
        else:
            logger.debug(
                f"Doctor {self.doctor_id!r} cannot take more patients "
                f"({self._current_patient_count}/{self.max_patients_per_day}, "
                f"available={self.is_available})"
            )

    def decrement_patient_count(self):
        """Release one patient if at least one is booked"""
        if self._current_patient_count > 0:
            self._current_patient_count -= 1

    def is_working_today(self, day: Optional[str]) -> bool:
        """Check if the doctor works on the given day name, ignoring case"""
        if day is None:
            return False
        day = day.lower()
        return any(working_day is not None and working_day.lower() == day
                   for working_day in self._working_days)

    def is_within_working_hours(self, at: Optional[time]) -> bool:
        """Check if a time of day falls inside [start_time, end_time]"""
        if at is None or self.start_time is None or self.end_time is None:
            return False
        return self.start_time <= at <= self.end_time

    def calculate_working_hours(self) -> float:
        """
        Length of the working window in hours

        Returns 0 when either bound is missing. An end time before the
        start time gives a negative result.
        """
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (_seconds_of_day(self.end_time) - _seconds_of_day(self.start_time)) / 3600.0

    def compare_by_name(self, other: 'Doctor') -> int:
        return _compare(self.name.lower(), other.name.lower())

    def compare_by_specialization(self, other: 'Doctor') -> int:
        return _compare(self.specialization.lower(), other.specialization.lower())

    def compare_by_fee(self, other: 'Doctor') -> int:
        return _compare(self.consultation_fee, other.consultation_fee)

    def __str__(self) -> str:
        return (
            f"Doctor{{ID='{self.doctor_id}', Name='{self.name}', "
            f"Specialization='{self.specialization}', Contact='{self.contact_number}', "
            f"Email='{self.email}', Fee={self.consultation_fee:.2f}, "
            f"Available={self.is_available}, "
            f"WorkingDays=[{', '.join(str(day) for day in self._working_days)}], "
            f"Hours={_format_time(self.start_time)}-{_format_time(self.end_time)}, "
            f"Patients={self._current_patient_count}/{self.max_patients_per_day}}}"
        )

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Doctor):
            return NotImplemented
        return self.doctor_id == other.doctor_id

    def __hash__(self) -> int:
        return hash(self.doctor_id)


SORT_KEYS: Dict[str, Callable] = {
    'name': cmp_to_key(Doctor.compare_by_name),
    'specialization': cmp_to_key(Doctor.compare_by_specialization),
    'fee': cmp_to_key(Doctor.compare_by_fee),
}


def sort_doctors(doctors: Iterable[Doctor], by: str = 'name', reverse: bool = False) -> List[Doctor]:
    """
    Sort doctors by one of the comparator orderings

    Args:
        doctors: Doctors to sort, left untouched
        by: 'name', 'specialization' or 'fee'
        reverse: Sort in descending order

    Returns:
        New sorted list
    """
    if by not in SORT_KEYS:
        raise ValueError(f"Unknown doctor ordering: {by}. Expected one of {', '.join(SORT_KEYS)}")
    return sorted(doctors, key=SORT_KEYS[by], reverse=reverse)

#!/usr/bin/env python3
"""
Clinic Doctor Records - demo entry point
Builds the sample roster, books a few patients and shows each ordering.
"""

import sys
import os
import logging
from datetime import time
from typing import List, Optional

# Add the project root to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import config
from models.doctor import Doctor, SORT_KEYS, sort_doctors
from settings import SAMPLE_DOCTORS

logger = logging.getLogger(__name__)


def build_sample_doctors() -> List[Doctor]:
    """Create doctor records from the sample roster in settings"""
    doctors = []
    for entry in SAMPLE_DOCTORS:
        doctors.append(Doctor(
            entry['doctor_id'],
            entry['name'],
            entry['specialization'],
            entry['contact_number'],
            entry['email'],
            entry['consultation_fee'],
            entry['working_days'],
            time.fromisoformat(entry['hours']['start']),
            time.fromisoformat(entry['hours']['end']),
            entry['max_patients_per_day'],
        ))
    return doctors


def run_demo(bookings: Optional[int] = None) -> List[str]:
    """
    Book patients for every sample doctor and render each ordering

    Args:
        bookings: Patients to book per doctor (defaults to DEMO_BOOKINGS)

    Returns:
        Rendered lines, one header per ordering followed by its doctors
    """
    if bookings is None:
        bookings = config.DEMO_BOOKINGS

    doctors = build_sample_doctors()
    for doctor in doctors:
        for _ in range(bookings):
            doctor.increment_patient_count()
        logger.info(
            f"{doctor.name}: {doctor.current_patient_count}/{doctor.max_patients_per_day} booked, "
            f"{doctor.calculate_working_hours():.1f}h day"
        )

    lines = []
    for ordering in SORT_KEYS:
        lines.append(f"By {ordering}:")
        for doctor in sort_doctors(doctors, by=ordering):
            lines.append(f"  {doctor}")

    for line in lines:
        logger.info(line)
    return lines


def main():
    config.configure_logging()
    run_demo()


if __name__ == "__main__":
    main()

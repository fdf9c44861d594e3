# Configuration settings for the clinic doctor records

# Doctor record defaults
DOCTOR_CONFIG = {
    'default_hours': {
        'start': '09:00',
        'end': '17:00'
    },
    'max_patients_per_day': 20,  # Daily capacity for a new record
    'default_fee': 0.0,
}

# Sample roster used by the demo
SAMPLE_DOCTORS = [
    {
        'doctor_id': 'doc_001',
        'name': 'Sarah Johnson',
        'specialization': 'General Practice',
        'contact_number': '(555) 123-4567',
        'email': 's.johnson@healthcenter.com',
        'consultation_fee': 60.0,
        'working_days': ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday'],
        'hours': {'start': '09:00', 'end': '17:00'},
        'max_patients_per_day': 20,
    },
    {
        'doctor_id': 'doc_002',
        'name': 'Michael Chen',
        'specialization': 'Cardiology',
        'contact_number': '(555) 234-5678',
        'email': 'm.chen@healthcenter.com',
        'consultation_fee': 150.0,
        'working_days': ['Tuesday', 'Wednesday', 'Thursday'],
        'hours': {'start': '10:00', 'end': '16:00'},
        'max_patients_per_day': 12,
    },
    {
        'doctor_id': 'doc_003',
        'name': 'emily Rodriguez',
        'specialization': 'Dermatology',
        'contact_number': '(555) 345-6789',
        'email': 'e.rodriguez@healthcenter.com',
        'consultation_fee': 95.5,
        'working_days': ['Monday', 'Wednesday', 'Friday'],
        'hours': {'start': '08:00', 'end': '15:00'},
        'max_patients_per_day': 2,
    },
    {
        'doctor_id': 'doc_004',
        'name': 'David Kim',
        'specialization': 'Pediatrics',
        'contact_number': '(555) 456-7890',
        'email': 'd.kim@healthcenter.com',
        'consultation_fee': 80.0,
        'working_days': ['Monday', 'Tuesday', 'Thursday', 'Friday'],
        'hours': {'start': '09:30', 'end': '17:30'},
        'max_patients_per_day': 16,
    },
]

"""
Fixed demo records written on first run.
"""

SEED_DOCTORS = [
    {
        "id": "1",
        "name": "Dr. Sarah Johnson",
        "specialization": "Cardiology",
        "qualifications": ["MBBS", "MD Cardiology", "FACC"],
        "experience": 12,
        "rating": 4.8,
        "reviewCount": 127,
        "image": "/api/placeholder/300/300",
        "availability": {
            "days": ["Monday", "Tuesday", "Wednesday", "Friday"],
            "timeSlots": ["09:00", "10:00", "11:00", "14:00", "15:00", "16:00"],
        },
        "consultationFee": 150,
        "status": "available",
        "languages": ["English", "Urdu"],
        "location": "Block A, 2nd Floor",
        "bio": "Experienced cardiologist with expertise in interventional cardiology and heart disease prevention.",
    },
    {
        "id": "2",
        "name": "Dr. Ahmed Khan",
        "specialization": "Orthopedics",
        "qualifications": ["MBBS", "MS Orthopedics", "FRCS"],
        "experience": 15,
        "rating": 4.9,
        "reviewCount": 203,
        "image": "/api/placeholder/300/300",
        "availability": {
            "days": ["Monday", "Tuesday", "Thursday", "Saturday"],
            "timeSlots": ["08:00", "09:00", "10:00", "11:00", "15:00", "16:00"],
        },
        "consultationFee": 120,
        "status": "available",
        "languages": ["English", "Urdu", "Hindi"],
        "location": "Block B, 1st Floor",
        "bio": "Specialist in joint replacement surgery and sports medicine with international training.",
    },
    {
        "id": "3",
        "name": "Dr. Fatima Ali",
        "specialization": "Dermatology",
        "qualifications": ["MBBS", "MD Dermatology", "DDV"],
        "experience": 8,
        "rating": 4.7,
        "reviewCount": 89,
        "image": "/api/placeholder/300/300",
        "availability": {
            "days": ["Tuesday", "Wednesday", "Thursday", "Friday"],
            "timeSlots": ["10:00", "11:00", "12:00", "14:00", "15:00"],
        },
        "consultationFee": 100,
        "status": "busy",
        "languages": ["English", "Urdu"],
        "location": "Block C, 3rd Floor",
        "bio": "Expert in cosmetic dermatology and skin cancer treatment with latest laser technologies.",
    },
    {
        "id": "4",
        "name": "Dr. Michael Chen",
        "specialization": "Neurology",
        "qualifications": ["MBBS", "MD Neurology", "DM"],
        "experience": 18,
        "rating": 4.9,
        "reviewCount": 156,
        "image": "/api/placeholder/300/300",
        "availability": {
            "days": ["Monday", "Wednesday", "Friday"],
            "timeSlots": ["09:00", "10:00", "11:00", "14:00", "15:00"],
        },
        "consultationFee": 200,
        "status": "available",
        "languages": ["English", "Chinese"],
        "location": "Block A, 4th Floor",
        "bio": "Leading neurologist specializing in stroke treatment and neurological disorders.",
    },
]

SAMPLE_PATIENT = {
    "id": "patient-1",
    "name": "John Doe",
    "email": "john.doe@example.com",
    "phone": "+92-300-1234567",
    "dateOfBirth": "1985-06-15",
    "gender": "male",
    "address": "123 Main Street, Karachi",
    "emergencyContact": {
        "name": "Jane Doe",
        "phone": "+92-300-7654321",
        "relation": "Wife",
    },
    "medicalHistory": ["Hypertension", "Diabetes Type 2"],
    "allergies": ["Penicillin", "Peanuts"],
    "currentMedications": ["Metformin 500mg", "Lisinopril 10mg"],
    "registrationDate": "2024-01-15",
    "lastVisit": "2024-08-20",
}

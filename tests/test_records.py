import dataclasses

import pytest

from wardbook.records import (
    AlreadyInitializedError,
    AuthorizationError,
    Doctor,
    HospitalError,
    InactiveError,
    MedicalTest,
    NotFoundError,
    NotInitializedError,
    Patient,
)


def make_patient(**overrides):
    fields = dict(
        id=1,
        name="Ayo",
        date_of_birth=19800101,
        blood_type="A+",
        allergies=["Penicillin"],
        insurance_id="INS123YP7",
    )
    fields.update(overrides)
    return Patient(**fields)


def test_patient_is_active_by_default():
    assert make_patient().active is True


def test_patient_allergies_become_tuple():
    patient = make_patient(allergies=["Penicillin", "Peanuts"])
    assert patient.allergies == ("Penicillin", "Peanuts")


def test_patient_allergies_are_copied_from_source_list():
    allergies = ["Penicillin"]
    patient = make_patient(allergies=allergies)
    allergies.append("Peanuts")
    assert patient.allergies == ("Penicillin",)


def test_patient_is_frozen():
    patient = make_patient()
    with pytest.raises(dataclasses.FrozenInstanceError):
        patient.name = "Other"
    assert patient.name == "Ayo"


def test_patient_replace_keeps_other_fields():
    patient = make_patient()
    updated = dataclasses.replace(patient, active=False)
    assert updated.active is False
    assert updated.name == patient.name
    assert updated.allergies == patient.allergies


def test_patient_equality_by_value():
    assert make_patient() == make_patient()
    assert make_patient() != make_patient(insurance_id="INS123YP7-update")


def test_doctor_defaults_and_fields():
    doctor = Doctor(id=1, name="Dr. Beulah", specialization="Cardiology", license_number="DOC789")
    assert doctor.active is True
    assert doctor.specialization == "Cardiology"
    with pytest.raises(dataclasses.FrozenInstanceError):
        doctor.active = False
    assert doctor.active is True


def test_medical_test_fields():
    test = MedicalTest(
        id=1,
        patient_id=1,
        doctor_id=1,
        test_type="Blood pressure",
        test_date=0,
        results="120/80, Normal",
        notes="Patient should continue his medication",
    )
    assert test.results == "120/80, Normal"
    assert dataclasses.replace(test, notes="x").notes == "x"


@pytest.mark.parametrize(
    "error",
    [AlreadyInitializedError, NotInitializedError, NotFoundError, InactiveError, AuthorizationError],
)
def test_errors_share_base(error):
    err = error("boom")
    assert isinstance(err, HospitalError)
    assert err.args == ("boom",)


def test_not_found_is_lookup_error():
    err = NotFoundError("Patient not found")
    assert isinstance(err, LookupError)
    assert err.args == ("Patient not found",)


def test_authorization_is_permission_error():
    err = AuthorizationError("denied")
    assert isinstance(err, PermissionError)
    assert err.args == ("denied",)
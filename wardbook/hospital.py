"""An in-memory hospital registry of patients, doctors and medical tests."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Hashable, Iterable

from wardbook.records import (
    AlreadyInitializedError,
    AuthorizationError,
    Doctor,
    InactiveError,
    MedicalTest,
    NotFoundError,
    NotInitializedError,
    Patient,
)

Authorizer = Callable[[Hashable], bool]


class HospitalContract:
    """Registry of patients, doctors and tests guarded by one administrator.

    Every changing operation asks ``authorizer(admin)`` for consent and raises
    :class:`AuthorizationError` when it answers false.
    """

    def __init__(self, authorizer: Authorizer) -> None:
        self._authorizer = authorizer
        self._admin: Hashable = None
        self._initialized = False
        self._patients: dict[int, Patient] = {}
        self._doctors: dict[int, Doctor] = {}
        self._tests: dict[int, MedicalTest] = {}
        self._patient_tests: dict[int, list[int]] = {}
        self._doctor_tests: dict[int, list[int]] = {}
        self._patient_count = 0
        self._doctor_count = 0
        self._test_count = 0

    def initialize(self, admin: Hashable) -> Hashable:
        """Set the administrator; allowed once only."""
        if self._initialized:
            raise AlreadyInitializedError("Contract already initialized")
        self._admin = admin
        self._initialized = True
        self._patient_count = self._doctor_count = self._test_count = 0
        return admin

    def _check_admin(self) -> None:
        if not self._initialized:
            raise NotInitializedError("Contract not initialized")
        if not self._authorizer(self._admin):
            raise AuthorizationError("Administrator authorization required")

    def _patient(self, patient_id: int) -> Patient:
        try:
            return self._patients[patient_id]
        except KeyError:
            raise NotFoundError("Patient not found") from None

    def _doctor(self, doctor_id: int) -> Doctor:
        try:
            return self._doctors[doctor_id]
        except KeyError:
            raise NotFoundError("Doctor not found") from None

    def _test(self, test_id: int) -> MedicalTest:
        try:
            return self._tests[test_id]
        except KeyError:
            raise NotFoundError("Medical test not found") from None

    # Patients

    def register_patient(
        self,
        name: str,
        date_of_birth: int,
        blood_type: str,
        allergies: Iterable[str],
        insurance_id: str,
    ) -> int:
        """Register an active patient and return the new id."""
        self._check_admin()
        new_id = self._patient_count + 1
        self._patients[new_id] = Patient(
            id=new_id,
            name=name,
            date_of_birth=date_of_birth,
            blood_type=blood_type,
            allergies=tuple(allergies),
            insurance_id=insurance_id,
        )
        self._patient_count = new_id
        self._patient_tests[new_id] = []
        return new_id

    def get_patient(self, patient_id: int) -> Patient:
        try:
            return self._patients[patient_id]
        except KeyError:
            raise NotFoundError("Patient not registered") from None

    def update_patient(
        self,
        patient_id: int,
        name: str,
        date_of_birth: int,
        blood_type: str,
        allergies: Iterable[str],
        insurance_id: str,
    ) -> Patient:
        self._check_admin()
        patient = dataclasses.replace(
            self._patient(patient_id),
            name=name,
            date_of_birth=date_of_birth,
            blood_type=blood_type,
            allergies=tuple(allergies),
            insurance_id=insurance_id,
        )
        self._patients[patient_id] = patient
        return patient

    def set_patient_active(self, patient_id: int, active: bool) -> Patient:
        self._check_admin()
        patient = dataclasses.replace(self._patient(patient_id), active=active)
        self._patients[patient_id] = patient
        return patient

    def list_patients(self) -> list[Patient]:
        return [self._patients[i] for i in range(1, self._patient_count + 1) if i in self._patients]

    # Doctors

    def register_doctor(self, name: str, specialization: str, license_number: str) -> int:
        """Register an active doctor and return the new id."""
        self._check_admin()
        new_id = self._doctor_count + 1
        self._doctors[new_id] = Doctor(
            id=new_id,
            name=name,
            specialization=specialization,
            license_number=license_number,
        )
        self._doctor_count = new_id
        self._doctor_tests[new_id] = []
        return new_id

    def get_doctor(self, doctor_id: int) -> Doctor:
        return self._doctor(doctor_id)

    def update_doctor(
        self, doctor_id: int, name: str, specialization: str, license_number: str
    ) -> Doctor:
        self._check_admin()
        doctor = dataclasses.replace(
            self._doctor(doctor_id),
            name=name,
            specialization=specialization,
            license_number=license_number,
        )
        self._doctors[doctor_id] = doctor
        return doctor

    def set_doctor_active(self, doctor_id: int, active: bool) -> Doctor:
        self._check_admin()
        doctor = dataclasses.replace(self._doctor(doctor_id), active=active)
        self._doctors[doctor_id] = doctor
        return doctor

    def list_doctors(self) -> list[Doctor]:
        return [self._doctors[i] for i in range(1, self._doctor_count + 1) if i in self._doctors]

    # Medical tests

    def record_medical_test(
        self,
        patient_id: int,
        doctor_id: int,
        test_type: str,
        test_date: int,
        results: str,
        notes: str,
    ) -> int:
        """Record a test for an active patient by an active doctor; return its id."""
        self._check_admin()
        patient = self._patient(patient_id)
        doctor = self._doctor(doctor_id)
        if not patient.active:
            raise InactiveError("Patient is inactive")
        if not doctor.active:
            raise InactiveError("Doctor is inactive")

        new_id = self._test_count + 1
        self._tests[new_id] = MedicalTest(
            id=new_id,
            patient_id=patient_id,
            doctor_id=doctor_id,
            test_type=test_type,
            test_date=test_date,
            results=results,
            notes=notes,
        )
        self._test_count = new_id
        self._patient_tests[patient_id].append(new_id)
        self._doctor_tests[doctor_id].append(new_id)
        return new_id

    def get_medical_test(self, test_id: int) -> MedicalTest:
        return self._test(test_id)

    def update_medical_test(
        self, test_id: int, test_type: str, test_date: int, results: str, notes: str
    ) -> MedicalTest:
        self._check_admin()
        test = dataclasses.replace(
            self._test(test_id),
            test_type=test_type,
            test_date=test_date,
            results=results,
            notes=notes,
        )
        self._tests[test_id] = test
        return test

    def get_patients_tests(self, patient_id: int) -> list[MedicalTest]:
        self._patient(patient_id)
        return [self._tests[t] for t in self._patient_tests[patient_id] if t in self._tests]

    def get_doctor_tests(self, doctor_id: int) -> list[MedicalTest]:
        self._doctor(doctor_id)
        return [self._tests[t] for t in self._doctor_tests[doctor_id] if t in self._tests]

    def list_medical_tests(self) -> list[MedicalTest]:
        return [self._tests[i] for i in range(1, self._test_count + 1) if i in self._tests]
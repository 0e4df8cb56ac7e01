"""Record types and errors for the hospital registry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Patient:
    """A registered patient."""

    id: int
    name: str
    date_of_birth: int
    blood_type: str
    allergies: tuple[str, ...]
    insurance_id: str
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "allergies", tuple(self.allergies))


@dataclass(frozen=True)
class Doctor:
    """A registered doctor."""

    id: int
    name: str
    specialization: str
    license_number: str
    active: bool = True


@dataclass(frozen=True)
class MedicalTest:
    """A medical test performed on a patient by a doctor."""

    id: int
    patient_id: int
    doctor_id: int
    test_type: str
    test_date: int
    results: str
    notes: str


class HospitalError(Exception):
    """Base class for every error raised by the registry."""


class AlreadyInitializedError(HospitalError):
    """The registry already has an administrator."""


class NotInitializedError(HospitalError):
    """The registry has no administrator yet."""


class NotFoundError(HospitalError, LookupError):
    """A requested record does not exist."""


class InactiveError(HospitalError):
    """A patient or doctor is marked inactive."""


class AuthorizationError(HospitalError, PermissionError):
    """The administrator did not authorize the operation."""
# wardbook

`wardbook` is a small in-memory registry for a hospital. It holds patients,
doctors and the medical tests that doctors record for patients. One
administrator guards every change. Each change asks for that administrator's
consent before it goes ahead.

## Installation

```
pip install wardbook
```

## Usage

The registry is `wardbook.hospital.HospitalContract`. You build it with an
*authorizer*: a callable that receives the administrator and returns `True`
when the current caller may act for them. Call `initialize(admin)` once to set
the administrator. It returns the administrator it was given.

```python
from wardbook.hospital import HospitalContract

def allow_everyone(admin):
    return True

hospital = HospitalContract(allow_everyone)
hospital.initialize("admin")

patient_id = hospital.register_patient(
    "Ayo", 19800101, "A+", ["Penicillin"], "INS-EXAMPLE-1"
)
doctor_id = hospital.register_doctor("Dr. Beulah", "Cardiology", "DOC-EXAMPLE-1")

test_id = hospital.record_medical_test(
    patient_id, doctor_id, "Blood pressure", 0, "120/80, Normal", "Continue medication"
)

print(hospital.get_patient(patient_id).name)                    # Ayo
print([t.id for t in hospital.get_patients_tests(patient_id)])  # [1]
```

### Operations

These methods change data. Each one consults the authorizer first:

- Patients: `register_patient`, `update_patient`, `set_patient_active`
- Doctors: `register_doctor`, `update_doctor`, `set_doctor_active`
- Tests: `record_medical_test`, `update_medical_test`

These methods only read data and need no authorization:

- `get_patient`, `get_doctor`, `get_medical_test`
- `list_patients`, `list_doctors`, `list_medical_tests`
- `get_patients_tests(patient_id)`: the tests recorded for one patient
- `get_doctor_tests(doctor_id)`: the tests one doctor recorded

### Ids and ordering

Patients, doctors and tests each have their own ids. Each sequence counts
from 1, in the order the records are registered. The `list_*` methods return
records in id order. The per-patient and per-doctor test lists follow the
order in which the tests were recorded.

### Records

The records are frozen dataclasses from `wardbook.records`:

- `Patient`: `id`, `name`, `date_of_birth`, `blood_type`, `allergies` (a tuple of strings), `insurance_id`, `active`
- `Doctor`: `id`, `name`, `specialization`, `license_number`, `active`
- `MedicalTest`: `id`, `patient_id`, `doctor_id`, `test_type`, `test_date`, `results`, `notes`

A new patient or doctor starts out active. The update and `set_*_active`
methods store a new record in place of the old one and return it.

`set_patient_active` and `set_doctor_active` switch the `active` flag.
`record_medical_test` refuses a patient or doctor who is inactive.

## Errors

Every failure raises a subclass of `wardbook.records.HospitalError`:

- `AlreadyInitializedError`: `initialize` was called a second time.
- `NotInitializedError`: a change was attempted before `initialize`.
- `AuthorizationError`: the authorizer refused the administrator. This is also a `PermissionError`.
- `NotFoundError`: no patient, doctor or medical test has the given id. This is also a `LookupError`.
- `InactiveError`: a test was recorded for an inactive patient or doctor.

`record_medical_test` checks in this order:

1. authorization
2. that the patient exists
3. that the doctor exists
4. that the patient is active
5. that the doctor is active

## What it does not do

- Everything lives in memory inside one `HospitalContract` object. Nothing is saved to disk, and all data is lost when the object goes away.
- There is no command-line program.
- There is no network service.
- There are no statistics or reports beyond the listing methods above.
- Records cannot be deleted.

## Tests

The test suite uses pytest. Install it with the `test` extra:

```
pip install "wardbook[test]"
```
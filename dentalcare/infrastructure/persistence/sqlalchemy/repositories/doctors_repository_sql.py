from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Doctor
from .....application.ports.doctors_repo import DoctorsRepository, DoctorDto


class SqlDoctorsRepository(DoctorsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, d: Doctor) -> DoctorDto:
        return DoctorDto(id=d.id, name=d.name, specialty=d.specialty, email=d.email, image=d.image)

    def create(self, name: str, specialty: str, email: Optional[str], image: Optional[str]) -> DoctorDto:
        doctor = Doctor(name=name, specialty=specialty, email=email, image=image)
        self.session.add(doctor)
        self.session.commit()
        self.session.refresh(doctor)
        return self._to_dto(doctor)

    def list_all(self) -> List[DoctorDto]:
        rows = self.session.exec(select(Doctor).order_by(Doctor.created_at)).all()
        return [self._to_dto(r) for r in rows]

    def delete(self, doctor_id: str) -> int:
        d = self.session.exec(select(Doctor).where(Doctor.id == doctor_id)).first()
        if not d:
            return 0
        self.session.delete(d)
        self.session.commit()
        return 1

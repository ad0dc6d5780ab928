from dataclasses import dataclass
from typing import List, Optional

from ..ports.doctors_repo import DoctorsRepository, DoctorDto


@dataclass
class DoctorService:
    repo: DoctorsRepository

    def add(self, name: str, specialty: str, email: Optional[str] = None, image: Optional[str] = None) -> DoctorDto:
        return self.repo.create(name, specialty, email, image)

    def list_doctors(self) -> List[DoctorDto]:
        return self.repo.list_all()

    def remove(self, doctor_id: str) -> int:
        return self.repo.delete(doctor_id)

from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class DoctorDto:
    id: str
    name: str
    specialty: str
    email: Optional[str] = None
    image: Optional[str] = None


class DoctorsRepository(Protocol):
    def create(self, name: str, specialty: str, email: Optional[str], image: Optional[str]) -> DoctorDto:
        ...

    def list_all(self) -> List[DoctorDto]:
        ...

    def delete(self, doctor_id: str) -> int:
        ...

"""Student domain models and their MongoDB document mapping"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional
from student_marks.utils.time.timeutils import date_to_native, native_to_date


@dataclass(frozen=True)
class Mark:
    subject: str
    date: date
    score: int

    def to_document(self) -> Dict:
        return {
            "subject": self.subject,
            "date": date_to_native(self.date),
            "score": self.score
        }

    @classmethod
    def from_document(cls, doc: Dict, subject: Optional[str] = None) -> "Mark":
        """Build a Mark from a stored mark or a pipeline row.

        Pipeline rows restricted to one subject do not carry it, so the
        caller passes it in.
        """
        return cls(
            subject=subject if subject is not None else doc["subject"],
            date=native_to_date(doc["date"]),
            score=doc["score"]
        )


@dataclass(frozen=True)
class Student:
    id: int
    name: str
    phone: str

    def to_document(self) -> Dict:
        """New student document; the mark history always starts empty"""
        return {"_id": self.id, "name": self.name, "phone": self.phone, "marks": []}

    @classmethod
    def from_document(cls, doc: Dict) -> "Student":
        return cls(id=doc["_id"], name=doc["name"], phone=doc["phone"])


@dataclass
class StudentRecord:
    id: int
    name: str
    phone: str
    marks: List[Mark] = field(default_factory=list)

    @property
    def student(self) -> Student:
        return Student(self.id, self.name, self.phone)

    @classmethod
    def from_document(cls, doc: Dict) -> "StudentRecord":
        return cls(
            id=doc["_id"],
            name=doc["name"],
            phone=doc["phone"],
            marks=marks_from_documents(doc.get("marks", []))
        )


@dataclass(frozen=True)
class NameAvgScore:
    name: str
    avg_score: int


def marks_from_documents(docs: List[Dict], subject: Optional[str] = None) -> List[Mark]:
    return [Mark.from_document(doc, subject) for doc in docs]

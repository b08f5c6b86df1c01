"""Custom exceptions - SoC principle"""

class StudentsError(Exception):
    """Base exception for the student marks module"""
    pass

class StudentNotFoundError(StudentsError):
    """Student with the requested id does not exist"""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student {student_id} not found")

class StudentAlreadyExistsError(StudentsError):
    """Student with the given id is already stored"""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student {student_id} already exists")

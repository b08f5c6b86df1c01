"""Student Domain Pipelines - Flow-Based Organization (SoC)

Stage order is part of every builder's contract: filter-before-group,
group-before-filter and sort-before-limit each change the result.
"""
from datetime import date
from typing import List, Dict
from student_marks.config.settings import SCORE_BEST_STUDENT
from student_marks.utils.time.timeutils import date_to_native

# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE STUDENT MARK PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_marks_of_subject_pipeline(student_id: int, subject: str) -> List[Dict]:
    """Marks array of one student narrowed to a subject, kept as one document"""
    return [
        {"$match": {"_id": student_id}},
        {"$project": {
            "_id": 0,
            "marks": {"$filter": {
                "input": "$marks",
                "as": "mark",
                "cond": {"$eq": ["$$mark.subject", subject]}
            }}
        }}
    ]

def build_student_subject_marks_pipeline(student_id: int, subject: str) -> List[Dict]:
    """Marks of one student in one subject, one row per mark"""
    return [
        {"$match": {"_id": student_id}},
        {"$unwind": "$marks"},
        {"$match": {"marks.subject": subject}},
        {"$project": {"_id": 0, "score": "$marks.score", "date": "$marks.date"}}
    ]

def build_student_marks_at_dates_pipeline(student_id: int, date_from: date, date_to: date) -> List[Dict]:
    """Marks of one student dated within [date_from, date_to], one row per mark"""
    return [
        {"$match": {"_id": student_id}},
        {"$unwind": "$marks"},
        {"$match": {"marks.date": {
            "$gte": date_to_native(date_from),
            "$lte": date_to_native(date_to)
        }}},
        {"$project": {
            "_id": 0,
            "subject": "$marks.subject",
            "score": "$marks.score",
            "date": "$marks.date"
        }}
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# RANKING PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def _avg_score_by_name_stages() -> List[Dict]:
    return [
        {"$unwind": "$marks"},
        {"$group": {"_id": "$name", "avgScore": {"$avg": "$marks.score"}}}
    ]

def build_avg_score_pipeline(avg_score_threshold: int) -> List[Dict]:
    """Names whose average score is above the threshold, best first"""
    return _avg_score_by_name_stages() + [
        {"$match": {"avgScore": {"$gt": avg_score_threshold}}},
        {"$sort": {"avgScore": -1}}
    ]

def build_best_students_pipeline(n_students: int, min_avg_score: int = SCORE_BEST_STUDENT) -> List[Dict]:
    """Top n names by average score among those averaging min_avg_score or more"""
    return _avg_score_by_name_stages() + [
        {"$match": {"avgScore": {"$gte": min_avg_score}}},
        {"$sort": {"avgScore": -1}},
        {"$limit": n_students}
    ]

def build_worst_students_pipeline(n_students: int) -> List[Dict]:
    """Bottom n students by total score; no marks sums to 0"""
    return [
        {"$project": {"name": 1, "scores": {"$sum": "$marks.score"}}},
        {"$sort": {"scores": 1}},
        {"$limit": n_students}
    ]

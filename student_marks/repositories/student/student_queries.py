"""Student Domain Filters - named find() queries and projections (SoC)"""
import re
from typing import Dict, List

# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTIONS
# ═══════════════════════════════════════════════════════════════════════════════

MARKS_ONLY: Dict = {"marks": 1}
ID_NAME: Dict = {"name": 1}
ID_NAME_PHONE: Dict = {"name": 1, "phone": 1}

# ═══════════════════════════════════════════════════════════════════════════════
# LOOKUP FILTERS
# ═══════════════════════════════════════════════════════════════════════════════

def build_id_filter(student_id: int) -> Dict:
    return {"_id": student_id}

def build_ids_filter(student_ids: List[int]) -> Dict:
    return {"_id": {"$in": student_ids}}

def build_phone_filter(phone: str) -> Dict:
    return {"phone": phone}

def build_phone_prefix_filter(prefix: str) -> Dict:
    """Phone starts with the literal prefix; regex metacharacters are escaped"""
    return {"phone": {"$regex": f"^{re.escape(prefix)}"}}

# ═══════════════════════════════════════════════════════════════════════════════
# MARKS FILTERS
# ═══════════════════════════════════════════════════════════════════════════════

def build_good_marks_filter(threshold_score: int) -> Dict:
    """Every mark scores above the threshold and there is at least one mark"""
    return {"$and": [
        {"marks": {"$elemMatch": {"score": {"$gt": threshold_score}}}},
        {"marks": {"$not": {"$elemMatch": {"score": {"$lte": threshold_score}}}}}
    ]}

def build_few_marks_filter(threshold_marks: int) -> Dict:
    """Number of marks strictly below the threshold"""
    return {"$expr": {"$lt": [{"$size": "$marks"}, threshold_marks]}}

def build_good_marks_subject_filter(subject: str, threshold_score: int) -> Dict:
    """At least one mark of the subject scores threshold or more"""
    return {"marks": {"$elemMatch": {"subject": subject, "score": {"$gte": threshold_score}}}}

def build_marks_amount_between_filter(min_marks: int, max_marks: int) -> Dict:
    """Number of marks in the closed range [min_marks, max_marks]"""
    return {"$expr": {"$and": [
        {"$gte": [{"$size": "$marks"}, min_marks]},
        {"$lte": [{"$size": "$marks"}, max_marks]}
    ]}}

"""Aggregation pipelines and query builders - Flow-Based Organization (SoC)"""
from datetime import datetime
from typing import Dict, List


def build_mentees_count_pipeline(threshold: int) -> List[Dict]:
    """Mentors with more than `threshold` mentees; a missing list counts as zero"""
    return [
        {"$project": {
            "name": 1,
            "email": 1,
            "expertise": 1,
            "menteesCount": {"$size": {"$ifNull": ["$mentees", []]}}
        }},
        {"$match": {"menteesCount": {"$gt": threshold}}}
    ]


def build_date_range_query(field: str, start: datetime, end: datetime) -> Dict:
    """Inclusive range on a date field"""
    return {field: {"$gte": start, "$lte": end}}


def build_absent_attendance_query(start: datetime, end: datetime) -> Dict:
    query = {"status": "absent"}
    query.update(build_date_range_query("date", start, end))
    return query


def build_task_window_query(start: datetime, end: datetime) -> Dict:
    """Tasks assigned by `end` that were submitted in the window or not at all"""
    return {
        "assignedDate": {"$lte": end},
        "$or": [
            build_date_range_query("submissionDate", start, end),
            {"submissionDate": None}
        ]
    }

"""Sample data for local development, built through DocumentFactory"""
import logging
from datetime import datetime
from typing import Dict

from zenclass.db.db_utils import COLLECTIONS
from zenclass.models.documents import DocumentFactory

logger = logging.getLogger(__name__)

LEARNER_COUNT = 20


def build_sample_data() -> Dict[str, list]:
    """Documents per logical collection name"""
    mentor = DocumentFactory.mentor("Priya Raman", "Priya.Raman@ZenClass.dev", "Full-stack JavaScript")
    second_mentor = DocumentFactory.mentor("Arun Kumar", "arun.kumar@zenclass.dev", "Python, data")

    learners = [
        DocumentFactory.learner(
            f"Learner {n:02d}",
            f"learner{n:02d}@example.com",
            datetime(2020, 9, 1),
            mentor=mentor["_id"] if n <= 16 else second_mentor["_id"],
            placement_status=n % 5 == 0,
        )
        for n in range(1, LEARNER_COUNT + 1)
    ]
    mentor["mentees"] = [learner["_id"] for learner in learners[:16]]
    second_mentor["mentees"] = [learner["_id"] for learner in learners[16:]]

    attendance = []
    for index, learner in enumerate(learners):
        for day in (16, 20, 27):
            status = "absent" if (index + day) % 4 == 0 else "present"
            attendance.append(DocumentFactory.attendance(learner["_id"], datetime(2020, 10, day), status))

    codekata = [
        DocumentFactory.codekata(
            learner["_id"],
            problems_solved=index * 3,
            problem_details=[
                {"problemId": f"CK-{index}-{p}", "solvedDate": datetime(2020, 10, 1 + p)}
                for p in range(index * 3 % 5)
            ],
        )
        for index, learner in enumerate(learners)
    ]

    tasks = [
        DocumentFactory.task(
            "Build a REST API", "Express + MongoDB CRUD service",
            datetime(2020, 10, 15), datetime(2020, 10, 22),
            submitted_by=[learner["_id"] for learner in learners[::2]], status="submitted",
        ),
        DocumentFactory.task(
            "Responsive layout", "Flexbox and grid exercise",
            datetime(2020, 10, 18),
        ),
        DocumentFactory.task(
            "DOM events", "Event delegation practice",
            datetime(2020, 9, 10), datetime(2020, 9, 15),
            submitted_by=[learner["_id"] for learner in learners[:5]], status="submitted",
        ),
    ]

    topics = [
        DocumentFactory.topic("Node.js and Express", datetime(2020, 10, 15), tasks=[tasks[0]["_id"]]),
        DocumentFactory.topic("CSS layouts", datetime(2020, 10, 18), tasks=[tasks[1]["_id"]]),
        DocumentFactory.topic("DOM", datetime(2020, 9, 10), tasks=[tasks[2]["_id"]]),
    ]

    drives = [
        DocumentFactory.company_drive("Freshworks", datetime(2020, 10, 19),
                                      appeared_students=[learner["_id"] for learner in learners[:8]]),
        DocumentFactory.company_drive("Zoho", datetime(2020, 10, 30),
                                      appeared_students=[learner["_id"] for learner in learners[5:12]]),
        DocumentFactory.company_drive("Chargebee", datetime(2020, 11, 12)),
    ]

    return {
        'mentors': [mentor, second_mentor],
        'learners': learners,
        'attendance': attendance,
        'codekata': codekata,
        'tasks': tasks,
        'topics': topics,
        'company_drives': drives,
    }


def seed_sample_data(db, drop_existing=False) -> Dict[str, int]:
    """Insert the sample data set; returns inserted counts per collection"""
    counts = {}
    for key, documents in build_sample_data().items():
        collection = db[COLLECTIONS[key]]
        if drop_existing:
            collection.delete_many({})
        result = collection.insert_many(documents)
        counts[COLLECTIONS[key]] = len(result.inserted_ids)
        logger.info(f"Seeded {counts[COLLECTIONS[key]]} documents into {COLLECTIONS[key]}")
    return counts

"""Company Drive Repository - Data Access Layer (SoC)"""
from datetime import datetime
from typing import Dict, List

from zenclass.repositories.base_repo import BaseRepo
from zenclass.repositories.pipelines import build_date_range_query


class CompanyDriveRepo(BaseRepo):
    collection_key = 'company_drives'

    def find_all(self) -> List[Dict]:
        return self.find_many({})

    def find_between(self, start: datetime, end: datetime) -> List[Dict]:
        return self.find_many(build_date_range_query("driveDate", start, end))

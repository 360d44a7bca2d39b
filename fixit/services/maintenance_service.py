import time
from typing import List, Optional

from sqlalchemy.orm import Session

from fixit.models.models import MaintenanceTask
from fixit.schemas.maintenance_schemas import MaintenanceTaskIn, MaintenanceTaskOut


class MaintenanceService:
    @staticmethod
    def get_tasks(db: Session, status: Optional[str] = None) -> List[MaintenanceTaskOut]:
        """Tasks ordered by next due date"""
        query = db.query(MaintenanceTask)
        if status:
            query = query.filter(MaintenanceTask.status == status)
        tasks = query.order_by(MaintenanceTask.next_date).all()
        return [MaintenanceTaskOut.model_validate(t) for t in tasks]

    @staticmethod
    def save_task(db: Session, task_in: MaintenanceTaskIn) -> MaintenanceTaskOut:
        data = task_in.model_dump()
        data["id"] = data.get("id") or f"PM-{int(time.time() * 1000)}"
        task = db.merge(MaintenanceTask(**data))
        db.commit()
        return MaintenanceTaskOut.model_validate(task)

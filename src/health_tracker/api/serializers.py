"""Conversion of domain objects into JSON responses."""

from dataclasses import asdict

from fastapi.encoders import jsonable_encoder

from health_tracker.domain.dashboard import MealHistory, WeightPoint
from health_tracker.domain.models import UserRecord
from health_tracker.domain.pagination import Page
from health_tracker.domain.records import AuditedRecord


def serialize_record(record: AuditedRecord) -> dict[str, object]:
    data = asdict(record)
    data.pop("state", None)
    return jsonable_encoder(data)


def serialize_page(page: Page) -> dict[str, object]:
    return {
        "items": [serialize_record(item) for item in page.items],
        "total_items": page.total_items,
        "total_pages": page.total_pages,
        "current_page": page.page,
        "page_size": page.page_size,
        "has_previous_page": page.has_previous,
        "has_next_page": page.has_next,
    }


def serialize_meal_history(history: MealHistory) -> dict[str, object]:
    return {
        "date": history.day.isoformat(),
        "meals": [serialize_record(meal) for meal in history.meals],
        "statistics": jsonable_encoder(asdict(history.statistics)),
    }


def serialize_graph(points: list[WeightPoint]) -> dict[str, object]:
    return {
        "graph_data": [
            {
                "date": point.day.isoformat(),
                "weight": point.weight,
                "body_fat": point.body_fat,
            }
            for point in points
        ]
    }


def serialize_user(user: UserRecord) -> dict[str, object]:
    data = jsonable_encoder(asdict(user))
    data["full_name"] = user.full_name
    return data

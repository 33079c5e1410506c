"""Row factories shaped like what PostgreSQL returns for the LightBnB tables."""

from datetime import date
from typing import Any


def user_row(**overrides: Any) -> dict:
    row = {
        "id": 1,
        "name": "Devin Sanders",
        "email": "tristanjacobs@gmail.com",
        "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
    }
    row.update(overrides)
    return row


def property_row(**overrides: Any) -> dict:
    row = {
        "id": 1,
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/small.jpg",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/large.jpg",
        "cost_per_night": 9306,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "active": True,
        "average_rating": 4.1,
    }
    row.update(overrides)
    return row


def reservation_row(**overrides: Any) -> dict:
    row = property_row()
    row.update({
        "reservation_id": 7,
        "guest_id": 3,
        "start_date": date(2018, 9, 11),
        "end_date": date(2018, 9, 26),
    })
    row.update(overrides)
    return row

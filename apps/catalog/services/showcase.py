"""
Static reviews and recommendations shown on the product page.
There is no review or recommendation backend; these are fixed demo entries.
"""

import math
from datetime import date
from typing import Dict, List

MAX_RATING = 5

DEMO_REVIEWS = [
    {'id': 'r1', 'user': 'Alice', 'rating': 5, 'comment': 'Excellent quality!', 'date': date(2025, 8, 12)},
    {'id': 'r2', 'user': 'Bob', 'rating': 4, 'comment': 'Great value for money.', 'date': date(2025, 8, 27)},
]

DEMO_RECOMMENDATIONS = [
    {'id': 'rec-1', 'name': 'Nike Air Zoom', 'price': 550},
    {'id': 'rec-2', 'name': 'Adidas Run Lite', 'price': 420},
]


def get_reviews() -> List[Dict]:
    return [dict(review) for review in DEMO_REVIEWS]


def average_rating(reviews: List[Dict]) -> float:
    return sum(r['rating'] for r in reviews) / (len(reviews) or 1)


def star_bar(rating: float) -> str:
    """Five-slot star bar, e.g. 4.5 -> "★★★★★"."""
    filled = min(MAX_RATING, max(0, math.floor(rating + 0.5)))
    return '★' * filled + '☆' * (MAX_RATING - filled)


def get_recommendations(image_url: str) -> List[Dict]:
    return [dict(rec, image_url=image_url) for rec in DEMO_RECOMMENDATIONS]

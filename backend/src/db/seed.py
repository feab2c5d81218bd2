"""Seed data loaded into a fresh store at startup."""
import logging

from db.store import EntityStore
from models import Category, Tag, User

logger = logging.getLogger(__name__)

# The single hard-coded user every request acts as
DEFAULT_USERNAME = "John Doe"
DEFAULT_PASSWORD = "password"

DEFAULT_CATEGORIES = [
    {"name": "Creative Writing", "icon": "palette", "color": "blue"},
    {"name": "Business", "icon": "chart-simple", "color": "green"},
    {"name": "Programming", "icon": "code", "color": "purple"},
    {"name": "Education", "icon": "lightbulb", "color": "amber"},
    {"name": "Health", "icon": "heart", "color": "red"},
]

DEFAULT_TAGS = [
    "writing", "storytelling", "fiction", "business", "marketing",
    "analysis", "coding", "optimization", "software", "education",
    "learning", "teaching", "wellness", "health", "lifestyle",
    "character", "creative",
]


def seed_store(store: EntityStore) -> None:
    """Populate the store with the default user, categories and tag vocabulary."""
    if store.get_user_by_username(DEFAULT_USERNAME) is None:
        store.users.create(User(username=DEFAULT_USERNAME, password=DEFAULT_PASSWORD))

    for category in DEFAULT_CATEGORIES:
        if store.get_category_by_name(category["name"]) is None:
            store.categories.create(Category(**category))

    for tag_name in DEFAULT_TAGS:
        if store.get_tag_by_name(tag_name) is None:
            store.tags.create(Tag(name=tag_name))

    logger.info(
        "Seeded store: %d users, %d categories, %d tags",
        len(store.users), len(store.categories), len(store.tags),
    )


def create_seeded_store() -> EntityStore:
    """Build a new store with seed data loaded."""
    store = EntityStore()
    seed_store(store)
    return store

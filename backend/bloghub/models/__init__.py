"""
BlogHub Backend — ORM Models
=============================

Collections (tables):
    users       User       email, username, password
    categories  Category   title, description, owning user
    blogs       Blog       title, description, owning user and category

References between collections are plain identifier columns without
foreign-key constraints: deleting a parent leaves its children in place.
"""

from bloghub.models.blog import Blog
from bloghub.models.category import Category
from bloghub.models.user import User

__all__ = ["User", "Category", "Blog"]

"""
BlogHub Backend — /api/categories Endpoint Tests
==================================================

What:  End-to-end tests of the category routes against a SQLite store.
"""

from datetime import datetime, timedelta, timezone

import pytest

from bloghub.models import Blog, Category

MISSING_ID = "0123456789abcdef01234567"


class TestCreateCategory:

    @pytest.mark.asyncio
    async def test_create(self, client, user):
        response = await client.post(
            "/api/categories",
            params={"userId": user["_id"]},
            json={"title": "Travel", "description": "Trips"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Category created successfully!"
        assert data["category"]["user"] == user["_id"]
        assert data["category"]["title"] == "Travel"

    @pytest.mark.asyncio
    async def test_description_optional(self, client, user):
        response = await client.post(
            "/api/categories", params={"userId": user["_id"]}, json={"title": "Bare"},
        )

        assert response.status_code == 201
        assert response.json()["category"]["description"] is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, client):
        response = await client.post(
            "/api/categories", params={"userId": MISSING_ID}, json={"title": "x"},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "User not found!"}

    @pytest.mark.asyncio
    async def test_malformed_user_id_is_404(self, client):
        response = await client.post(
            "/api/categories", params={"userId": "bad"}, json={"title": "x"},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "User not found!"}

    @pytest.mark.asyncio
    async def test_missing_title(self, client, user):
        response = await client.post(
            "/api/categories", params={"userId": user["_id"]}, json={"description": "d"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to create category!"


class TestListCategories:

    @pytest.mark.asyncio
    async def test_only_own_categories(self, client, user, other_user, category):
        await client.post(
            "/api/categories", params={"userId": other_user["_id"]}, json={"title": "Bob's"},
        )

        response = await client.get("/api/categories", params={"userId": user["_id"]})

        assert response.status_code == 200
        titles = [c["title"] for c in response.json()["categories"]]
        assert titles == ["Programming"]

    @pytest.mark.asyncio
    async def test_keywords_match_title_or_description(self, client, user, insert):
        await insert(
            Category(user_id=user["_id"], title="Python", description="snakes"),
            Category(user_id=user["_id"], title="Cooking", description="python-free pasta"),
            Category(user_id=user["_id"], title="Garden", description="roses"),
        )

        response = await client.get(
            "/api/categories", params={"userId": user["_id"], "keywords": "PYTHON"},
        )

        titles = {c["title"] for c in response.json()["categories"]}
        assert titles == {"Python", "Cooking"}

    @pytest.mark.asyncio
    async def test_pagination(self, client, user, insert):
        await insert(*[
            Category(user_id=user["_id"], title=f"c{i}") for i in range(7)
        ])

        page_two = await client.get(
            "/api/categories", params={"userId": user["_id"], "page": 2, "limit": 5},
        )

        assert len(page_two.json()["categories"]) == 2

    @pytest.mark.asyncio
    async def test_date_range(self, client, user, insert):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        await insert(*[
            Category(user_id=user["_id"], title=f"day{d}", created_at=base + timedelta(days=d))
            for d in (0, 10, 40)
        ])

        response = await client.get(
            "/api/categories",
            params={"userId": user["_id"], "startDate": "2024-01-05", "endDate": "2024-01-31"},
        )

        assert [c["title"] for c in response.json()["categories"]] == ["day10"]

    @pytest.mark.asyncio
    async def test_invalid_page(self, client, user):
        response = await client.get(
            "/api/categories", params={"userId": user["_id"], "page": 0},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Error in fetching category!"
        assert response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_user(self, client):
        response = await client.get("/api/categories", params={"userId": MISSING_ID})

        assert response.status_code == 404
        assert response.json() == {"message": "User not found!"}


class TestUpdateCategory:

    @pytest.mark.asyncio
    async def test_update(self, client, user, category):
        response = await client.patch(
            f"/api/categories/{category['_id']}",
            params={"userId": user["_id"]},
            json={"title": "Code", "description": "Renamed"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Category updated successfully!"
        assert data["category"]["title"] == "Code"
        assert data["category"]["description"] == "Renamed"

    @pytest.mark.asyncio
    async def test_empty_title(self, client, user, category):
        response = await client.patch(
            f"/api/categories/{category['_id']}",
            params={"userId": user["_id"]},
            json={"title": "", "description": "d"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid input data"}

    @pytest.mark.asyncio
    async def test_other_users_category(self, client, other_user, category):
        response = await client.patch(
            f"/api/categories/{category['_id']}",
            params={"userId": other_user["_id"]},
            json={"title": "Mine", "description": "now"},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found!"}

    @pytest.mark.asyncio
    async def test_ownership_checked_before_body(self, client, user):
        response = await client.patch(
            f"/api/categories/{MISSING_ID}",
            params={"userId": user["_id"]},
            content=b"{broken",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found!"}


class TestDeleteCategory:

    @pytest.mark.asyncio
    async def test_delete_keeps_blogs(self, client, db_store, user, category):
        await client.post(
            "/api/blogs",
            params={"userId": user["_id"], "categoryId": category["_id"]},
            json={"title": "Stays", "description": "behind"},
        )

        response = await client.delete(
            f"/api/categories/{category['_id']}", params={"userId": user["_id"]},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Category deleted successfully!"
        assert response.json()["category"]["_id"] == category["_id"]

        async with db_store.session_factory() as session:
            blogs = (await session.execute(Blog.__table__.select())).all()
            assert len(blogs) == 1

    @pytest.mark.asyncio
    async def test_delete_twice(self, client, user, category):
        path = f"/api/categories/{category['_id']}"
        await client.delete(path, params={"userId": user["_id"]})

        response = await client.delete(path, params={"userId": user["_id"]})

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found!"}

"""Unit tests for the branch routes."""

from __future__ import annotations

from decimal import Decimal

from fastapi import status

from admin.infrastructure.models import BranchModel
from admin.ports import DuplicateBranchNameError, NewBranch, Page


class TestCreateBranch:
    def test_creates_branch(self, test_client, branch_repository):
        response = test_client.post(
            "/branches",
            json={
                "tenant_id": "1",
                "name": "  Main Branch ",
                "name_ar": "الفرع الرئيسي",
                "address": "",
                "latitude": "24.7136",
                "longitude": 46.6753,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"message": "Branch created successfully."}
        branch_repository.create.assert_awaited_once_with(
            NewBranch(
                tenant_id=1,
                name="Main Branch",
                name_ar="الفرع الرئيسي",
                latitude=Decimal("24.7136"),
                longitude=Decimal("46.6753"),
            )
        )

    def test_optional_fields_are_checked_when_present(self, test_client):
        response = test_client.post(
            "/branches",
            json={"tenant_id": 1, "name": "Main", "name_ar": "فر", "latitude": "north"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "name_ar": "Arabic Branch Name must be at least 3 characters.",
                "latitude": "Latitude must be a decimal number.",
            }
        }

    def test_coordinate_beyond_column_is_400(self, test_client, branch_repository):
        response = test_client.post(
            "/branches",
            json={"tenant_id": 1, "name": "Main Branch", "longitude": "1000.5"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": {"longitude": "Longitude is out of range."}}
        branch_repository.create.assert_not_awaited()

    def test_messages_in_arabic(self, test_client):
        response = test_client.post(
            "/branches", json={"tenant_id": 1}, headers={"Accept-Language": "ar"}
        )

        assert response.json() == {"error": {"name": "الحقل اسم الفرع مطلوب."}}

    def test_duplicate_name_is_409(self, test_client, branch_repository):
        branch_repository.create.side_effect = DuplicateBranchNameError("dup")

        response = test_client.post("/branches", json={"tenant_id": 1, "name": "Main"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "Branch already exists."}


class TestListBranches:
    def test_lists_branches(self, test_client, branch_repository):
        branch_repository.list_page.return_value = Page(
            items=[BranchModel(id=2, tenant_id=1, name="Main")],
            count=1,
            page=1,
            page_size=20,
        )

        response = test_client.get("/branches", params={"tenant_id": 1})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"][0]["name"] == "Main"
        assert response.json()["totalPages"] == 1

    def test_missing_tenant_message(self, test_client):
        response = test_client.get("/branches", params={"tenant_id": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Tenant ID is missing."}


class TestDeleteBranches:
    def test_deletes(self, test_client, branch_repository):
        branch_repository.delete_many.return_value = 3

        response = test_client.request(
            "DELETE", "/branches", json={"tenant_id": "1", "branch_ids": [1, 2, 3]}
        )

        assert response.json() == {"message": "3 branch(es) deleted successfully."}
        branch_repository.delete_many.assert_awaited_once_with(1, [1, 2, 3])

    def test_ids_of_other_tenant_only_is_404(self, test_client, branch_repository):
        branch_repository.delete_many.return_value = 0

        response = test_client.request(
            "DELETE", "/branches", json={"tenant_id": 1, "branch_ids": [77]}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "No matching branches found."}

    def test_foreign_tenant_is_401(self, test_client, branch_repository):
        response = test_client.request(
            "DELETE", "/branches", json={"tenant_id": 2, "branch_ids": [1]}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        branch_repository.delete_many.assert_not_awaited()
